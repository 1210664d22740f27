"""Active tenant selection and persistence."""

from __future__ import annotations

from client.observability import DefaultTenantSelectorProbe, TenantSelectorProbe
from client.ports import KeyValueStore
from client.snapshot import PermissionSnapshot

DEFAULT_SELECTED_TENANT_KEY = "selected_tenant_id"


class TenantSelector:
    """Owns the active tenant id for one session.

    The id is mirrored in a KeyValueStore so it survives restarts. The
    store is always written before the in-memory copy changes, so a failed
    write leaves both untouched and they never disagree.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_SELECTED_TENANT_KEY,
        probe: TenantSelectorProbe | None = None,
    ):
        self._store = store
        self._key = key
        self._probe = probe or DefaultTenantSelectorProbe()
        self._active: str | None = None

    @property
    def active_tenant_id(self) -> str | None:
        return self._active

    def set_active_tenant(self, tenant_id: str, reason: str = "explicit") -> None:
        """Persist ``tenant_id`` and make it active.

        Raises:
            Exception: Whatever the store raises; state is then unchanged
        """
        self._store.set(self._key, tenant_id)
        self._active = tenant_id
        self._probe.active_tenant_selected(tenant_id=tenant_id, reason=reason)

    def clear(self, reason: str = "explicit") -> None:
        """Remove the persisted and in-memory selection."""
        previous = self._active
        self._store.delete(self._key)
        self._active = None
        self._probe.active_tenant_cleared(tenant_id=previous, reason=reason)

    def resolve(self, snapshot: PermissionSnapshot) -> str | None:
        """Reconcile the saved selection with a fresh snapshot.

        Runs without awaiting, so no caller observes a half-resolved state.

        Returns:
            The active tenant id after resolution, or None
        """
        saved = self._active or self._store.get(self._key)
        self._active = saved

        if saved is not None and not self._still_allowed(saved, snapshot):
            self.clear(reason="access_revoked")
            saved = None

        if saved is not None:
            return saved

        if snapshot.identity is None:
            return None

        if snapshot.is_global_admin:
            if len(snapshot.tenants) == 1:
                self.set_active_tenant(snapshot.tenants[0].id, reason="single_tenant")
            return self._active

        grants = snapshot.ordered_grants()
        if grants:
            self.set_active_tenant(grants[0].tenant_id, reason="first_permitted")
        return self._active

    @staticmethod
    def _still_allowed(tenant_id: str, snapshot: PermissionSnapshot) -> bool:
        if snapshot.identity is None:
            return False
        if snapshot.is_global_admin:
            return snapshot.has_tenant(tenant_id)
        return snapshot.grant_for(tenant_id) is not None
