"""Caller-side permission state for one session."""

from __future__ import annotations

import asyncio
from enum import StrEnum

from client.exceptions import PermissionFetchError, TenantNotSelectableError
from client.observability import (
    DefaultPermissionResolverProbe,
    PermissionResolverProbe,
)
from client.ports import AuthorizationSummarySource
from client.selector import TenantSelector
from client.snapshot import PermissionSnapshot


class AppRoute(StrEnum):
    """Which top-level screen the caller should see."""

    LOADING = "loading"
    PROVISIONING = "provisioning"
    NO_ACCESS = "no_access"
    SELECT_TENANT = "select_tenant"
    WORKSPACE = "workspace"


class PermissionResolver:
    """Holds the latest PermissionSnapshot and answers access questions.

    Answers are a convenience for the caller. The server re-checks every
    request, so a stale snapshot can hide or show controls but never grant
    access.

    A failed refresh keeps the last good snapshot and active tenant;
    ``last_error`` holds the failure until the next successful refresh.
    """

    def __init__(
        self,
        source: AuthorizationSummarySource,
        selector: TenantSelector,
        probe: PermissionResolverProbe | None = None,
    ):
        self._source = source
        self._selector = selector
        self._probe = probe or DefaultPermissionResolverProbe()
        self._snapshot: PermissionSnapshot | None = None
        self._lock = asyncio.Lock()
        self.last_error: PermissionFetchError | None = None

    @property
    def snapshot(self) -> PermissionSnapshot | None:
        return self._snapshot

    @property
    def active_tenant_id(self) -> str | None:
        return self._selector.active_tenant_id

    async def refresh(self) -> bool:
        """Fetch a new snapshot and re-resolve the active tenant.

        Returns:
            True if the snapshot was replaced, False if the fetch failed
        """
        async with self._lock:
            try:
                snapshot = await self._source.fetch_summary()
            except PermissionFetchError as e:
                self.last_error = e
                self._probe.permission_fetch_failed(
                    error=str(e), status_code=e.status_code
                )
                return False

            self._snapshot = snapshot
            self.last_error = None
            self._selector.resolve(snapshot)

        self._probe.permissions_refreshed(
            identity_id=snapshot.identity.id if snapshot.identity else None,
            grant_count=len(snapshot.tenant_permissions),
            is_global_admin=snapshot.is_global_admin,
        )
        return True

    async def sync(self, email: str, display_name: str | None = None) -> bool:
        """Provision the caller's identity, then refresh.

        Raises:
            PermissionFetchError: If the sync call itself fails
        """
        await self._source.sync(email, display_name)
        self._probe.identity_synced(email=email)
        return await self.refresh()

    def is_admin(self) -> bool:
        return self._snapshot is not None and self._snapshot.is_global_admin

    def has_any_access(self) -> bool:
        """True for admins and for identities holding at least one grant."""
        if self._snapshot is None or self._snapshot.identity is None:
            return False
        return self.is_admin() or bool(self._snapshot.tenant_permissions)

    def can_view(self, tenant_id: str | None = None) -> bool:
        """Whether the caller may view ``tenant_id`` (default: active tenant)."""
        if self.is_admin():
            return True
        grant = self._grant(tenant_id)
        return grant is not None

    def can_edit(self, tenant_id: str | None = None) -> bool:
        """Whether the caller may edit ``tenant_id`` (default: active tenant)."""
        if self.is_admin():
            return True
        grant = self._grant(tenant_id)
        return grant is not None and grant.can_edit

    def select_tenant(self, tenant_id: str) -> None:
        """Make ``tenant_id`` the active tenant.

        Raises:
            TenantNotSelectableError: If the caller cannot view it
        """
        if self._snapshot is None:
            raise TenantNotSelectableError(tenant_id)
        if self.is_admin():
            allowed = self._snapshot.has_tenant(tenant_id)
        else:
            allowed = self._snapshot.grant_for(tenant_id) is not None
        if not allowed:
            raise TenantNotSelectableError(tenant_id)
        self._selector.set_active_tenant(tenant_id)

    def route(self) -> AppRoute:
        if self._snapshot is None:
            return AppRoute.LOADING
        if self._snapshot.identity is None:
            return AppRoute.PROVISIONING
        if not self.has_any_access():
            return AppRoute.NO_ACCESS
        if self._selector.active_tenant_id is None:
            return AppRoute.SELECT_TENANT
        return AppRoute.WORKSPACE

    def _grant(self, tenant_id: str | None):
        if self._snapshot is None:
            return None
        target = tenant_id or self._selector.active_tenant_id
        if target is None:
            return None
        return self._snapshot.grant_for(target)
