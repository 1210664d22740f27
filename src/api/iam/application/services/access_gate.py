"""Access gate for tenant-scoped requests.

The gate re-derives authorization from the authorization store on every
call. It never trusts tenant ids or flags supplied by the client beyond
treating them as the thing being asked about.
"""

from __future__ import annotations

from iam.application.observability import AccessGateProbe, DefaultAccessGateProbe
from iam.domain.aggregates import Identity
from iam.domain.value_objects import IdentityId, TenantId
from iam.ports.authorization import IAuthorizationStore
from iam.ports.exceptions import UnauthorizedError
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from shared_kernel.authorization.types import AccessLevel


class AccessGate:
    """Server-side predicate guarding every tenant-scoped request.

    Stateless apart from its collaborators; every method is an idempotent
    read, so it is safe under any concurrency. It performs no transaction
    management and runs inside the calling service's unit of work.

    Denials on a tenant raise TenantAccessDeniedError, which presentation
    maps to the same 404 as a missing record. Denials on admin-only
    operations raise UnauthorizedError (403).
    """

    def __init__(
        self,
        authorization_store: IAuthorizationStore,
        probe: AccessGateProbe | None = None,
    ):
        self._store = authorization_store
        self._probe = probe or DefaultAccessGateProbe()

    async def can_access(self, identity_id: str, tenant_id: str) -> bool:
        """Return True if the identity may view the tenant."""
        return await self._check(identity_id, tenant_id, AccessLevel.VIEW)

    async def can_edit(self, identity_id: str, tenant_id: str) -> bool:
        """Return True if the identity may modify the tenant."""
        return await self._check(identity_id, tenant_id, AccessLevel.EDIT)

    async def is_global_admin(self, identity_id: str) -> bool:
        """Return True if the identity exists and is a global admin."""
        identity = await self._load_identity(identity_id)
        return identity is not None and identity.is_global_admin

    async def require(
        self,
        identity_id: str,
        tenant_id: str,
        level: AccessLevel,
        resource: str = "Resource",
    ) -> None:
        """Raise unless the identity holds ``level`` on the tenant.

        Unlike the boolean predicates, this also rejects a tenant that does
        not exist, so an admin writing into an unknown tenant is refused here
        rather than at the database.

        Raises:
            TenantAccessDeniedError: Reads as "<resource> not found"
        """
        if not await self._check(identity_id, tenant_id, level, tenant_must_exist=True):
            raise TenantAccessDeniedError(resource, tenant_id=tenant_id)

    async def require_view(
        self, identity_id: str, tenant_id: str, resource: str = "Resource"
    ) -> None:
        await self.require(identity_id, tenant_id, AccessLevel.VIEW, resource)

    async def require_edit(
        self, identity_id: str, tenant_id: str, resource: str = "Resource"
    ) -> None:
        await self.require(identity_id, tenant_id, AccessLevel.EDIT, resource)

    async def require_global_admin(self, identity_id: str) -> Identity:
        """Return the caller's identity if it is a global admin.

        Raises:
            UnauthorizedError: If the caller is unknown or not an admin
        """
        identity = await self._load_identity(identity_id)
        if identity is None or not identity.is_global_admin:
            self._probe.global_admin_required(identity_id=identity_id)
            raise UnauthorizedError("Global admin access required")
        return identity

    async def _load_identity(self, identity_id: str) -> Identity | None:
        try:
            parsed = IdentityId.from_string(identity_id)
        except ValueError:
            return None
        return await self._store.get_identity(parsed)

    async def _check(
        self,
        identity_id: str,
        tenant_id: str,
        level: AccessLevel,
        tenant_must_exist: bool = False,
    ) -> bool:
        try:
            parsed_tenant = TenantId.from_string(tenant_id)
        except ValueError:
            self._deny(identity_id, tenant_id, level, "malformed_tenant_id")
            return False

        identity = await self._load_identity(identity_id)
        if identity is None:
            self._deny(identity_id, tenant_id, level, "unknown_identity")
            return False

        if identity.is_global_admin:
            missing = (
                tenant_must_exist
                and await self._store.get_tenant(parsed_tenant) is None
            )
            if missing:
                self._deny(identity_id, tenant_id, level, "unknown_tenant")
                return False
            self._probe.tenant_access_granted(
                identity_id=identity_id,
                tenant_id=tenant_id,
                level=level.value,
                via_admin=True,
            )
            return True

        permission = await self._store.get_permission(identity.id, parsed_tenant)
        if not identity.has_access(permission, level):
            reason = "no_permission" if permission is None else "view_only"
            self._deny(identity_id, tenant_id, level, reason)
            return False

        self._probe.tenant_access_granted(
            identity_id=identity_id,
            tenant_id=tenant_id,
            level=level.value,
            via_admin=False,
        )
        return True

    def _deny(
        self, identity_id: str, tenant_id: str, level: AccessLevel, reason: str
    ) -> None:
        self._probe.tenant_access_denied(
            identity_id=identity_id,
            tenant_id=tenant_id,
            level=level.value,
            reason=reason,
        )
