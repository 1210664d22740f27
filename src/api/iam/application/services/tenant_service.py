"""Tenant application service for IAM bounded context.

Handles tenant management operations (create, read, list, update, delete).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultTenantServiceProbe, TenantServiceProbe
from iam.application.services.access_gate import AccessGate
from iam.domain.aggregates import Tenant
from iam.domain.value_objects import IdentityId, TenantId
from iam.ports.authorization import IAuthorizationStore
from iam.ports.exceptions import TenantNotFoundError, UnauthorizedError
from iam.ports.repositories import ITenantRepository

_RESOURCE = "Tenant"


class TenantService:
    """Application service for tenant management.

    Reads require view access and updates require edit access on the
    tenant itself. Creating and deleting tenants is reserved for global
    admins. Deletion relies on foreign key cascades to remove permissions,
    invitations and tenant-scoped records.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        authorization_store: IAuthorizationStore,
        access_gate: AccessGate,
        session: AsyncSession,
        probe: TenantServiceProbe | None = None,
    ):
        """Initialize TenantService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            authorization_store: Source of truth for permissions
            access_gate: Gate for per-tenant and admin checks
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._tenant_repository = tenant_repository
        self._store = authorization_store
        self._gate = access_gate
        self._session = session
        self._probe = probe or DefaultTenantServiceProbe()

    async def create_tenant(
        self,
        caller_id: IdentityId,
        name: str,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
    ) -> Tenant:
        """Create a new tenant.

        Raises:
            UnauthorizedError: If the caller is not a global admin
            InvalidTenantError: If the name is blank or too long
        """
        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)
            tenant = Tenant.create(
                name=name,
                created_by=caller_id,
                address=address,
                city=city,
                state=state,
                zip_code=zip_code,
            )
            await self._tenant_repository.save(tenant)

        self._probe.tenant_created(
            tenant_id=tenant.id.value, name=tenant.name, created_by=caller_id.value
        )
        return tenant

    async def get_tenant(self, caller_id: IdentityId, tenant_id: str) -> Tenant:
        """Retrieve a tenant the caller can view.

        Raises:
            TenantAccessDeniedError: If the tenant is missing or not visible
        """
        async with self._session.begin():
            await self._gate.require_view(caller_id.value, tenant_id, _RESOURCE)
            tenant = await self._get_or_raise(tenant_id)

        self._probe.tenant_retrieved(tenant_id=tenant.id.value)
        return tenant

    async def list_tenants(self, caller_id: IdentityId) -> list[Tenant]:
        """List tenants the caller can view, ordered by name."""
        async with self._session.begin():
            identity = await self._store.get_identity(caller_id)
            if identity is None:
                tenants: list[Tenant] = []
            else:
                tenants = await self._store.list_tenants()
                if not identity.is_global_admin:
                    permitted = {
                        permission.tenant_id
                        for permission in await self._store.list_permissions(caller_id)
                    }
                    tenants = [tenant for tenant in tenants if tenant.id in permitted]

        self._probe.tenants_listed(count=len(tenants))
        return tenants

    async def update_tenant(
        self,
        caller_id: IdentityId,
        tenant_id: str,
        name: str | None = None,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
    ) -> Tenant:
        """Update a tenant the caller can edit.

        Raises:
            TenantAccessDeniedError: If the tenant is missing or not editable
            InvalidTenantError: If the new name is blank or too long
        """
        async with self._session.begin():
            await self._gate.require_edit(caller_id.value, tenant_id, _RESOURCE)
            tenant = await self._get_or_raise(tenant_id)
            tenant.update(
                name=name, address=address, city=city, state=state, zip_code=zip_code
            )
            await self._tenant_repository.save(tenant)

        self._probe.tenant_updated(tenant_id=tenant.id.value)
        return tenant

    async def delete_tenant(self, caller_id: IdentityId, tenant_id: str) -> None:
        """Delete a tenant (global admin only).

        A caller who cannot see the tenant gets the not-found error. A caller
        who can see it but is not an admin gets the operation-level denial.

        Raises:
            TenantAccessDeniedError: If the tenant is missing or not visible
            UnauthorizedError: If the caller can see it but is not an admin
        """
        async with self._session.begin():
            if not await self._gate.can_access(caller_id.value, tenant_id):
                raise TenantNotFoundError(tenant_id)
            if not await self._gate.is_global_admin(caller_id.value):
                raise UnauthorizedError("Only global admins can delete tenants")

            tenant = await self._get_or_raise(tenant_id)
            await self._tenant_repository.delete(tenant)

        self._probe.tenant_deleted(tenant_id=tenant_id, deleted_by=caller_id.value)

    async def _get_or_raise(self, tenant_id: str) -> Tenant:
        # The gate rejects malformed ids before this point
        parsed = TenantId.from_string(tenant_id)
        tenant = await self._tenant_repository.get_by_id(parsed)
        if tenant is None:
            self._probe.tenant_not_found(tenant_id=tenant_id)
            raise TenantNotFoundError(tenant_id)
        return tenant
