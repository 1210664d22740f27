"""PostgreSQL implementation of IAuthorizationStore.

Reads always hit the database so authorization is re-derived on every
request. Writes are idempotent and never open their own transaction.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Identity, Tenant
from iam.domain.value_objects import (
    IdentityId,
    PermissionGrant,
    TenantId,
    TenantPermission,
)
from iam.infrastructure.mappers import (
    identity_from_model,
    permission_from_model,
    tenant_from_model,
)
from iam.infrastructure.models import IdentityModel, TenantModel, TenantPermissionModel
from iam.infrastructure.observability import (
    AuthorizationStoreProbe,
    DefaultAuthorizationStoreProbe,
)
from iam.ports.authorization import IAuthorizationStore


class AuthorizationStore(IAuthorizationStore):
    """Authorization facts stored in the identities, tenants and
    tenant_permissions tables."""

    def __init__(
        self,
        session: AsyncSession,
        probe: AuthorizationStoreProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultAuthorizationStoreProbe()

    async def get_identity(self, identity_id: IdentityId) -> Identity | None:
        # populate_existing: flag updates issued as bulk UPDATEs must be visible
        stmt = (
            select(IdentityModel)
            .where(IdentityModel.id == identity_id.value)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return identity_from_model(model) if model else None

    async def list_permissions(self, identity_id: IdentityId) -> list[TenantPermission]:
        # Inner join drops rows whose tenant no longer exists
        stmt = (
            select(TenantPermissionModel)
            .join(TenantModel, TenantModel.id == TenantPermissionModel.tenant_id)
            .where(TenantPermissionModel.identity_id == identity_id.value)
            .order_by(TenantModel.name, TenantModel.id)
        )
        result = await self._session.execute(stmt)
        return [permission_from_model(m) for m in result.scalars().all()]

    async def get_permission(
        self, identity_id: IdentityId, tenant_id: TenantId
    ) -> TenantPermission | None:
        stmt = (
            select(TenantPermissionModel)
            .join(TenantModel, TenantModel.id == TenantPermissionModel.tenant_id)
            .where(
                TenantPermissionModel.identity_id == identity_id.value,
                TenantPermissionModel.tenant_id == tenant_id.value,
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return permission_from_model(model) if model else None

    async def get_tenant(self, tenant_id: TenantId) -> Tenant | None:
        model = await self._session.get(TenantModel, tenant_id.value)
        return tenant_from_model(model) if model else None

    async def list_tenants(self) -> list[Tenant]:
        stmt = select(TenantModel).order_by(TenantModel.name, TenantModel.id)
        result = await self._session.execute(stmt)
        return [tenant_from_model(m) for m in result.scalars().all()]

    async def upsert_permission(
        self, identity_id: IdentityId, tenant_id: TenantId, can_edit: bool
    ) -> None:
        stmt = insert(TenantPermissionModel).values(
            identity_id=identity_id.value,
            tenant_id=tenant_id.value,
            can_edit=can_edit,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                TenantPermissionModel.identity_id,
                TenantPermissionModel.tenant_id,
            ],
            set_={"can_edit": can_edit, "updated_at": datetime.now(UTC)},
        )
        await self._session.execute(stmt)
        self._probe.permission_upserted(identity_id.value, tenant_id.value, can_edit)

    async def delete_permission(
        self, identity_id: IdentityId, tenant_id: TenantId
    ) -> bool:
        stmt = delete(TenantPermissionModel).where(
            TenantPermissionModel.identity_id == identity_id.value,
            TenantPermissionModel.tenant_id == tenant_id.value,
        )
        result = await self._session.execute(stmt)
        removed = result.rowcount > 0
        if removed:
            self._probe.permission_revoked(identity_id.value, tenant_id.value)
        return removed

    async def replace_permissions(
        self, identity_id: IdentityId, grants: list[PermissionGrant]
    ) -> None:
        await self._session.execute(
            delete(TenantPermissionModel).where(
                TenantPermissionModel.identity_id == identity_id.value
            )
        )
        for grant in grants:
            await self.upsert_permission(identity_id, grant.tenant_id, grant.can_edit)
        self._probe.permissions_replaced(identity_id.value, len(grants))

    async def set_global_admin(
        self, identity_id: IdentityId, is_global_admin: bool
    ) -> bool:
        stmt = (
            update(IdentityModel)
            .where(IdentityModel.id == identity_id.value)
            .values(is_global_admin=is_global_admin, updated_at=datetime.now(UTC))
        )
        result = await self._session.execute(stmt)
        changed = result.rowcount > 0
        if changed:
            self._probe.global_admin_changed(identity_id.value, is_global_admin)
        return changed
