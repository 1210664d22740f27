"""PostgreSQL implementation of ITenantRepository.

Tenants have no relationships to reconstitute; permissions and
tenant-scoped records reference them through cascading foreign keys.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId
from iam.infrastructure.mappers import tenant_from_model
from iam.infrastructure.models import TenantModel
from iam.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.ports.repositories import ITenantRepository


class TenantRepository(ITenantRepository):
    """Repository managing PostgreSQL storage for Tenant aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def save(self, tenant: Tenant) -> None:
        """Persist tenant metadata to PostgreSQL.

        Args:
            tenant: The Tenant aggregate to persist
        """
        model = await self._session.get(TenantModel, tenant.id.value)
        if model:
            model.name = tenant.name
            model.address = tenant.address
            model.city = tenant.city
            model.state = tenant.state
            model.zip_code = tenant.zip_code
        else:
            model = TenantModel(
                id=tenant.id.value,
                name=tenant.name,
                address=tenant.address,
                city=tenant.city,
                state=tenant.state,
                zip_code=tenant.zip_code,
                created_by=tenant.created_by.value,
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.tenant_saved(tenant.id.value)

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Fetch tenant metadata from PostgreSQL.

        Args:
            tenant_id: The unique identifier of the tenant

        Returns:
            The Tenant aggregate, or None if not found
        """
        stmt = select(TenantModel).where(TenantModel.id == tenant_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        self._probe.tenant_retrieved(tenant_id.value)
        return tenant_from_model(model)

    async def list_all(self) -> list[Tenant]:
        """List all tenants, ordered by name.

        Returns:
            List of Tenant aggregates
        """
        stmt = select(TenantModel).order_by(TenantModel.name, TenantModel.id)
        result = await self._session.execute(stmt)
        tenants = [tenant_from_model(model) for model in result.scalars().all()]

        self._probe.tenants_listed(len(tenants))
        return tenants

    async def delete(self, tenant: Tenant) -> bool:
        """Delete tenant from PostgreSQL.

        Args:
            tenant: The Tenant aggregate to delete

        Returns:
            True if deleted, False if not found
        """
        model = await self._session.get(TenantModel, tenant.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.tenant_deleted(tenant.id.value)
        return True
