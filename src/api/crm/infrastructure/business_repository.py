"""PostgreSQL implementation of IBusinessRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm.domain.aggregates import Business
from crm.domain.value_objects import BusinessId
from crm.infrastructure.mappers import business_from_model
from crm.infrastructure.models import BusinessModel
from crm.infrastructure.observability import (
    BusinessRepositoryProbe,
    DefaultBusinessRepositoryProbe,
)
from crm.ports.repositories import IBusinessRepository


class BusinessRepository(IBusinessRepository):
    """Repository managing PostgreSQL storage for Business aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: BusinessRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultBusinessRepositoryProbe()

    async def save(self, business: Business) -> None:
        model = await self._session.get(BusinessModel, business.id.value)
        if model is None:
            model = BusinessModel(
                id=business.id.value,
                tenant_id=business.tenant_id,
                created_by=business.created_by,
            )
            if business.created_at is not None:
                model.created_at = business.created_at
            self._session.add(model)

        model.name = business.name
        model.address = business.address
        model.city = business.city
        model.state = business.state
        model.zip_code = business.zip_code
        model.place_id = business.place_id

        await self._session.flush()
        self._probe.business_saved(business.id.value)

    async def get_by_id(self, business_id: BusinessId) -> Business | None:
        model = await self._session.get(BusinessModel, business_id.value)
        return business_from_model(model) if model else None

    async def get_by_place_id(self, tenant_id: str, place_id: str) -> Business | None:
        stmt = select(BusinessModel).where(
            BusinessModel.tenant_id == tenant_id,
            BusinessModel.place_id == place_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return business_from_model(model) if model else None

    async def list_by_tenant(self, tenant_id: str) -> list[Business]:
        stmt = (
            select(BusinessModel)
            .where(BusinessModel.tenant_id == tenant_id)
            .order_by(BusinessModel.name, BusinessModel.id)
        )
        result = await self._session.execute(stmt)
        return [business_from_model(m) for m in result.scalars().all()]

    async def delete(self, business: Business) -> bool:
        model = await self._session.get(BusinessModel, business.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        self._probe.business_deleted(business.id.value)
        return True
