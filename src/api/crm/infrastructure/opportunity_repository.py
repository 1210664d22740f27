"""PostgreSQL implementation of IOpportunityRepository."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from crm.domain.aggregates import Opportunity
from crm.domain.value_objects import OpportunityId, OpportunityStatus
from crm.infrastructure.mappers import opportunity_from_model
from crm.infrastructure.models import OpportunityModel
from crm.infrastructure.observability import (
    DefaultOpportunityRepositoryProbe,
    OpportunityRepositoryProbe,
)
from crm.ports.repositories import IOpportunityRepository


class OpportunityRepository(IOpportunityRepository):
    """Repository managing PostgreSQL storage for Opportunity aggregates.

    New opportunities are inserted in one statement that skips places the
    tenant has already recorded, so a repeated discovery run is harmless.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: OpportunityRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultOpportunityRepositoryProbe()

    async def add_new(self, opportunities: list[Opportunity]) -> list[Opportunity]:
        if not opportunities:
            return []

        now = datetime.now(UTC)
        stmt = (
            insert(OpportunityModel)
            .values(
                [
                    {
                        "id": o.id.value,
                        "tenant_id": o.tenant_id,
                        "place_id": o.place_id,
                        "name": o.name,
                        "address": o.address,
                        "city": o.city,
                        "state": o.state,
                        "zip_code": o.zip_code,
                        "status": o.status.value,
                        "created_by": o.created_by,
                        "created_at": o.created_at or now,
                        "updated_at": now,
                    }
                    for o in opportunities
                ]
            )
            .on_conflict_do_nothing(
                index_elements=[OpportunityModel.tenant_id, OpportunityModel.place_id]
            )
            .returning(OpportunityModel.id)
        )
        result = await self._session.execute(stmt)
        inserted_ids = set(result.scalars().all())

        inserted = [o for o in opportunities if o.id.value in inserted_ids]
        self._probe.opportunities_inserted(
            tenant_id=opportunities[0].tenant_id,
            offered=len(opportunities),
            inserted=len(inserted),
        )
        return inserted

    async def save(self, opportunity: Opportunity) -> None:
        """Write the mutable state of an existing opportunity."""
        model = await self._session.get(OpportunityModel, opportunity.id.value)
        if model is None:
            raise ValueError(f"Opportunity {opportunity.id.value} is not stored")

        model.name = opportunity.name
        model.address = opportunity.address
        model.city = opportunity.city
        model.state = opportunity.state
        model.zip_code = opportunity.zip_code
        model.status = opportunity.status.value
        model.business_id = (
            opportunity.business_id.value if opportunity.business_id else None
        )
        model.converted_at = opportunity.converted_at

        await self._session.flush()
        self._probe.opportunity_saved(opportunity.id.value)

    async def get_by_id(self, opportunity_id: OpportunityId) -> Opportunity | None:
        # populate_existing: rows written by add_new bypass the identity map
        stmt = (
            select(OpportunityModel)
            .where(OpportunityModel.id == opportunity_id.value)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return opportunity_from_model(model) if model else None

    async def list_by_tenant(
        self, tenant_id: str, status: OpportunityStatus
    ) -> list[Opportunity]:
        stmt = (
            select(OpportunityModel)
            .where(
                OpportunityModel.tenant_id == tenant_id,
                OpportunityModel.status == status.value,
            )
            .order_by(OpportunityModel.created_at.desc(), OpportunityModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [opportunity_from_model(m) for m in result.scalars().all()]
