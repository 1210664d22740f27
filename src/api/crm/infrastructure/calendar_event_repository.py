"""PostgreSQL implementation of ICalendarEventRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm.domain.aggregates import CalendarEvent
from crm.domain.value_objects import CalendarEventId
from crm.infrastructure.mappers import calendar_event_from_model
from crm.infrastructure.models import CalendarEventModel
from crm.infrastructure.observability import (
    CalendarEventRepositoryProbe,
    DefaultCalendarEventRepositoryProbe,
)
from crm.ports.repositories import ICalendarEventRepository


class CalendarEventRepository(ICalendarEventRepository):
    """Repository managing PostgreSQL storage for CalendarEvent aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: CalendarEventRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultCalendarEventRepositoryProbe()

    async def save(self, event: CalendarEvent) -> None:
        model = await self._session.get(CalendarEventModel, event.id.value)
        if model is None:
            model = CalendarEventModel(
                id=event.id.value,
                tenant_id=event.tenant_id,
                created_by=event.created_by,
            )
            if event.created_at is not None:
                model.created_at = event.created_at
            self._session.add(model)

        model.title = event.title
        model.description = event.description
        model.date = event.date
        model.start_time = event.start_time
        model.end_time = event.end_time
        model.type = event.type.value
        model.contact_id = event.contact_id.value if event.contact_id else None
        model.priority = event.priority.value if event.priority else None
        model.status = event.status.value
        model.location = event.location
        model.notes = event.notes
        model.completed_at = event.completed_at
        model.cancelled_at = event.cancelled_at

        await self._session.flush()
        self._probe.event_saved(event.id.value)

    async def get_by_id(self, event_id: CalendarEventId) -> CalendarEvent | None:
        model = await self._session.get(CalendarEventModel, event_id.value)
        return calendar_event_from_model(model) if model else None

    async def list_by_tenant(
        self,
        tenant_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEvent]:
        stmt = select(CalendarEventModel).where(
            CalendarEventModel.tenant_id == tenant_id
        )
        if start is not None:
            stmt = stmt.where(CalendarEventModel.date >= start)
        if end is not None:
            stmt = stmt.where(CalendarEventModel.date < end)
        # NULL start times sort after timed events on the same day
        stmt = stmt.order_by(
            CalendarEventModel.date,
            CalendarEventModel.start_time.asc().nulls_last(),
        )
        result = await self._session.execute(stmt)
        return [calendar_event_from_model(m) for m in result.scalars().all()]

    async def delete(self, event: CalendarEvent) -> bool:
        model = await self._session.get(CalendarEventModel, event.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        self._probe.event_deleted(event.id.value)
        return True
