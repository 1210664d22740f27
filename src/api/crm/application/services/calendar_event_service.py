"""Calendar event application service for CRM bounded context."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.observability import (
    CalendarEventServiceProbe,
    DefaultCalendarEventServiceProbe,
)
from crm.domain.aggregates import CalendarEvent
from crm.domain.value_objects import (
    CalendarEventId,
    ContactId,
    EventPriority,
    EventStatus,
    EventType,
)
from crm.ports.exceptions import CalendarEventNotFoundError, ContactNotFoundError
from crm.ports.repositories import ICalendarEventRepository, IContactRepository
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from shared_kernel.authorization.protocols import TenantAccessChecker
from shared_kernel.authorization.types import AccessLevel


class CalendarEventService:
    """Application service for a tenant's calendar.

    Follows the same access rules as contacts. An event may point at a
    contact only when that contact lives in the event's tenant.
    """

    def __init__(
        self,
        event_repository: ICalendarEventRepository,
        contact_repository: IContactRepository,
        access_checker: TenantAccessChecker,
        session: AsyncSession,
        probe: CalendarEventServiceProbe | None = None,
    ):
        self._event_repository = event_repository
        self._contact_repository = contact_repository
        self._access = access_checker
        self._session = session
        self._probe = probe or DefaultCalendarEventServiceProbe()

    async def list_events(
        self,
        caller_id: str,
        tenant_id: str,
        on: date | None = None,
    ) -> list[CalendarEvent]:
        """List a tenant's events, optionally restricted to one UTC day.

        Raises:
            TenantAccessDeniedError: If the caller cannot view the tenant
        """
        start = end = None
        if on is not None:
            start = datetime.combine(on, time.min, tzinfo=UTC)
            end = start + timedelta(days=1)

        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.VIEW, "Tenant")
            events = await self._event_repository.list_by_tenant(
                tenant_id, start=start, end=end
            )

        self._probe.events_listed(tenant_id=tenant_id, count=len(events))
        return events

    async def create_event(
        self,
        caller_id: str,
        tenant_id: str,
        title: str,
        date: datetime,
        description: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        type: EventType = EventType.OTHER,
        contact_id: str | None = None,
        priority: EventPriority | None = None,
        location: str | None = None,
        notes: str | None = None,
    ) -> CalendarEvent:
        """Schedule an event in a tenant the caller can edit.

        Raises:
            TenantAccessDeniedError: If the caller cannot edit the tenant
            ContactNotFoundError: If the linked contact is not in the tenant
            ValueError: If the title is blank or a time is malformed
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.EDIT, "Tenant")
            linked = await self._contact_in_tenant(contact_id, tenant_id)
            event = CalendarEvent.create(
                tenant_id=tenant_id,
                title=title,
                date=date,
                created_by=caller_id,
                description=description,
                start_time=start_time,
                end_time=end_time,
                type=type,
                contact_id=linked,
                priority=priority,
                location=location,
                notes=notes,
            )
            await self._event_repository.save(event)

        self._probe.event_created(
            event_id=event.id.value, tenant_id=tenant_id, created_by=caller_id
        )
        return event

    async def get_event(self, caller_id: str, event_id: str) -> CalendarEvent:
        """Return an event.

        Raises:
            CalendarEventNotFoundError: If missing or not visible to the caller
        """
        async with self._session.begin():
            return await self._load(caller_id, event_id, AccessLevel.VIEW)

    async def update_event(
        self,
        caller_id: str,
        event_id: str,
        title: str | None = None,
        date: datetime | None = None,
        description: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        type: EventType | None = None,
        priority: EventPriority | None = None,
        status: EventStatus | None = None,
        location: str | None = None,
        notes: str | None = None,
        contact_id: str | None = None,
        unlink_contact: bool = False,
    ) -> CalendarEvent:
        """Apply a partial update to an event.

        ``contact_id`` relinks the event; ``unlink_contact`` clears the link.

        Raises:
            CalendarEventNotFoundError: If missing or not editable by the caller
            ContactNotFoundError: If the new contact is not in the event's tenant
        """
        async with self._session.begin():
            event = await self._load(caller_id, event_id, AccessLevel.EDIT)
            event.update(
                title=title,
                date=date,
                description=description,
                start_time=start_time,
                end_time=end_time,
                type=type,
                priority=priority,
                location=location,
                notes=notes,
            )
            if status is not None:
                event.change_status(status)
            if unlink_contact:
                event.link_contact(None)
            elif contact_id is not None:
                event.link_contact(
                    await self._contact_in_tenant(contact_id, event.tenant_id)
                )
            await self._event_repository.save(event)

        self._probe.event_updated(
            event_id=event.id.value, tenant_id=event.tenant_id, status=event.status
        )
        return event

    async def delete_event(self, caller_id: str, event_id: str) -> None:
        """Delete an event.

        Raises:
            CalendarEventNotFoundError: If missing or not editable by the caller
        """
        async with self._session.begin():
            event = await self._load(caller_id, event_id, AccessLevel.EDIT)
            await self._event_repository.delete(event)

        self._probe.event_deleted(
            event_id=event.id.value, tenant_id=event.tenant_id, deleted_by=caller_id
        )

    async def _load(
        self, caller_id: str, event_id: str, level: AccessLevel
    ) -> CalendarEvent:
        try:
            parsed = CalendarEventId.from_string(event_id)
        except ValueError:
            self._probe.event_not_found(event_id=event_id)
            raise CalendarEventNotFoundError() from None

        event = await self._event_repository.get_by_id(parsed)
        if event is None:
            self._probe.event_not_found(event_id=event_id)
            raise CalendarEventNotFoundError()

        try:
            await self._access.require(caller_id, event.tenant_id, level, "Event")
        except TenantAccessDeniedError:
            raise CalendarEventNotFoundError() from None
        return event

    async def _contact_in_tenant(
        self, contact_id: str | None, tenant_id: str
    ) -> ContactId | None:
        if contact_id is None:
            return None
        try:
            parsed = ContactId.from_string(contact_id)
        except ValueError:
            raise ContactNotFoundError() from None
        contact = await self._contact_repository.get_by_id(parsed)
        if contact is None or contact.tenant_id != tenant_id:
            raise ContactNotFoundError()
        return contact.id
