"""Pydantic models for calendar event API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from crm.domain.aggregates import CalendarEvent
from crm.domain.value_objects import EventPriority, EventStatus, EventType
from shared_kernel.api_models import CamelModel

_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class CreateCalendarEventRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    date: datetime
    description: str | None = None
    start_time: str | None = Field(default=None, pattern=_HHMM)
    end_time: str | None = Field(default=None, pattern=_HHMM)
    type: EventType = EventType.OTHER
    contact_id: str | None = None
    priority: EventPriority | None = None
    location: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class UpdateCalendarEventRequest(CamelModel):
    """Partial update. Sending ``contactId: null`` unlinks the contact."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    date: datetime | None = None
    description: str | None = None
    start_time: str | None = Field(default=None, pattern=_HHMM)
    end_time: str | None = Field(default=None, pattern=_HHMM)
    type: EventType | None = None
    contact_id: str | None = None
    priority: EventPriority | None = None
    status: EventStatus | None = None
    location: str | None = Field(default=None, max_length=255)
    notes: str | None = None

    @property
    def unlinks_contact(self) -> bool:
        return "contact_id" in self.model_fields_set and self.contact_id is None


class CalendarEventResponse(CamelModel):
    id: str
    tenant_id: str
    title: str
    description: str | None = None
    date: datetime
    start_time: str | None = None
    end_time: str | None = None
    type: EventType
    contact_id: str | None = None
    priority: EventPriority | None = None
    status: EventStatus
    location: str | None = None
    notes: str | None = None
    created_by: str
    created_at: datetime | None = None
    completed_at: datetime | None = None
    cancelled_at: datetime | None = None

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> CalendarEventResponse:
        """Convert domain CalendarEvent aggregate to API response."""
        return cls(
            id=event.id.value,
            tenant_id=event.tenant_id,
            title=event.title,
            description=event.description,
            date=event.date,
            start_time=event.start_time,
            end_time=event.end_time,
            type=event.type,
            contact_id=event.contact_id.value if event.contact_id else None,
            priority=event.priority,
            status=event.status,
            location=event.location,
            notes=event.notes,
            created_by=event.created_by,
            created_at=event.created_at,
            completed_at=event.completed_at,
            cancelled_at=event.cancelled_at,
        )
