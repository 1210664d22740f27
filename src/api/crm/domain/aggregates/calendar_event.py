"""CalendarEvent aggregate for CRM context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from crm.domain.value_objects import (
    CalendarEventId,
    ContactId,
    EventPriority,
    EventStatus,
    EventType,
)

_TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_time(value: str | None, name: str) -> str | None:
    if value is not None and not _TIME_OF_DAY.match(value):
        raise ValueError(f"{name} must be HH:MM")
    return value


@dataclass
class CalendarEvent:
    """A scheduled activity for a store, optionally about a contact.

    Status moves between scheduled, completed and cancelled. Completion
    and cancellation timestamps track the latest transition.
    """

    id: CalendarEventId
    tenant_id: str
    title: str
    date: datetime
    created_by: str
    description: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    type: EventType = EventType.OTHER
    contact_id: ContactId | None = None
    priority: EventPriority | None = None
    status: EventStatus = EventStatus.SCHEDULED
    location: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    cancelled_at: datetime | None = None

    @classmethod
    def create(
        cls,
        tenant_id: str,
        title: str,
        date: datetime,
        created_by: str,
        description: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        type: EventType = EventType.OTHER,
        contact_id: ContactId | None = None,
        priority: EventPriority | None = None,
        location: str | None = None,
        notes: str | None = None,
    ) -> CalendarEvent:
        """Factory method for scheduling a new event.

        Raises:
            ValueError: If the title is blank or a time is not HH:MM
        """
        if not title.strip():
            raise ValueError("Event title must not be empty")
        return cls(
            id=CalendarEventId.generate(),
            tenant_id=tenant_id,
            title=title.strip(),
            date=date,
            created_by=created_by,
            description=description,
            start_time=_check_time(start_time, "start_time"),
            end_time=_check_time(end_time, "end_time"),
            type=type,
            contact_id=contact_id,
            priority=priority,
            location=location,
            notes=notes,
            created_at=datetime.now(UTC),
        )

    def update(
        self,
        title: str | None = None,
        date: datetime | None = None,
        description: str | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
        type: EventType | None = None,
        priority: EventPriority | None = None,
        location: str | None = None,
        notes: str | None = None,
    ) -> None:
        """Apply a partial update. None leaves a field unchanged."""
        if title is not None:
            if not title.strip():
                raise ValueError("Event title must not be empty")
            self.title = title.strip()
        if date is not None:
            self.date = date
        if description is not None:
            self.description = description
        if start_time is not None:
            self.start_time = _check_time(start_time, "start_time")
        if end_time is not None:
            self.end_time = _check_time(end_time, "end_time")
        if type is not None:
            self.type = type
        if priority is not None:
            self.priority = priority
        if location is not None:
            self.location = location
        if notes is not None:
            self.notes = notes

    def link_contact(self, contact_id: ContactId | None) -> None:
        self.contact_id = contact_id

    def change_status(self, status: EventStatus) -> None:
        """Move to ``status`` and stamp the transition time."""
        if status == self.status:
            return
        now = datetime.now(UTC)
        self.status = status
        if status == EventStatus.COMPLETED:
            self.completed_at = now
            self.cancelled_at = None
        elif status == EventStatus.CANCELLED:
            self.cancelled_at = now
            self.completed_at = None
        else:
            self.completed_at = None
            self.cancelled_at = None
