"""In-memory CRM repositories for service tests."""

from __future__ import annotations

from datetime import datetime

from crm.domain.aggregates import Business, CalendarEvent, Contact, Opportunity
from crm.domain.value_objects import (
    BusinessId,
    CalendarEventId,
    ContactId,
    OpportunityId,
    OpportunityStatus,
)


class InMemoryContactRepository:
    """Dict-backed IContactRepository."""

    def __init__(self) -> None:
        self.contacts: dict[ContactId, Contact] = {}
        self.reachout_writes = 0

    async def save(self, contact: Contact) -> None:
        self.contacts[contact.id] = contact

    async def replace_reachouts(self, contact: Contact) -> None:
        self.reachout_writes += 1

    async def get_by_id(self, contact_id: ContactId) -> Contact | None:
        return self.contacts.get(contact_id)

    async def list_by_tenant(self, tenant_id: str) -> list[Contact]:
        return [c for c in self.contacts.values() if c.tenant_id == tenant_id]

    async def delete(self, contact: Contact) -> bool:
        return self.contacts.pop(contact.id, None) is not None


class InMemoryCalendarEventRepository:
    """Dict-backed ICalendarEventRepository."""

    def __init__(self) -> None:
        self.events: dict[CalendarEventId, CalendarEvent] = {}
        self.last_range: tuple[datetime | None, datetime | None] | None = None

    async def save(self, event: CalendarEvent) -> None:
        self.events[event.id] = event

    async def get_by_id(self, event_id: CalendarEventId) -> CalendarEvent | None:
        return self.events.get(event_id)

    async def list_by_tenant(
        self,
        tenant_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEvent]:
        self.last_range = (start, end)
        return [
            e
            for e in self.events.values()
            if e.tenant_id == tenant_id
            and (start is None or e.date >= start)
            and (end is None or e.date < end)
        ]

    async def delete(self, event: CalendarEvent) -> bool:
        return self.events.pop(event.id, None) is not None


class InMemoryBusinessRepository:
    """Dict-backed IBusinessRepository."""

    def __init__(self) -> None:
        self.businesses: dict[BusinessId, Business] = {}

    async def save(self, business: Business) -> None:
        self.businesses[business.id] = business

    async def get_by_id(self, business_id: BusinessId) -> Business | None:
        return self.businesses.get(business_id)

    async def get_by_place_id(self, tenant_id: str, place_id: str) -> Business | None:
        for business in self.businesses.values():
            if business.tenant_id == tenant_id and business.place_id == place_id:
                return business
        return None

    async def list_by_tenant(self, tenant_id: str) -> list[Business]:
        return sorted(
            (b for b in self.businesses.values() if b.tenant_id == tenant_id),
            key=lambda b: (b.name, b.id.value),
        )

    async def delete(self, business: Business) -> bool:
        return self.businesses.pop(business.id, None) is not None


class InMemoryOpportunityRepository:
    """Dict-backed IOpportunityRepository."""

    def __init__(self) -> None:
        self.opportunities: dict[OpportunityId, Opportunity] = {}

    async def add_new(self, opportunities: list[Opportunity]) -> list[Opportunity]:
        taken = {(o.tenant_id, o.place_id) for o in self.opportunities.values()}
        inserted = []
        for opportunity in opportunities:
            key = (opportunity.tenant_id, opportunity.place_id)
            if key in taken:
                continue
            taken.add(key)
            self.opportunities[opportunity.id] = opportunity
            inserted.append(opportunity)
        return inserted

    async def save(self, opportunity: Opportunity) -> None:
        self.opportunities[opportunity.id] = opportunity

    async def get_by_id(self, opportunity_id: OpportunityId) -> Opportunity | None:
        return self.opportunities.get(opportunity_id)

    async def list_by_tenant(
        self, tenant_id: str, status: OpportunityStatus
    ) -> list[Opportunity]:
        return sorted(
            (
                o
                for o in self.opportunities.values()
                if o.tenant_id == tenant_id and o.status == status
            ),
            key=lambda o: o.created_at,
            reverse=True,
        )
