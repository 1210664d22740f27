"""Repository protocols (ports) for CRM bounded context.

Implementations never open transactions; the calling service owns the
unit of work.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from crm.domain.aggregates import Business, CalendarEvent, Contact, Opportunity
from crm.domain.value_objects import (
    BusinessId,
    CalendarEventId,
    ContactId,
    OpportunityId,
    OpportunityStatus,
)


@runtime_checkable
class IContactRepository(Protocol):
    """Repository for Contact aggregates and their reachouts."""

    async def save(self, contact: Contact) -> None:
        """Persist contact fields. Reachouts are written by replace_reachouts."""
        ...

    async def replace_reachouts(self, contact: Contact) -> None:
        """Delete every stored reachout of the contact and write the current set."""
        ...

    async def get_by_id(self, contact_id: ContactId) -> Contact | None:
        """Retrieve a contact with its reachouts, newest first."""
        ...

    async def list_by_tenant(self, tenant_id: str) -> list[Contact]:
        """List a tenant's contacts.

        Ordered by last reachout (most recent first, never-contacted last),
        then by creation time, newest first.
        """
        ...

    async def delete(self, contact: Contact) -> bool:
        """Delete a contact and its reachouts.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class ICalendarEventRepository(Protocol):
    """Repository for CalendarEvent aggregates."""

    async def save(self, event: CalendarEvent) -> None:
        ...

    async def get_by_id(self, event_id: CalendarEventId) -> CalendarEvent | None:
        ...

    async def list_by_tenant(
        self,
        tenant_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CalendarEvent]:
        """List a tenant's events ordered by date, then start time.

        When ``start`` and ``end`` are given only events with
        ``start <= date < end`` are returned.
        """
        ...

    async def delete(self, event: CalendarEvent) -> bool:
        ...


@runtime_checkable
class IBusinessRepository(Protocol):
    """Repository for Business aggregates."""

    async def save(self, business: Business) -> None:
        ...

    async def get_by_id(self, business_id: BusinessId) -> Business | None:
        ...

    async def get_by_place_id(self, tenant_id: str, place_id: str) -> Business | None:
        """Find the tenant's business for a map listing, if any."""
        ...

    async def list_by_tenant(self, tenant_id: str) -> list[Business]:
        """List a tenant's businesses ordered by name."""
        ...

    async def delete(self, business: Business) -> bool:
        """Delete a business. Opportunities converted into it keep no link.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IOpportunityRepository(Protocol):
    """Repository for Opportunity aggregates."""

    async def add_new(self, opportunities: list[Opportunity]) -> list[Opportunity]:
        """Insert opportunities whose place is not yet recorded for the tenant.

        Returns:
            The opportunities actually inserted, in input order
        """
        ...

    async def save(self, opportunity: Opportunity) -> None:
        ...

    async def get_by_id(self, opportunity_id: OpportunityId) -> Opportunity | None:
        ...

    async def list_by_tenant(
        self, tenant_id: str, status: OpportunityStatus
    ) -> list[Opportunity]:
        """List a tenant's opportunities in one status, newest first."""
        ...
