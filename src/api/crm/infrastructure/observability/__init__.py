"""Observability for CRM infrastructure."""

from crm.infrastructure.observability.repository_probe import (
    BusinessRepositoryProbe,
    CalendarEventRepositoryProbe,
    ContactRepositoryProbe,
    DefaultBusinessRepositoryProbe,
    DefaultCalendarEventRepositoryProbe,
    DefaultContactRepositoryProbe,
    DefaultOpportunityRepositoryProbe,
    OpportunityRepositoryProbe,
)

__all__ = [
    "BusinessRepositoryProbe",
    "CalendarEventRepositoryProbe",
    "ContactRepositoryProbe",
    "DefaultBusinessRepositoryProbe",
    "DefaultCalendarEventRepositoryProbe",
    "DefaultContactRepositoryProbe",
    "DefaultOpportunityRepositoryProbe",
    "OpportunityRepositoryProbe",
]
