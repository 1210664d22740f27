"""Domain aggregates for CRM context."""

from crm.domain.aggregates.business import Business
from crm.domain.aggregates.calendar_event import CalendarEvent
from crm.domain.aggregates.contact import Contact
from crm.domain.aggregates.opportunity import Opportunity

__all__ = [
    "Business",
    "CalendarEvent",
    "Contact",
    "Opportunity",
]
