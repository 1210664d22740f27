"""Ports for CRM bounded context."""

from crm.ports.exceptions import (
    BusinessNotFoundError,
    CalendarEventNotFoundError,
    ContactNotFoundError,
    DuplicateBusinessPlaceError,
    OpportunityNotFoundError,
    UnknownReachoutAuthorError,
)
from crm.ports.repositories import (
    IBusinessRepository,
    ICalendarEventRepository,
    IContactRepository,
    IOpportunityRepository,
)

__all__ = [
    "BusinessNotFoundError",
    "CalendarEventNotFoundError",
    "ContactNotFoundError",
    "DuplicateBusinessPlaceError",
    "IBusinessRepository",
    "ICalendarEventRepository",
    "IContactRepository",
    "IOpportunityRepository",
    "OpportunityNotFoundError",
    "UnknownReachoutAuthorError",
]
