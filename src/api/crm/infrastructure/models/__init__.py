"""SQLAlchemy ORM models for CRM bounded context."""

from crm.infrastructure.models.business import BusinessModel, OpportunityModel
from crm.infrastructure.models.calendar_event import CalendarEventModel
from crm.infrastructure.models.contact import ContactModel, ReachoutModel

__all__ = [
    "BusinessModel",
    "CalendarEventModel",
    "ContactModel",
    "OpportunityModel",
    "ReachoutModel",
]
