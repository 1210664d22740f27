"""Application services for CRM bounded context."""

from crm.application.services.business_service import BusinessService
from crm.application.services.calendar_event_service import CalendarEventService
from crm.application.services.contact_service import ContactService
from crm.application.services.opportunity_service import OpportunityService

__all__ = [
    "BusinessService",
    "CalendarEventService",
    "ContactService",
    "OpportunityService",
]
