"""Observability for CRM application services."""

from crm.application.observability.business_service_probe import (
    BusinessServiceProbe,
    DefaultBusinessServiceProbe,
    DefaultOpportunityServiceProbe,
    OpportunityServiceProbe,
)
from crm.application.observability.calendar_event_service_probe import (
    CalendarEventServiceProbe,
    DefaultCalendarEventServiceProbe,
)
from crm.application.observability.contact_service_probe import (
    ContactServiceProbe,
    DefaultContactServiceProbe,
)

__all__ = [
    "BusinessServiceProbe",
    "CalendarEventServiceProbe",
    "ContactServiceProbe",
    "DefaultBusinessServiceProbe",
    "DefaultCalendarEventServiceProbe",
    "DefaultContactServiceProbe",
    "DefaultOpportunityServiceProbe",
    "OpportunityServiceProbe",
]
