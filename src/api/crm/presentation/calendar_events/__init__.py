"""Calendar event routes and models."""

from crm.presentation.calendar_events.routes import router

__all__ = ["router"]
