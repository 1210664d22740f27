"""Contact routes and models."""

from crm.presentation.contacts.routes import router

__all__ = ["router"]
