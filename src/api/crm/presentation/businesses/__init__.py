"""Business routes and models."""

from crm.presentation.businesses.routes import router

__all__ = ["router"]
