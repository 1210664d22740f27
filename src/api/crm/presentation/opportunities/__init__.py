"""Opportunity routes and models."""

from crm.presentation.opportunities.routes import router

__all__ = ["router"]
