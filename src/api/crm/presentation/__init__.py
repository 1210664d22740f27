"""CRM presentation layer: contacts, calendar events, businesses and
opportunities."""

from __future__ import annotations

from fastapi import APIRouter

from crm.presentation import businesses, calendar_events, contacts, opportunities

router = APIRouter(tags=["crm"])

router.include_router(contacts.router)
router.include_router(calendar_events.router)
router.include_router(businesses.router)
router.include_router(opportunities.router)

__all__ = ["router"]
