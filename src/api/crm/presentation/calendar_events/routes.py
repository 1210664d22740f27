"""HTTP routes for calendar events."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from crm.application.services import CalendarEventService
from crm.dependencies.services import get_calendar_event_service
from crm.presentation.calendar_events.models import (
    CalendarEventResponse,
    CreateCalendarEventRequest,
    UpdateCalendarEventRequest,
)
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/calendar-events",
    tags=["calendar-events"],
)


@router.get("")
async def list_events(
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
    on: Annotated[date | None, Query(alias="date")] = None,
) -> list[CalendarEventResponse]:
    """List a tenant's events ordered by date and start time.

    ``date`` restricts the list to a single UTC day.

    Raises:
        HTTPException: 404 if the tenant is missing or not visible
        HTTPException: 500 for unexpected errors
    """
    try:
        events = await service.list_events(
            authenticated_user.user_id.value, tenant_id, on=on
        )
        return [CalendarEventResponse.from_domain(e) for e in events]

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list events",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    request: CreateCalendarEventRequest,
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
) -> CalendarEventResponse:
    """Schedule an event. Requires edit access to the tenant.

    Raises:
        HTTPException: 400 if the event is invalid
        HTTPException: 404 if the tenant or linked contact is not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        event = await service.create_event(
            authenticated_user.user_id.value,
            tenant_id,
            title=request.title,
            date=request.date,
            description=request.description,
            start_time=request.start_time,
            end_time=request.end_time,
            type=request.type,
            contact_id=request.contact_id,
            priority=request.priority,
            location=request.location,
            notes=request.notes,
        )
        return CalendarEventResponse.from_domain(event)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create event",
        )


@router.get("/{event_id}")
async def get_event(
    event_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
) -> CalendarEventResponse:
    """Get an event.

    Raises:
        HTTPException: 404 if event not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        event = await service.get_event(authenticated_user.user_id.value, event_id)
        return CalendarEventResponse.from_domain(event)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve event",
        )


@router.patch("/{event_id}")
async def update_event(
    event_id: str,
    request: UpdateCalendarEventRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
) -> CalendarEventResponse:
    """Update an event, including its status. Requires edit access.

    Raises:
        HTTPException: 400 if the update is invalid
        HTTPException: 404 if event or new contact not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        event = await service.update_event(
            authenticated_user.user_id.value,
            event_id,
            title=request.title,
            date=request.date,
            description=request.description,
            start_time=request.start_time,
            end_time=request.end_time,
            type=request.type,
            priority=request.priority,
            status=request.status,
            location=request.location,
            notes=request.notes,
            contact_id=request.contact_id,
            unlink_contact=request.unlinks_contact,
        )
        return CalendarEventResponse.from_domain(event)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update event",
        )


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_event(
    event_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
) -> None:
    """Delete an event.

    Raises:
        HTTPException: 404 if event not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.delete_event(authenticated_user.user_id.value, event_id)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete event",
        )
