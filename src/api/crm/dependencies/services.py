"""CRM service dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.services import (
    BusinessService,
    CalendarEventService,
    ContactService,
    OpportunityService,
)
from crm.infrastructure.business_repository import BusinessRepository
from crm.infrastructure.calendar_event_repository import CalendarEventRepository
from crm.infrastructure.contact_repository import ContactRepository
from crm.infrastructure.opportunity_repository import OpportunityRepository
from iam.dependencies.authorization import get_access_gate
from infrastructure.database.dependencies import get_session
from shared_kernel.authorization.protocols import TenantAccessChecker


def get_contact_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ContactRepository:
    """Get ContactRepository instance."""
    return ContactRepository(session=session)


def get_calendar_event_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CalendarEventRepository:
    """Get CalendarEventRepository instance."""
    return CalendarEventRepository(session=session)


def get_business_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BusinessRepository:
    """Get BusinessRepository instance."""
    return BusinessRepository(session=session)


def get_opportunity_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OpportunityRepository:
    """Get OpportunityRepository instance."""
    return OpportunityRepository(session=session)


def get_contact_service(
    contact_repo: Annotated[ContactRepository, Depends(get_contact_repository)],
    access_checker: Annotated[TenantAccessChecker, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ContactService:
    """Get ContactService instance.

    Args:
        contact_repo: Contact repository (shares session via dependency caching)
        access_checker: Tenant access gate
        session: Database session for transaction management

    Returns:
        ContactService instance
    """
    return ContactService(
        contact_repository=contact_repo,
        access_checker=access_checker,
        session=session,
    )


def get_calendar_event_service(
    event_repo: Annotated[
        CalendarEventRepository, Depends(get_calendar_event_repository)
    ],
    contact_repo: Annotated[ContactRepository, Depends(get_contact_repository)],
    access_checker: Annotated[TenantAccessChecker, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CalendarEventService:
    """Get CalendarEventService instance."""
    return CalendarEventService(
        event_repository=event_repo,
        contact_repository=contact_repo,
        access_checker=access_checker,
        session=session,
    )


def get_business_service(
    business_repo: Annotated[BusinessRepository, Depends(get_business_repository)],
    access_checker: Annotated[TenantAccessChecker, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BusinessService:
    """Get BusinessService instance."""
    return BusinessService(
        business_repository=business_repo,
        access_checker=access_checker,
        session=session,
    )


def get_opportunity_service(
    opportunity_repo: Annotated[
        OpportunityRepository, Depends(get_opportunity_repository)
    ],
    business_repo: Annotated[BusinessRepository, Depends(get_business_repository)],
    access_checker: Annotated[TenantAccessChecker, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> OpportunityService:
    """Get OpportunityService instance.

    The opportunity and business repositories share one session, so a
    conversion writes both rows in a single transaction.
    """
    return OpportunityService(
        opportunity_repository=opportunity_repo,
        business_repository=business_repo,
        access_checker=access_checker,
        session=session,
    )
