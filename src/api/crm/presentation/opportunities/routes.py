"""HTTP routes for opportunities."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from crm.application.services import OpportunityService
from crm.dependencies.services import get_opportunity_service
from crm.domain.value_objects import OpportunityStatus
from crm.presentation.businesses.models import BusinessResponse
from crm.presentation.opportunities.models import (
    ConversionResponse,
    ConvertOpportunityRequest,
    OpportunityResponse,
    RecordOpportunitiesRequest,
    UpdateOpportunityRequest,
)
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/opportunities",
    tags=["opportunities"],
)


@router.get("")
async def list_opportunities(
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[OpportunityService, Depends(get_opportunity_service)],
    opportunity_status: Annotated[
        OpportunityStatus, Query(alias="status")
    ] = OpportunityStatus.NEW,
) -> list[OpportunityResponse]:
    """List a tenant's opportunities in one status, newest first.

    Raises:
        HTTPException: 404 if the tenant is missing or not visible
        HTTPException: 500 for unexpected errors
    """
    try:
        opportunities = await service.list_opportunities(
            authenticated_user.user_id.value, tenant_id, status=opportunity_status
        )
        return [OpportunityResponse.from_domain(o) for o in opportunities]

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list opportunities",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def record_opportunities(
    request: RecordOpportunitiesRequest,
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[OpportunityService, Depends(get_opportunity_service)],
) -> list[OpportunityResponse]:
    """Record discovered places. Requires edit access to the tenant.

    Returns only the newly recorded opportunities; incomplete entries and
    places the tenant already has are skipped.

    Raises:
        HTTPException: 400 if the list is empty
        HTTPException: 404 if the tenant is missing or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        recorded = await service.record_opportunities(
            authenticated_user.user_id.value,
            tenant_id,
            [o.to_draft() for o in request.opportunities],
        )
        return [OpportunityResponse.from_domain(o) for o in recorded]

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
            detail="Failed to record opportunities",
        )


@router.get("/{opportunity_id}")
async def get_opportunity(
    opportunity_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[OpportunityService, Depends(get_opportunity_service)],
) -> OpportunityResponse:
    """Get an opportunity.

    Raises:
        HTTPException: 404 if opportunity not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        opportunity = await service.get_opportunity(
            authenticated_user.user_id.value, opportunity_id
        )
        return OpportunityResponse.from_domain(opportunity)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve opportunity",
        )


@router.patch("/{opportunity_id}")
async def update_opportunity(
    opportunity_id: str,
    request: UpdateOpportunityRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[OpportunityService, Depends(get_opportunity_service)],
) -> OpportunityResponse:
    """Dismiss an opportunity. Requires edit access.

    Raises:
        HTTPException: 400 unless the body dismisses a not yet converted one
        HTTPException: 404 if opportunity not found or not editable
        HTTPException: 500 for unexpected errors
    """
    if not request.dismisses:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status or no changes",
        )

    try:
        opportunity = await service.dismiss_opportunity(
            authenticated_user.user_id.value, opportunity_id
        )
        return OpportunityResponse.from_domain(opportunity)

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
            detail="Failed to update opportunity",
        )


@router.post("/{opportunity_id}/convert")
async def convert_opportunity(
    opportunity_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[OpportunityService, Depends(get_opportunity_service)],
    request: ConvertOpportunityRequest | None = None,
) -> ConversionResponse:
    """Convert an opportunity into a business. Requires edit access.

    Raises:
        HTTPException: 400 if already converted or the place has a business
        HTTPException: 404 if opportunity not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        business, opportunity = await service.convert_opportunity(
            authenticated_user.user_id.value,
            opportunity_id,
            request.to_details() if request else None,
        )
        return ConversionResponse(
            business=BusinessResponse.from_domain(business),
            opportunity=OpportunityResponse.from_domain(opportunity),
        )

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
            detail="Failed to convert opportunity",
        )
