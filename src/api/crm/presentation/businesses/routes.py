"""HTTP routes for businesses."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from crm.application.services import BusinessService
from crm.dependencies.services import get_business_service
from crm.presentation.businesses.models import (
    BusinessResponse,
    CreateBusinessRequest,
    UpdateBusinessRequest,
)
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/businesses",
    tags=["businesses"],
)


@router.get("")
async def list_businesses(
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BusinessService, Depends(get_business_service)],
) -> list[BusinessResponse]:
    """List a tenant's businesses by name.

    Raises:
        HTTPException: 404 if the tenant is missing or not visible
        HTTPException: 500 for unexpected errors
    """
    try:
        businesses = await service.list_businesses(
            authenticated_user.user_id.value, tenant_id
        )
        return [BusinessResponse.from_domain(b) for b in businesses]

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list businesses",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_business(
    request: CreateBusinessRequest,
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BusinessService, Depends(get_business_service)],
) -> BusinessResponse:
    """Create a business. Requires edit access to the tenant.

    Raises:
        HTTPException: 400 if the name is blank or the place already has one
        HTTPException: 404 if the tenant is missing or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        business = await service.create_business(
            authenticated_user.user_id.value,
            tenant_id,
            name=request.name,
            address=request.address,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
            place_id=request.place_id,
        )
        return BusinessResponse.from_domain(business)

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
            detail="Failed to create business",
        )


@router.get("/{business_id}")
async def get_business(
    business_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BusinessService, Depends(get_business_service)],
) -> BusinessResponse:
    """Get a business.

    Raises:
        HTTPException: 404 if business not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        business = await service.get_business(
            authenticated_user.user_id.value, business_id
        )
        return BusinessResponse.from_domain(business)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve business",
        )


@router.patch("/{business_id}")
async def update_business(
    business_id: str,
    request: UpdateBusinessRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BusinessService, Depends(get_business_service)],
) -> BusinessResponse:
    """Update a business. Requires edit access.

    Raises:
        HTTPException: 400 if the update is invalid
        HTTPException: 404 if business not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        business = await service.update_business(
            authenticated_user.user_id.value,
            business_id,
            name=request.name,
            address=request.address,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
            place_id=request.place_id,
        )
        return BusinessResponse.from_domain(business)

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
            detail="Failed to update business",
        )


@router.delete(
    "/{business_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_business(
    business_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[BusinessService, Depends(get_business_service)],
) -> None:
    """Delete a business.

    Raises:
        HTTPException: 404 if business not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.delete_business(authenticated_user.user_id.value, business_id)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete business",
        )
