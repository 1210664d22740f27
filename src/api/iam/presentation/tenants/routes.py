"""HTTP routes for tenant management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import TenantService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.tenant import get_tenant_service
from iam.dependencies.user import get_authenticated_user
from iam.domain.exceptions import InvalidTenantError
from iam.ports.exceptions import UnauthorizedError
from iam.presentation.models import TenantResponse
from iam.presentation.tenants.models import CreateTenantRequest, UpdateTenantRequest
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/tenants",
    tags=["tenants"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_tenant(
    request: CreateTenantRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Create a new tenant.

    Only global admins can create tenants; they need no permission row to
    access it afterwards.

    Raises:
        HTTPException: 400 if the name is invalid
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 500 for unexpected errors
    """
    try:
        tenant = await service.create_tenant(
            caller_id=authenticated_user.user_id,
            name=request.name,
            address=request.address,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
        )
        return TenantResponse.from_domain(tenant)

    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except InvalidTenantError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create tenant",
        )


@router.get("")
async def list_tenants(
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> list[TenantResponse]:
    """List tenants the caller can view, ordered by name."""
    try:
        tenants = await service.list_tenants(authenticated_user.user_id)
        return [TenantResponse.from_domain(tenant) for tenant in tenants]
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list tenants",
        )


@router.get("/{tenant_id}")
async def get_tenant(
    tenant_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Get tenant by ID.

    Requires view access. A tenant the caller cannot see answers exactly
    like one that does not exist.

    Raises:
        HTTPException: 404 if tenant not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        tenant = await service.get_tenant(authenticated_user.user_id, tenant_id)
        return TenantResponse.from_domain(tenant)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve tenant",
        )


@router.patch("/{tenant_id}")
async def update_tenant(
    tenant_id: str,
    request: UpdateTenantRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> TenantResponse:
    """Update a tenant. Requires edit access.

    Raises:
        HTTPException: 400 if the new name is invalid
        HTTPException: 404 if tenant not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        tenant = await service.update_tenant(
            authenticated_user.user_id,
            tenant_id,
            name=request.name,
            address=request.address,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
        )
        return TenantResponse.from_domain(tenant)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except InvalidTenantError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update tenant",
        )


@router.delete(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_tenant(
    tenant_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[TenantService, Depends(get_tenant_service)],
) -> None:
    """Delete a tenant and everything scoped to it.

    Raises:
        HTTPException: 403 if the caller can see the tenant but is not an admin
        HTTPException: 404 if tenant not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.delete_tenant(authenticated_user.user_id, tenant_id)

    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete tenant",
        )
