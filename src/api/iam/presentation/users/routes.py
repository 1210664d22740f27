"""HTTP routes for identity provisioning and administration."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from iam.application.services import UserService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user, get_user_service
from iam.domain.value_objects import IdentityId
from iam.ports.exceptions import EmailMismatchError, UnauthorizedError
from iam.presentation.users.models import (
    SyncUserRequest,
    UpdateUserRequest,
    UserPermissionsResponse,
)
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post("/sync")
async def sync_user(
    request: SyncUserRequest,
    response: Response,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserPermissionsResponse:
    """Provision the caller's identity or refresh its profile.

    Pending invitations for the caller's email are applied when the
    identity is created.

    Returns:
        201 with the new identity, or 200 when it already existed

    Raises:
        HTTPException: 400 if email is missing or does not match the token
        HTTPException: 500 for unexpected errors
    """
    if not request.email or not request.email.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email is required",
        )

    try:
        result = await service.sync(
            authenticated_user,
            email=request.email,
            display_name=request.display_name,
        )
        response.status_code = (
            status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
        )
        return UserPermissionsResponse.from_sync(result)

    except (EmailMismatchError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to sync user",
        )


@router.get("")
async def list_users(
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserPermissionsResponse]:
    """List every identity with its grants.

    Raises:
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 500 for unexpected errors
    """
    try:
        views = await service.list_identities(authenticated_user.user_id)
        return [UserPermissionsResponse.from_view(view) for view in views]

    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users",
        )


@router.patch("/{user_id}")
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserPermissionsResponse:
    """Change an identity's admin flag and/or replace its permissions.

    Raises:
        HTTPException: 400 if an id is malformed
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 404 if the identity or a granted tenant does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        target_id = IdentityId.from_string(user_id)
        grants = (
            [grant.to_domain() for grant in request.tenant_permissions]
            if request.tenant_permissions is not None
            else None
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    try:
        view = await service.update_identity(
            caller_id=authenticated_user.user_id,
            identity_id=target_id,
            is_global_admin=request.is_global_admin,
            grants=grants,
        )
        return UserPermissionsResponse.from_view(view)

    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except ResourceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user",
        )
