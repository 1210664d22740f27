"""HTTP route for the caller's authorization summary."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import UserService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user, get_user_service
from iam.presentation.me.models import MeResponse

router = APIRouter(
    prefix="/me",
    tags=["me"],
)


@router.get("")
async def get_me(
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> MeResponse:
    """Return the caller's identity, permissions and visible tenants.

    Global admins see every tenant; everyone else sees only tenants they
    hold a permission on. Permissions on deleted tenants are omitted.

    Raises:
        HTTPException: 401 if not authenticated
        HTTPException: 500 for unexpected errors
    """
    try:
        summary = await service.get_summary(authenticated_user)
        return MeResponse.from_summary(summary)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load permissions",
        )
