"""HTTP routes for invitation management (global admins only)."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from iam.application.services import InvitationService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.invitation import get_invitation_service
from iam.dependencies.user import get_authenticated_user
from iam.ports.exceptions import UnauthorizedError
from iam.presentation.invites.models import CreateInviteRequest, InviteResponse
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/invites",
    tags=["invites"],
)


@router.get("")
async def list_invites(
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[InvitationService, Depends(get_invitation_service)],
    tenant_id: Annotated[str | None, Query(alias="tenantId")] = None,
) -> list[InviteResponse]:
    """List invitations, newest first, optionally for one tenant.

    Raises:
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 404 if the tenant filter is not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        invitations = await service.list_invitations(
            authenticated_user.user_id, tenant_id=tenant_id
        )
        return [InviteResponse.from_domain(i) for i in invitations]

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
            detail="Failed to list invites",
        )


@router.post("")
async def create_invite(
    request: CreateInviteRequest,
    response: Response,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[InvitationService, Depends(get_invitation_service)],
) -> InviteResponse:
    """Invite an email to a tenant.

    A repeated invitation for the same (email, tenant) is merged into the
    pending one.

    Returns:
        201 with a new invitation, or 200 with the merged one

    Raises:
        HTTPException: 400 if the email is blank
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 404 if the tenant does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        invitation, created = await service.invite(
            authenticated_user.user_id,
            email=request.email,
            tenant_id=request.tenant_id,
            can_edit=request.can_edit,
            is_global_admin=request.is_global_admin,
        )
        response.status_code = (
            status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )
        return InviteResponse.from_domain(invitation)

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
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create invite",
        )


@router.delete(
    "/{invite_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_invite(
    invite_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[InvitationService, Depends(get_invitation_service)],
) -> None:
    """Delete an invitation.

    Raises:
        HTTPException: 403 if the caller is not a global admin
        HTTPException: 404 if the invite is missing or its tenant not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.delete_invitation(authenticated_user.user_id, invite_id)

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
            detail="Failed to delete invite",
        )
