"""HTTP routes for contacts and their reachouts."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from crm.application.services import ContactService
from crm.dependencies.services import get_contact_service
from crm.presentation.contacts.models import (
    ContactResponse,
    CreateContactRequest,
    ReplaceReachoutsRequest,
    UpdateContactRequest,
)
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.user import get_authenticated_user
from shared_kernel.authorization.exceptions import ResourceNotFoundError

router = APIRouter(
    prefix="/contacts",
    tags=["contacts"],
)


def _not_found(e: ResourceNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("")
async def list_contacts(
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> list[ContactResponse]:
    """List a tenant's contacts, most recently reached first.

    Raises:
        HTTPException: 404 if the tenant is missing or not visible
        HTTPException: 500 for unexpected errors
    """
    try:
        contacts = await service.list_contacts(
            authenticated_user.user_id.value, tenant_id
        )
        return [ContactResponse.from_domain(c) for c in contacts]

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list contacts",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_contact(
    request: CreateContactRequest,
    tenant_id: Annotated[str, Query(alias="tenantId")],
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Create a contact. Requires edit access to the tenant.

    Raises:
        HTTPException: 400 if the contact has no name
        HTTPException: 404 if the tenant is missing or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        contact = await service.create_contact(
            authenticated_user.user_id.value,
            tenant_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            business_name=request.business_name,
            status=request.status,
            notes=request.notes,
        )
        return ContactResponse.from_domain(contact)

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create contact",
        )


@router.get("/{contact_id}")
async def get_contact(
    contact_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Get a contact with its reachouts.

    A contact in a tenant the caller cannot see answers exactly like one
    that does not exist.

    Raises:
        HTTPException: 404 if contact not found or not accessible
        HTTPException: 500 for unexpected errors
    """
    try:
        contact = await service.get_contact(
            authenticated_user.user_id.value, contact_id
        )
        return ContactResponse.from_domain(contact)

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve contact",
        )


@router.patch("/{contact_id}")
async def update_contact(
    contact_id: str,
    request: UpdateContactRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Update a contact. Requires edit access to its tenant.

    Raises:
        HTTPException: 404 if contact not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        contact = await service.update_contact(
            authenticated_user.user_id.value,
            contact_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            business_name=request.business_name,
            status=request.status,
            notes=request.notes,
        )
        return ContactResponse.from_domain(contact)

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update contact",
        )


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_contact(
    contact_id: str,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> None:
    """Delete a contact and its reachouts.

    Raises:
        HTTPException: 404 if contact not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        await service.delete_contact(authenticated_user.user_id.value, contact_id)

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete contact",
        )


@router.put("/{contact_id}/reachouts")
async def replace_reachouts(
    contact_id: str,
    request: ReplaceReachoutsRequest,
    authenticated_user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Replace every reachout of a contact.

    Raises:
        HTTPException: 400 if a reachout names an unknown author
        HTTPException: 404 if contact not found or not editable
        HTTPException: 500 for unexpected errors
    """
    try:
        contact = await service.replace_reachouts(
            authenticated_user.user_id.value,
            contact_id,
            [r.to_draft() for r in request.reachouts],
        )
        return ContactResponse.from_domain(contact)

    except ResourceNotFoundError as e:
        raise _not_found(e) from e
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to replace reachouts",
        )
