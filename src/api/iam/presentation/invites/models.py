"""Pydantic models for invitation API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from iam.domain.aggregates import Invitation
from shared_kernel.api_models import CamelModel


class CreateInviteRequest(CamelModel):
    """Request model for inviting an email to a tenant."""

    email: str = Field(..., min_length=3, max_length=320)
    tenant_id: str = Field(..., min_length=1)
    can_edit: bool = False
    is_global_admin: bool = False


class InviteResponse(CamelModel):
    """Response model for invitation."""

    id: str
    email: str
    tenant_id: str
    can_edit: bool
    is_global_admin: bool
    invited_by: str
    invited_at: datetime | None = None
    status: str

    @classmethod
    def from_domain(cls, invitation: Invitation) -> InviteResponse:
        return cls(
            id=invitation.id.value,
            email=invitation.email,
            tenant_id=invitation.tenant_id.value,
            can_edit=invitation.can_edit,
            is_global_admin=invitation.is_global_admin,
            invited_by=invitation.invited_by.value,
            invited_at=invitation.invited_at,
            status=invitation.status.value,
        )
