"""Invitation service dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import AccessGate, InvitationService
from iam.dependencies.authorization import get_access_gate, get_invitation_repository
from iam.dependencies.tenant import get_tenant_repository
from iam.infrastructure.invitation_repository import InvitationRepository
from iam.infrastructure.tenant_repository import TenantRepository
from infrastructure.database.dependencies import get_session


def get_invitation_service(
    invitation_repo: Annotated[
        InvitationRepository, Depends(get_invitation_repository)
    ],
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> InvitationService:
    """Get InvitationService instance."""
    return InvitationService(
        invitation_repository=invitation_repo,
        tenant_repository=tenant_repo,
        access_gate=gate,
        session=session,
    )
