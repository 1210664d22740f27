"""Authorization store, access gate and invitation aggregator dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.services import AccessGate, InvitationAggregator
from iam.infrastructure.authorization_store import AuthorizationStore
from iam.infrastructure.invitation_repository import InvitationRepository
from infrastructure.database.dependencies import get_session


def get_authorization_store(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AuthorizationStore:
    """Get AuthorizationStore bound to the request session."""
    return AuthorizationStore(session=session)


def get_access_gate(
    store: Annotated[AuthorizationStore, Depends(get_authorization_store)],
) -> AccessGate:
    """Get the AccessGate.

    Other bounded contexts depend on this provider through the
    TenantAccessChecker protocol.
    """
    return AccessGate(authorization_store=store)


def get_invitation_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> InvitationRepository:
    """Get InvitationRepository instance."""
    return InvitationRepository(session=session)


def get_invitation_aggregator(
    invitation_repo: Annotated[
        InvitationRepository, Depends(get_invitation_repository)
    ],
    store: Annotated[AuthorizationStore, Depends(get_authorization_store)],
) -> InvitationAggregator:
    """Get InvitationAggregator instance."""
    return InvitationAggregator(
        invitation_repository=invitation_repo,
        authorization_store=store,
    )
