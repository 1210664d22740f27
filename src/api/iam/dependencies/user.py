"""Authenticated caller and user service dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthenticationProbe,
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from iam.application.services import AccessGate, InvitationAggregator, UserService
from iam.application.value_objects import AuthenticatedUser
from iam.dependencies.authentication import (
    JWTValidator,
    bearer_scheme,
    get_authentication_probe,
    get_jwt_validator,
)
from iam.dependencies.authorization import (
    get_access_gate,
    get_authorization_store,
    get_invitation_aggregator,
)
from iam.domain.value_objects import IdentityId
from iam.infrastructure.authorization_store import AuthorizationStore
from iam.infrastructure.identity_repository import IdentityRepository
from infrastructure.database.dependencies import get_session
from shared_kernel.auth import InvalidTokenError


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_authenticated_user(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> AuthenticatedUser:
    """Verify the bearer credential and return the caller.

    Does not touch the database: the caller's identity may not be
    provisioned yet, and services own every transaction.

    Raises:
        HTTPException 401: If the credential is missing or invalid
    """
    if credentials is None:
        auth_probe.authentication_failed(reason="Missing authorization")
        raise _unauthorized("Not authenticated")

    try:
        claims = await validator.validate_token(credentials.credentials)
        user_id = IdentityId.from_string(claims.sub)
    except (InvalidTokenError, ValueError) as e:
        auth_probe.authentication_failed(reason=str(e))
        raise _unauthorized("Invalid authentication credentials") from e

    auth_probe.user_authenticated(user_id=user_id.value)
    return AuthenticatedUser(user_id=user_id, email=claims.email)


def get_user_service_probe() -> UserServiceProbe:
    """Get UserServiceProbe instance.

    Returns:
        DefaultUserServiceProbe instance for observability
    """
    return DefaultUserServiceProbe()


def get_identity_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> IdentityRepository:
    """Get IdentityRepository instance.

    Args:
        session: Async database session

    Returns:
        IdentityRepository instance
    """
    return IdentityRepository(session=session)


def get_user_service(
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repository)],
    store: Annotated[AuthorizationStore, Depends(get_authorization_store)],
    aggregator: Annotated[InvitationAggregator, Depends(get_invitation_aggregator)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    All collaborators share the request's session via FastAPI dependency
    caching, so a service transaction covers every repository call.
    """
    return UserService(
        identity_repository=identity_repo,
        authorization_store=store,
        invitation_aggregator=aggregator,
        access_gate=gate,
        session=session,
        probe=probe,
    )
