"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories and domain services without
specifying implementation details. This allows for dependency inversion
and makes the domain layer independent of infrastructure.
"""

from iam.ports.authorization import IAuthorizationStore
from iam.ports.exceptions import (
    EmailMismatchError,
    IdentityNotFoundError,
    InvitationNotFoundError,
    TenantNotFoundError,
    UnauthorizedError,
)
from iam.ports.repositories import (
    IIdentityRepository,
    IInvitationRepository,
    ITenantRepository,
)

__all__ = [
    "IAuthorizationStore",
    "IIdentityRepository",
    "IInvitationRepository",
    "ITenantRepository",
    "EmailMismatchError",
    "IdentityNotFoundError",
    "InvitationNotFoundError",
    "TenantNotFoundError",
    "UnauthorizedError",
]
