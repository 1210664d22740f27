"""Domain-Oriented Observability for IAM infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from iam.infrastructure.observability.repository_probe import (
    AuthorizationStoreProbe,
    DefaultAuthorizationStoreProbe,
    DefaultIdentityRepositoryProbe,
    DefaultInvitationRepositoryProbe,
    DefaultTenantRepositoryProbe,
    IdentityRepositoryProbe,
    InvitationRepositoryProbe,
    TenantRepositoryProbe,
)

__all__ = [
    "AuthorizationStoreProbe",
    "DefaultAuthorizationStoreProbe",
    "IdentityRepositoryProbe",
    "DefaultIdentityRepositoryProbe",
    "InvitationRepositoryProbe",
    "DefaultInvitationRepositoryProbe",
    "TenantRepositoryProbe",
    "DefaultTenantRepositoryProbe",
]
