"""Application-layer value objects for IAM bounded context.

These are value objects specific to the application layer, representing
cross-cutting concerns like authentication context and read-only view objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from iam.domain.aggregates import Identity, Tenant
from iam.domain.value_objects import (
    IdentityId,
    InvitationId,
    PermissionGrant,
    TenantPermission,
)


@dataclass(frozen=True)
class AuthenticatedUser:
    """Represents a caller whose bearer credential has been verified.

    The identity may not be provisioned yet: ``/me`` and ``/users/sync``
    accept callers with no Identity row.

    This is an application-layer concept (not domain) because it represents
    the authentication context of the request, not a core business entity.
    """

    user_id: IdentityId
    email: str | None = None


@dataclass(frozen=True)
class AuthorizationSummary:
    """Everything a client needs to resolve its permissions in one round trip.

    Attributes:
        identity: The caller's identity, or None if not yet provisioned
        permissions: Permissions on existing tenants, ordered by tenant name
        tenants: Tenants visible to the caller, ordered by name
    """

    identity: Identity | None
    permissions: list[TenantPermission] = field(default_factory=list)
    tenants: list[Tenant] = field(default_factory=list)


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of folding pending invitations into permissions.

    Attributes:
        identity_id: The identity the invitations were applied to
        is_global_admin: Whether an invitation promoted the identity
        grants: One grant per invited tenant (empty for admins)
        consumed: Invitations marked accepted
    """

    identity_id: IdentityId
    is_global_admin: bool = False
    grants: tuple[PermissionGrant, ...] = ()
    consumed: tuple[InvitationId, ...] = ()


@dataclass(frozen=True)
class SyncResult:
    """Result of provisioning or updating an identity on sign-in."""

    identity: Identity
    permissions: list[TenantPermission]
    created: bool


@dataclass(frozen=True)
class IdentityWithPermissions:
    """Read-only view of an identity and its grants for administration."""

    identity: Identity
    permissions: list[TenantPermission]
