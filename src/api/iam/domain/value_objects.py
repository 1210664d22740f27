"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ulid import ULID

from shared_kernel.authorization.types import AccessLevel

# Identity-provider subjects are opaque strings (Firebase uids, UUIDs, ...)
MAX_IDENTITY_ID_LENGTH = 255


@dataclass(frozen=True)
class IdentityId:
    """Identifier for an Identity aggregate.

    Issued by the external identity provider, so no format is imposed beyond
    being non-empty and fitting the column.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> IdentityId:
        """Create IdentityId from a raw subject claim.

        Raises:
            ValueError: If value is blank or too long
        """
        stripped = value.strip()
        if not stripped:
            raise ValueError("Invalid IdentityId: value is empty")
        if len(stripped) > MAX_IDENTITY_ID_LENGTH:
            raise ValueError(
                f"Invalid IdentityId: longer than {MAX_IDENTITY_ID_LENGTH} characters"
            )
        return cls(value=stripped)


@dataclass(frozen=True)
class TenantId:
    """Identifier for a Tenant (store).

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TenantId:
        """Generate a new TenantId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TenantId:
        """Create TenantId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid TenantId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class InvitationId:
    """Identifier for an Invitation aggregate."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> InvitationId:
        """Generate a new InvitationId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> InvitationId:
        """Create InvitationId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid InvitationId: {value}") from e

        return cls(value=value)


class InvitationStatus(StrEnum):
    """Lifecycle of an invitation. The only transition is PENDING -> ACCEPTED."""

    PENDING = "pending"
    ACCEPTED = "accepted"


def normalize_email(email: str) -> str:
    """Canonical form used for invitation matching."""
    return email.strip().lower()


@dataclass(frozen=True)
class TenantPermission:
    """Explicit grant from an identity to a tenant.

    View access is implied by the row's existence; ``can_edit`` adds edit.
    Uniqueness on (identity_id, tenant_id) is enforced by the store.
    """

    identity_id: IdentityId
    tenant_id: TenantId
    can_edit: bool = False

    def grants(self, level: AccessLevel) -> bool:
        """Check whether this grant covers the requested access level."""
        if level == AccessLevel.VIEW:
            return True
        return self.can_edit


@dataclass(frozen=True)
class PermissionGrant:
    """A (tenant, can_edit) pair not yet bound to an identity.

    Used for admin edits and invitation aggregation results.
    """

    tenant_id: TenantId
    can_edit: bool = False
