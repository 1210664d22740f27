"""Identity aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from iam.domain.value_objects import IdentityId, TenantPermission, normalize_email
from shared_kernel.authorization.types import AccessLevel


@dataclass(frozen=True)
class Identity:
    """An authenticated operator.

    Identities are provisioned on first sync from the identity provider and
    are never deleted. ``is_global_admin`` is only changed by another
    global admin.

    Business rules:
    - A global admin has view and edit access to every tenant, whether or
      not any TenantPermission rows exist for them
    - Anyone else needs an explicit TenantPermission per tenant
    """

    id: IdentityId
    email: str
    display_name: str | None = None
    is_global_admin: bool = False
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        identity_id: IdentityId,
        email: str,
        display_name: str | None = None,
        is_global_admin: bool = False,
    ) -> Identity:
        """Factory for a newly provisioned identity."""
        return cls(
            id=identity_id,
            email=normalize_email(email),
            display_name=display_name,
            is_global_admin=is_global_admin,
            created_at=datetime.now(UTC),
        )

    def with_profile(self, email: str, display_name: str | None) -> Identity:
        """Return a copy with the profile fields synced from the provider."""
        return replace(self, email=normalize_email(email), display_name=display_name)

    def with_global_admin(self, is_global_admin: bool) -> Identity:
        """Return a copy with the global admin flag changed."""
        return replace(self, is_global_admin=is_global_admin)

    def has_access(
        self, permission: TenantPermission | None, level: AccessLevel
    ) -> bool:
        """Evaluate effective access given this identity's row for a tenant.

        Args:
            permission: The TenantPermission for the tenant in question, or
                None when no row exists
            level: The access level being requested

        Returns:
            True if the identity holds ``level`` on the tenant
        """
        if self.is_global_admin:
            return True
        if permission is None or permission.identity_id != self.id:
            return False
        return permission.grants(level)

    def __str__(self) -> str:
        """Return string representation."""
        return f"Identity({self.email})"
