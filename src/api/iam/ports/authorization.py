"""Authorization store port for IAM bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import Identity, Tenant
from iam.domain.value_objects import (
    IdentityId,
    PermissionGrant,
    TenantId,
    TenantPermission,
)


@runtime_checkable
class IAuthorizationStore(Protocol):
    """Source of truth for identities, tenants and tenant permissions.

    Every method is a plain read or an idempotent write with no side
    effects beyond persistence. Callers own the transaction.
    """

    async def get_identity(self, identity_id: IdentityId) -> Identity | None:
        """Fetch an identity, or None if it has not been provisioned."""
        ...

    async def list_permissions(self, identity_id: IdentityId) -> list[TenantPermission]:
        """List an identity's permissions on tenants that still exist.

        Rows referencing a missing tenant are omitted. Results are ordered
        by tenant name so the first entry is stable across calls.
        """
        ...

    async def get_permission(
        self, identity_id: IdentityId, tenant_id: TenantId
    ) -> TenantPermission | None:
        """Fetch the permission row for (identity, tenant), if any."""
        ...

    async def get_tenant(self, tenant_id: TenantId) -> Tenant | None:
        """Fetch a tenant, or None if it does not exist."""
        ...

    async def list_tenants(self) -> list[Tenant]:
        """List all tenants, ordered by name."""
        ...

    async def upsert_permission(
        self, identity_id: IdentityId, tenant_id: TenantId, can_edit: bool
    ) -> None:
        """Create or overwrite the permission row for (identity, tenant)."""
        ...

    async def delete_permission(
        self, identity_id: IdentityId, tenant_id: TenantId
    ) -> bool:
        """Revoke a permission.

        Returns:
            True if a row was removed
        """
        ...

    async def replace_permissions(
        self, identity_id: IdentityId, grants: list[PermissionGrant]
    ) -> None:
        """Replace an identity's full permission set with ``grants``."""
        ...

    async def set_global_admin(
        self, identity_id: IdentityId, is_global_admin: bool
    ) -> bool:
        """Set the global admin flag.

        Returns:
            True if the identity exists
        """
        ...
