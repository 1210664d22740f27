"""Tenant access protocol shared by every tenant-scoped bounded context.

Resource handlers outside IAM depend on this protocol rather than on IAM
internals. The IAM AccessGate is the production implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from shared_kernel.authorization.types import AccessLevel


@runtime_checkable
class TenantAccessChecker(Protocol):
    """Decides whether an identity may touch a tenant's resources."""

    async def can_access(self, identity_id: str, tenant_id: str) -> bool:
        """Return True if the identity may view the tenant's resources."""
        ...

    async def can_edit(self, identity_id: str, tenant_id: str) -> bool:
        """Return True if the identity may modify the tenant's resources."""
        ...

    async def require(
        self,
        identity_id: str,
        tenant_id: str,
        level: AccessLevel,
        resource: str = "Resource",
    ) -> None:
        """Raise TenantAccessDeniedError unless the identity holds ``level``.

        ``resource`` names the thing being fetched so the denial reads
        exactly like a missing record ("Contact not found").
        """
        ...
