"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Implementations never open transactions; the calling service
owns the unit of work.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import Identity, Invitation, Tenant
from iam.domain.value_objects import IdentityId, InvitationId, TenantId


@runtime_checkable
class IIdentityRepository(Protocol):
    """Repository for Identity aggregate persistence.

    Identities are provisioned from the identity provider on first sync,
    so this repository only handles profile storage and retrieval.
    """

    async def save(self, identity: Identity) -> None:
        """Persist an identity aggregate.

        Creates a new identity or updates an existing one.

        Args:
            identity: The Identity aggregate to persist
        """
        ...

    async def get_by_id(self, identity_id: IdentityId) -> Identity | None:
        """Retrieve an identity by its provider subject.

        Args:
            identity_id: The unique identifier of the identity

        Returns:
            The Identity aggregate, or None if not found
        """
        ...

    async def list_all(self) -> list[Identity]:
        """List every identity, ordered by email."""
        ...


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence.

    Tenants are the top-level isolation boundary in the system.
    """

    async def save(self, tenant: Tenant) -> None:
        """Persist a tenant aggregate.

        Creates a new tenant or updates an existing one.

        Args:
            tenant: The Tenant aggregate to persist
        """
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Retrieve a tenant by its ID.

        Args:
            tenant_id: The unique identifier of the tenant

        Returns:
            The Tenant aggregate, or None if not found
        """
        ...

    async def list_all(self) -> list[Tenant]:
        """List all tenants, ordered by name."""
        ...

    async def delete(self, tenant: Tenant) -> bool:
        """Delete a tenant.

        Permissions, invitations and tenant-scoped records are removed by
        foreign key cascades.

        Args:
            tenant: The Tenant aggregate to delete

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IInvitationRepository(Protocol):
    """Repository for Invitation aggregate persistence."""

    async def save(self, invitation: Invitation) -> None:
        """Persist an invitation aggregate (insert or update)."""
        ...

    async def get_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Retrieve an invitation by its ID."""
        ...

    async def get_pending(self, email: str, tenant_id: TenantId) -> Invitation | None:
        """Retrieve the pending invitation for (email, tenant), if any.

        Args:
            email: Normalized email address
            tenant_id: The invited tenant
        """
        ...

    async def list_pending_by_email(self, email: str) -> list[Invitation]:
        """List pending invitations addressed to an email.

        Args:
            email: Normalized email address

        Returns:
            Pending invitations, oldest first
        """
        ...

    async def list_all(self, tenant_id: TenantId | None = None) -> list[Invitation]:
        """List invitations, optionally restricted to one tenant, newest first."""
        ...

    async def delete(self, invitation: Invitation) -> bool:
        """Delete an invitation.

        Returns:
            True if deleted, False if not found
        """
        ...
