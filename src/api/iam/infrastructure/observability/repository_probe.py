"""Domain probe for IAM repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to identity, tenant, and invitation
repository operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class _ContextualProbe:
    """Shared structlog plumbing for the default repository probes."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext):
        """Create a new probe with observation context bound."""
        return type(self)(logger=self._logger, context=context)


class IdentityRepositoryProbe(Protocol):
    """Domain probe for identity repository operations."""

    def identity_saved(self, identity_id: str) -> None:
        """Record that an identity was successfully saved."""
        ...

    def identity_retrieved(self, identity_id: str) -> None:
        """Record that an identity was retrieved."""
        ...

    def identity_not_found(self, identity_id: str) -> None:
        """Record that an identity was not found."""
        ...

    def with_context(self, context: ObservationContext) -> IdentityRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentityRepositoryProbe(_ContextualProbe):
    """Default implementation of IdentityRepositoryProbe using structlog."""

    def identity_saved(self, identity_id: str) -> None:
        self._logger.info(
            "identity_saved", identity_id=identity_id, **self._get_context_kwargs()
        )

    def identity_retrieved(self, identity_id: str) -> None:
        self._logger.debug(
            "identity_retrieved", identity_id=identity_id, **self._get_context_kwargs()
        )

    def identity_not_found(self, identity_id: str) -> None:
        self._logger.debug(
            "identity_not_found", identity_id=identity_id, **self._get_context_kwargs()
        )


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_saved(self, tenant_id: str) -> None:
        """Record that a tenant was successfully saved."""
        ...

    def tenant_retrieved(self, tenant_id: str) -> None:
        """Record that a tenant was retrieved."""
        ...

    def tenant_deleted(self, tenant_id: str) -> None:
        """Record that a tenant was deleted."""
        ...

    def tenants_listed(self, count: int) -> None:
        """Record that tenants were listed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantRepositoryProbe(_ContextualProbe):
    """Default implementation of TenantRepositoryProbe using structlog."""

    def tenant_saved(self, tenant_id: str) -> None:
        self._logger.info(
            "tenant_saved", tenant_id=tenant_id, **self._get_context_kwargs()
        )

    def tenant_retrieved(self, tenant_id: str) -> None:
        self._logger.debug(
            "tenant_retrieved", tenant_id=tenant_id, **self._get_context_kwargs()
        )

    def tenant_deleted(self, tenant_id: str) -> None:
        self._logger.info(
            "tenant_deleted", tenant_id=tenant_id, **self._get_context_kwargs()
        )

    def tenants_listed(self, count: int) -> None:
        self._logger.debug("tenants_listed", count=count, **self._get_context_kwargs())


class InvitationRepositoryProbe(Protocol):
    """Domain probe for invitation repository operations."""

    def invitation_saved(self, invitation_id: str, status: str) -> None:
        """Record that an invitation was saved."""
        ...

    def invitation_deleted(self, invitation_id: str) -> None:
        """Record that an invitation was deleted."""
        ...

    def pending_invitations_found(self, count: int) -> None:
        """Record how many pending invitations matched an email."""
        ...

    def with_context(self, context: ObservationContext) -> InvitationRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultInvitationRepositoryProbe(_ContextualProbe):
    """Default implementation of InvitationRepositoryProbe using structlog."""

    def invitation_saved(self, invitation_id: str, status: str) -> None:
        self._logger.info(
            "invitation_saved",
            invitation_id=invitation_id,
            status=status,
            **self._get_context_kwargs(),
        )

    def invitation_deleted(self, invitation_id: str) -> None:
        self._logger.info(
            "invitation_deleted",
            invitation_id=invitation_id,
            **self._get_context_kwargs(),
        )

    def pending_invitations_found(self, count: int) -> None:
        # Email deliberately not logged
        self._logger.debug(
            "pending_invitations_found", count=count, **self._get_context_kwargs()
        )


class AuthorizationStoreProbe(Protocol):
    """Domain probe for authorization store writes."""

    def permission_upserted(
        self, identity_id: str, tenant_id: str, can_edit: bool
    ) -> None:
        """Record that a permission row was created or overwritten."""
        ...

    def permission_revoked(self, identity_id: str, tenant_id: str) -> None:
        """Record that a permission row was deleted."""
        ...

    def permissions_replaced(self, identity_id: str, count: int) -> None:
        """Record that an identity's full permission set was replaced."""
        ...

    def global_admin_changed(self, identity_id: str, is_global_admin: bool) -> None:
        """Record that the global admin flag changed."""
        ...

    def with_context(self, context: ObservationContext) -> AuthorizationStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthorizationStoreProbe(_ContextualProbe):
    """Default implementation of AuthorizationStoreProbe using structlog."""

    def permission_upserted(
        self, identity_id: str, tenant_id: str, can_edit: bool
    ) -> None:
        self._logger.info(
            "permission_upserted",
            identity_id=identity_id,
            tenant_id=tenant_id,
            can_edit=can_edit,
            **self._get_context_kwargs(),
        )

    def permission_revoked(self, identity_id: str, tenant_id: str) -> None:
        self._logger.info(
            "permission_revoked",
            identity_id=identity_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def permissions_replaced(self, identity_id: str, count: int) -> None:
        self._logger.info(
            "permissions_replaced",
            identity_id=identity_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def global_admin_changed(self, identity_id: str, is_global_admin: bool) -> None:
        self._logger.warning(
            "global_admin_changed",
            identity_id=identity_id,
            is_global_admin=is_global_admin,
            **self._get_context_kwargs(),
        )
