"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for identity provisioning and administration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def identity_synced(self, identity_id: str, email: str, was_created: bool) -> None:
        """Record that an identity was provisioned or its profile refreshed."""
        ...

    def email_mismatch(self, identity_id: str) -> None:
        """Record that a sync request carried an email the token did not."""
        ...

    def summary_built(
        self, identity_id: str, provisioned: bool, tenant_count: int
    ) -> None:
        """Record that an authorization summary was served."""
        ...

    def identities_listed(self, count: int) -> None:
        """Record that identities were listed for administration."""
        ...

    def identity_updated(
        self,
        identity_id: str,
        updated_by: str,
        is_global_admin: bool,
        permission_count: int | None,
    ) -> None:
        """Record that an admin changed an identity's grants."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def identity_synced(self, identity_id: str, email: str, was_created: bool) -> None:
        """Record that an identity was provisioned or its profile refreshed."""
        self._logger.info(
            "identity_synced",
            identity_id=identity_id,
            email=email,
            was_created=was_created,
            **self._get_context_kwargs(),
        )

    def email_mismatch(self, identity_id: str) -> None:
        """Record that a sync request carried an email the token did not."""
        self._logger.warning(
            "identity_sync_email_mismatch",
            identity_id=identity_id,
            **self._get_context_kwargs(),
        )

    def summary_built(
        self, identity_id: str, provisioned: bool, tenant_count: int
    ) -> None:
        """Record that an authorization summary was served."""
        self._logger.debug(
            "authorization_summary_built",
            identity_id=identity_id,
            provisioned=provisioned,
            tenant_count=tenant_count,
            **self._get_context_kwargs(),
        )

    def identities_listed(self, count: int) -> None:
        """Record that identities were listed for administration."""
        self._logger.debug(
            "identities_listed",
            count=count,
            **self._get_context_kwargs(),
        )

    def identity_updated(
        self,
        identity_id: str,
        updated_by: str,
        is_global_admin: bool,
        permission_count: int | None,
    ) -> None:
        """Record that an admin changed an identity's grants."""
        self._logger.info(
            "identity_permissions_updated",
            identity_id=identity_id,
            updated_by=updated_by,
            is_global_admin=is_global_admin,
            permission_count=permission_count,
            **self._get_context_kwargs(),
        )
