"""Protocol for contact service observability.

Defines the interface for domain probes that capture application-level
domain events for contact operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ContactServiceProbe(Protocol):
    """Domain probe for contact service operations."""

    def contacts_listed(self, tenant_id: str, count: int) -> None:
        """Record that a tenant's contacts were listed."""
        ...

    def contact_created(self, contact_id: str, tenant_id: str, created_by: str) -> None:
        """Record that a contact was created."""
        ...

    def contact_updated(self, contact_id: str, tenant_id: str) -> None:
        """Record that a contact was updated."""
        ...

    def contact_deleted(self, contact_id: str, tenant_id: str, deleted_by: str) -> None:
        """Record that a contact was deleted."""
        ...

    def reachouts_replaced(self, contact_id: str, count: int) -> None:
        """Record that a contact's reachouts were replaced."""
        ...

    def contact_not_found(self, contact_id: str) -> None:
        """Record that a contact lookup failed or was denied."""
        ...

    def with_context(self, context: ObservationContext) -> ContactServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultContactServiceProbe:
    """Default implementation of ContactServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultContactServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultContactServiceProbe(logger=self._logger, context=context)

    def contacts_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "contacts_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def contact_created(self, contact_id: str, tenant_id: str, created_by: str) -> None:
        self._logger.info(
            "contact_created",
            contact_id=contact_id,
            tenant_id=tenant_id,
            created_by=created_by,
            **self._get_context_kwargs(),
        )

    def contact_updated(self, contact_id: str, tenant_id: str) -> None:
        self._logger.info(
            "contact_updated",
            contact_id=contact_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def contact_deleted(self, contact_id: str, tenant_id: str, deleted_by: str) -> None:
        self._logger.info(
            "contact_deleted",
            contact_id=contact_id,
            tenant_id=tenant_id,
            deleted_by=deleted_by,
            **self._get_context_kwargs(),
        )

    def reachouts_replaced(self, contact_id: str, count: int) -> None:
        self._logger.info(
            "reachouts_replaced",
            contact_id=contact_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def contact_not_found(self, contact_id: str) -> None:
        self._logger.debug(
            "contact_not_found", contact_id=contact_id, **self._get_context_kwargs()
        )
