"""Protocol for access gate observability.

Every access decision is recorded so denials can be audited without the
response ever revealing whether the tenant exists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AccessGateProbe(Protocol):
    """Domain probe for access gate decisions."""

    def tenant_access_granted(
        self, identity_id: str, tenant_id: str, level: str, via_admin: bool
    ) -> None:
        """Record that access to a tenant was granted."""
        ...

    def tenant_access_denied(
        self, identity_id: str, tenant_id: str, level: str, reason: str
    ) -> None:
        """Record that access to a tenant was denied."""
        ...

    def global_admin_required(self, identity_id: str) -> None:
        """Record that an admin-only operation was refused."""
        ...

    def with_context(self, context: ObservationContext) -> AccessGateProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccessGateProbe:
    """Default implementation of AccessGateProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAccessGateProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccessGateProbe(logger=self._logger, context=context)

    def tenant_access_granted(
        self, identity_id: str, tenant_id: str, level: str, via_admin: bool
    ) -> None:
        self._logger.debug(
            "tenant_access_granted",
            identity_id=identity_id,
            tenant_id=tenant_id,
            level=level,
            via_admin=via_admin,
            **self._get_context_kwargs(),
        )

    def tenant_access_denied(
        self, identity_id: str, tenant_id: str, level: str, reason: str
    ) -> None:
        self._logger.info(
            "tenant_access_denied",
            identity_id=identity_id,
            tenant_id=tenant_id,
            level=level,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def global_admin_required(self, identity_id: str) -> None:
        self._logger.info(
            "global_admin_required",
            identity_id=identity_id,
            **self._get_context_kwargs(),
        )
