"""Protocol for invitation aggregation observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class InvitationAggregatorProbe(Protocol):
    """Domain probe for invitation aggregation at account creation."""

    def invitations_aggregated(
        self,
        identity_id: str,
        invitation_count: int,
        tenant_count: int,
        is_global_admin: bool,
    ) -> None:
        """Record that pending invitations were folded into permissions."""
        ...

    def no_pending_invitations(self, identity_id: str) -> None:
        """Record that a new identity had nothing to accept."""
        ...

    def with_context(self, context: ObservationContext) -> InvitationAggregatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultInvitationAggregatorProbe:
    """Default implementation of InvitationAggregatorProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultInvitationAggregatorProbe:
        """Create a new probe with observation context bound."""
        return DefaultInvitationAggregatorProbe(logger=self._logger, context=context)

    def invitations_aggregated(
        self,
        identity_id: str,
        invitation_count: int,
        tenant_count: int,
        is_global_admin: bool,
    ) -> None:
        self._logger.info(
            "invitations_aggregated",
            identity_id=identity_id,
            invitation_count=invitation_count,
            tenant_count=tenant_count,
            is_global_admin=is_global_admin,
            **self._get_context_kwargs(),
        )

    def no_pending_invitations(self, identity_id: str) -> None:
        self._logger.debug(
            "no_pending_invitations",
            identity_id=identity_id,
            **self._get_context_kwargs(),
        )
