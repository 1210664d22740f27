"""Protocol for invitation application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class InvitationServiceProbe(Protocol):
    """Domain probe for invitation management operations."""

    def invitation_created(
        self, invitation_id: str, tenant_id: str, invited_by: str
    ) -> None:
        """Record that a new pending invitation was created."""
        ...

    def invitation_merged(self, invitation_id: str, tenant_id: str) -> None:
        """Record that a repeated invitation was folded into a pending one."""
        ...

    def invitations_listed(self, count: int, tenant_id: str | None) -> None:
        """Record that invitations were listed."""
        ...

    def invitation_deleted(self, invitation_id: str, deleted_by: str) -> None:
        """Record that an invitation was deleted."""
        ...

    def with_context(self, context: ObservationContext) -> InvitationServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultInvitationServiceProbe:
    """Default implementation of InvitationServiceProbe using structlog."""

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
    ) -> DefaultInvitationServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultInvitationServiceProbe(logger=self._logger, context=context)

    def invitation_created(
        self, invitation_id: str, tenant_id: str, invited_by: str
    ) -> None:
        self._logger.info(
            "invitation_created",
            invitation_id=invitation_id,
            tenant_id=tenant_id,
            invited_by=invited_by,
            **self._get_context_kwargs(),
        )

    def invitation_merged(self, invitation_id: str, tenant_id: str) -> None:
        self._logger.info(
            "invitation_merged",
            invitation_id=invitation_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def invitations_listed(self, count: int, tenant_id: str | None) -> None:
        self._logger.debug(
            "invitations_listed",
            count=count,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def invitation_deleted(self, invitation_id: str, deleted_by: str) -> None:
        self._logger.info(
            "invitation_deleted",
            invitation_id=invitation_id,
            deleted_by=deleted_by,
            **self._get_context_kwargs(),
        )
