"""Protocol for calendar event service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class CalendarEventServiceProbe(Protocol):
    """Domain probe for calendar event service operations."""

    def events_listed(self, tenant_id: str, count: int) -> None:
        ...

    def event_created(self, event_id: str, tenant_id: str, created_by: str) -> None:
        ...

    def event_updated(self, event_id: str, tenant_id: str, status: str) -> None:
        ...

    def event_deleted(self, event_id: str, tenant_id: str, deleted_by: str) -> None:
        ...

    def event_not_found(self, event_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> CalendarEventServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultCalendarEventServiceProbe:
    """Default implementation of CalendarEventServiceProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultCalendarEventServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultCalendarEventServiceProbe(logger=self._logger, context=context)

    def events_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "calendar_events_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def event_created(self, event_id: str, tenant_id: str, created_by: str) -> None:
        self._logger.info(
            "calendar_event_created",
            event_id=event_id,
            tenant_id=tenant_id,
            created_by=created_by,
            **self._get_context_kwargs(),
        )

    def event_updated(self, event_id: str, tenant_id: str, status: str) -> None:
        self._logger.info(
            "calendar_event_updated",
            event_id=event_id,
            tenant_id=tenant_id,
            status=status,
            **self._get_context_kwargs(),
        )

    def event_deleted(self, event_id: str, tenant_id: str, deleted_by: str) -> None:
        self._logger.info(
            "calendar_event_deleted",
            event_id=event_id,
            tenant_id=tenant_id,
            deleted_by=deleted_by,
            **self._get_context_kwargs(),
        )

    def event_not_found(self, event_id: str) -> None:
        self._logger.debug(
            "calendar_event_not_found", event_id=event_id, **self._get_context_kwargs()
        )
