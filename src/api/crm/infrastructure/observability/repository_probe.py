"""Domain probes for CRM repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ContactRepositoryProbe(Protocol):
    """Domain probe for contact repository operations."""

    def contact_saved(self, contact_id: str) -> None:
        ...

    def reachouts_written(self, contact_id: str, count: int) -> None:
        ...

    def contact_deleted(self, contact_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> ContactRepositoryProbe:
        ...


class CalendarEventRepositoryProbe(Protocol):
    """Domain probe for calendar event repository operations."""

    def event_saved(self, event_id: str) -> None:
        ...

    def event_deleted(self, event_id: str) -> None:
        ...

    def with_context(
        self, context: ObservationContext
    ) -> CalendarEventRepositoryProbe:
        ...


class DefaultContactRepositoryProbe:
    """Default implementation of ContactRepositoryProbe using structlog."""

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
    ) -> DefaultContactRepositoryProbe:
        return DefaultContactRepositoryProbe(logger=self._logger, context=context)

    def contact_saved(self, contact_id: str) -> None:
        self._logger.debug(
            "contact_saved", contact_id=contact_id, **self._get_context_kwargs()
        )

    def reachouts_written(self, contact_id: str, count: int) -> None:
        self._logger.debug(
            "reachouts_written",
            contact_id=contact_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def contact_deleted(self, contact_id: str) -> None:
        self._logger.debug(
            "contact_row_deleted", contact_id=contact_id, **self._get_context_kwargs()
        )


class DefaultCalendarEventRepositoryProbe:
    """Default implementation of CalendarEventRepositoryProbe using structlog."""

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
    ) -> DefaultCalendarEventRepositoryProbe:
        return DefaultCalendarEventRepositoryProbe(
            logger=self._logger, context=context
        )

    def event_saved(self, event_id: str) -> None:
        self._logger.debug(
            "calendar_event_saved", event_id=event_id, **self._get_context_kwargs()
        )

    def event_deleted(self, event_id: str) -> None:
        self._logger.debug(
            "calendar_event_row_deleted",
            event_id=event_id,
            **self._get_context_kwargs(),
        )


class BusinessRepositoryProbe(Protocol):
    """Domain probe for business repository operations."""

    def business_saved(self, business_id: str) -> None:
        ...

    def business_deleted(self, business_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> BusinessRepositoryProbe:
        ...


class OpportunityRepositoryProbe(Protocol):
    """Domain probe for opportunity repository operations."""

    def opportunities_inserted(
        self, tenant_id: str, offered: int, inserted: int
    ) -> None:
        ...

    def opportunity_saved(self, opportunity_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> OpportunityRepositoryProbe:
        ...


class DefaultBusinessRepositoryProbe:
    """Default implementation of BusinessRepositoryProbe using structlog."""

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
    ) -> DefaultBusinessRepositoryProbe:
        return DefaultBusinessRepositoryProbe(logger=self._logger, context=context)

    def business_saved(self, business_id: str) -> None:
        self._logger.debug(
            "business_saved", business_id=business_id, **self._get_context_kwargs()
        )

    def business_deleted(self, business_id: str) -> None:
        self._logger.debug(
            "business_row_deleted",
            business_id=business_id,
            **self._get_context_kwargs(),
        )


class DefaultOpportunityRepositoryProbe:
    """Default implementation of OpportunityRepositoryProbe using structlog."""

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
    ) -> DefaultOpportunityRepositoryProbe:
        return DefaultOpportunityRepositoryProbe(logger=self._logger, context=context)

    def opportunities_inserted(
        self, tenant_id: str, offered: int, inserted: int
    ) -> None:
        self._logger.debug(
            "opportunities_inserted",
            tenant_id=tenant_id,
            offered=offered,
            inserted=inserted,
            **self._get_context_kwargs(),
        )

    def opportunity_saved(self, opportunity_id: str) -> None:
        self._logger.debug(
            "opportunity_saved",
            opportunity_id=opportunity_id,
            **self._get_context_kwargs(),
        )
