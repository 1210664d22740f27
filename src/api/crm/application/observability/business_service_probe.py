"""Protocols for business and opportunity service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class BusinessServiceProbe(Protocol):
    """Domain probe for business service operations."""

    def businesses_listed(self, tenant_id: str, count: int) -> None:
        ...

    def business_created(
        self, business_id: str, tenant_id: str, created_by: str
    ) -> None:
        ...

    def business_updated(self, business_id: str, tenant_id: str) -> None:
        ...

    def business_deleted(
        self, business_id: str, tenant_id: str, deleted_by: str
    ) -> None:
        ...

    def business_not_found(self, business_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> BusinessServiceProbe:
        ...


class OpportunityServiceProbe(Protocol):
    """Domain probe for opportunity service operations."""

    def opportunities_listed(self, tenant_id: str, status: str, count: int) -> None:
        ...

    def opportunities_recorded(
        self, tenant_id: str, submitted: int, recorded: int
    ) -> None:
        ...

    def opportunity_dismissed(self, opportunity_id: str, tenant_id: str) -> None:
        ...

    def opportunity_converted(
        self, opportunity_id: str, business_id: str, tenant_id: str
    ) -> None:
        ...

    def opportunity_not_found(self, opportunity_id: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> OpportunityServiceProbe:
        ...


class DefaultBusinessServiceProbe:
    """Default implementation of BusinessServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultBusinessServiceProbe:
        return DefaultBusinessServiceProbe(logger=self._logger, context=context)

    def businesses_listed(self, tenant_id: str, count: int) -> None:
        self._logger.debug(
            "businesses_listed",
            tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )

    def business_created(
        self, business_id: str, tenant_id: str, created_by: str
    ) -> None:
        self._logger.info(
            "business_created",
            business_id=business_id,
            tenant_id=tenant_id,
            created_by=created_by,
            **self._get_context_kwargs(),
        )

    def business_updated(self, business_id: str, tenant_id: str) -> None:
        self._logger.info(
            "business_updated",
            business_id=business_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def business_deleted(
        self, business_id: str, tenant_id: str, deleted_by: str
    ) -> None:
        self._logger.info(
            "business_deleted",
            business_id=business_id,
            tenant_id=tenant_id,
            deleted_by=deleted_by,
            **self._get_context_kwargs(),
        )

    def business_not_found(self, business_id: str) -> None:
        self._logger.debug(
            "business_not_found", business_id=business_id, **self._get_context_kwargs()
        )


class DefaultOpportunityServiceProbe:
    """Default implementation of OpportunityServiceProbe using structlog."""

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
    ) -> DefaultOpportunityServiceProbe:
        return DefaultOpportunityServiceProbe(logger=self._logger, context=context)

    def opportunities_listed(self, tenant_id: str, status: str, count: int) -> None:
        self._logger.debug(
            "opportunities_listed",
            tenant_id=tenant_id,
            status=status,
            count=count,
            **self._get_context_kwargs(),
        )

    def opportunities_recorded(
        self, tenant_id: str, submitted: int, recorded: int
    ) -> None:
        self._logger.info(
            "opportunities_recorded",
            tenant_id=tenant_id,
            submitted=submitted,
            recorded=recorded,
            **self._get_context_kwargs(),
        )

    def opportunity_dismissed(self, opportunity_id: str, tenant_id: str) -> None:
        self._logger.info(
            "opportunity_dismissed",
            opportunity_id=opportunity_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def opportunity_converted(
        self, opportunity_id: str, business_id: str, tenant_id: str
    ) -> None:
        self._logger.info(
            "opportunity_converted",
            opportunity_id=opportunity_id,
            business_id=business_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def opportunity_not_found(self, opportunity_id: str) -> None:
        self._logger.debug(
            "opportunity_not_found",
            opportunity_id=opportunity_id,
            **self._get_context_kwargs(),
        )
