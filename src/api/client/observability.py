"""Domain probes for the permission client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PermissionResolverProbe(Protocol):
    """Domain probe for permission refreshes."""

    def permissions_refreshed(
        self, identity_id: str | None, grant_count: int, is_global_admin: bool
    ) -> None:
        """Record that a fresh snapshot replaced the previous one."""
        ...

    def permission_fetch_failed(self, error: str, status_code: int | None) -> None:
        """Record that a refresh failed and the previous snapshot was kept."""
        ...

    def identity_synced(self, email: str) -> None:
        """Record that the caller's identity was provisioned or updated."""
        ...

    def with_context(self, context: ObservationContext) -> PermissionResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class TenantSelectorProbe(Protocol):
    """Domain probe for active tenant transitions."""

    def active_tenant_selected(self, tenant_id: str, reason: str) -> None:
        ...

    def active_tenant_cleared(self, tenant_id: str | None, reason: str) -> None:
        ...

    def with_context(self, context: ObservationContext) -> TenantSelectorProbe:
        ...


class DefaultPermissionResolverProbe:
    """Default implementation of PermissionResolverProbe using structlog."""

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
    ) -> DefaultPermissionResolverProbe:
        """Create a new probe with observation context bound."""
        return DefaultPermissionResolverProbe(logger=self._logger, context=context)

    def permissions_refreshed(
        self, identity_id: str | None, grant_count: int, is_global_admin: bool
    ) -> None:
        self._logger.info(
            "permissions_refreshed",
            identity_id=identity_id,
            grant_count=grant_count,
            is_global_admin=is_global_admin,
            **self._get_context_kwargs(),
        )

    def permission_fetch_failed(self, error: str, status_code: int | None) -> None:
        self._logger.warning(
            "permission_fetch_failed",
            error=error,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def identity_synced(self, email: str) -> None:
        self._logger.info("identity_synced", email=email, **self._get_context_kwargs())


class DefaultTenantSelectorProbe:
    """Default implementation of TenantSelectorProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantSelectorProbe:
        return DefaultTenantSelectorProbe(logger=self._logger, context=context)

    def active_tenant_selected(self, tenant_id: str, reason: str) -> None:
        self._logger.info(
            "active_tenant_selected",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def active_tenant_cleared(self, tenant_id: str | None, reason: str) -> None:
        self._logger.info(
            "active_tenant_cleared",
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )
