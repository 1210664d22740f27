"""Domain probe for bearer credential verification.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to verifying identity provider tokens.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class JWTValidatorProbe(Protocol):
    """Domain probe for credential verification."""

    def credential_verified(self, user_id: str) -> None:
        """Record that a bearer credential was verified."""
        ...

    def credential_rejected(self, reason: str) -> None:
        """Record that a bearer credential was rejected."""
        ...

    def signing_keys_fetched(self, key_count: int) -> None:
        """Record that signing keys were fetched from the issuer."""
        ...

    def signing_keys_cache_hit(self) -> None:
        """Record that signing keys were served from cache."""
        ...

    def signing_keys_fetch_failed(self, error: str) -> None:
        """Record that fetching signing keys failed."""
        ...

    def with_context(self, context: ObservationContext) -> JWTValidatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultJWTValidatorProbe:
        """Create a new probe with observation context bound."""
        return DefaultJWTValidatorProbe(logger=self._logger, context=context)

    def credential_verified(self, user_id: str) -> None:
        self._logger.debug(
            "credential_verified",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def credential_rejected(self, reason: str) -> None:
        self._logger.warning(
            "credential_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def signing_keys_fetched(self, key_count: int) -> None:
        self._logger.info(
            "signing_keys_fetched",
            key_count=key_count,
            **self._get_context_kwargs(),
        )

    def signing_keys_cache_hit(self) -> None:
        self._logger.debug("signing_keys_cache_hit", **self._get_context_kwargs())

    def signing_keys_fetch_failed(self, error: str) -> None:
        self._logger.error(
            "signing_keys_fetch_failed",
            error=error,
            **self._get_context_kwargs(),
        )
