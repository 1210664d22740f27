"""Unit tests for domain probes.

Probes must emit one structured event per domain fact and carry any
bound ObservationContext along.
"""

from unittest.mock import MagicMock

import structlog

from client.observability import DefaultTenantSelectorProbe
from crm.application.observability import DefaultContactServiceProbe
from iam.application.observability import DefaultAccessGateProbe
from infrastructure.observability import (
    DefaultConnectionProbe,
    DefaultStartupProbe,
    ObservationContext,
)


def _logger() -> MagicMock:
    return MagicMock(spec=structlog.stdlib.BoundLogger)


class TestConnectionProbe:
    def test_engine_created(self):
        logger = _logger()

        DefaultConnectionProbe(logger=logger).engine_created(
            host="localhost", database="fieldbook", pool_size=10
        )

        logger.info.assert_called_once_with(
            "database_engine_created",
            host="localhost",
            database="fieldbook",
            pool_size=10,
        )

    def test_context_is_included(self):
        logger = _logger()
        context = ObservationContext(request_id="req-1", user_id="u-1")

        DefaultConnectionProbe(logger=logger).with_context(context).pool_closed()

        logger.info.assert_called_once_with(
            "database_pool_closed", request_id="req-1", user_id="u-1"
        )


class TestStartupProbe:
    def test_started(self):
        logger = _logger()

        DefaultStartupProbe(logger=logger).application_started(
            app_name="Fieldbook API", version="0.1.0"
        )

        event, kwargs = logger.info.call_args
        assert event == ("application_started",)
        assert kwargs["version"] == "0.1.0"


class TestAccessGateProbe:
    def test_denials_are_logged_with_reason(self):
        logger = _logger()
        context = ObservationContext(request_id="req-9")

        DefaultAccessGateProbe(logger=logger).with_context(
            context
        ).tenant_access_denied(
            identity_id="operator-1", tenant_id="t1", level="edit", reason="view_only"
        )

        kwargs = logger.info.call_args.kwargs
        assert kwargs["reason"] == "view_only"
        assert kwargs["request_id"] == "req-9"

    def test_grants_are_debug_only(self):
        logger = _logger()

        DefaultAccessGateProbe(logger=logger).tenant_access_granted(
            identity_id="admin-1", tenant_id="t1", level="view", via_admin=True
        )

        logger.debug.assert_called_once()
        logger.info.assert_not_called()


def test_contact_probe_includes_caller_context():
    logger = _logger()
    context = ObservationContext(user_id="operator-1")

    DefaultContactServiceProbe(logger=logger).with_context(context).contacts_listed(
        tenant_id="t1", count=3
    )

    kwargs = logger.debug.call_args.kwargs
    assert kwargs["count"] == 3
    assert kwargs["user_id"] == "operator-1"


def test_selector_probe_records_reason():
    logger = _logger()

    DefaultTenantSelectorProbe(logger=logger).active_tenant_cleared(
        tenant_id="t3", reason="access_revoked"
    )

    assert logger.info.call_args.kwargs["reason"] == "access_revoked"
