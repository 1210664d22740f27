"""Unit tests for IAM repository domain probes."""

from unittest.mock import Mock

from iam.infrastructure.observability import (
    DefaultAuthorizationStoreProbe,
    DefaultInvitationRepositoryProbe,
    DefaultTenantRepositoryProbe,
)
from shared_kernel.observability_context import ObservationContext


class TestDefaultAuthorizationStoreProbe:
    def test_permission_upserted(self):
        mock_logger = Mock()
        probe = DefaultAuthorizationStoreProbe(logger=mock_logger)

        probe.permission_upserted("operator-1", "01TENANT", can_edit=True)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "permission_upserted"
        assert call_args[1]["can_edit"] is True

    def test_global_admin_change_is_a_warning(self):
        mock_logger = Mock()
        probe = DefaultAuthorizationStoreProbe(logger=mock_logger)

        probe.global_admin_changed("operator-1", is_global_admin=True)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "global_admin_changed"

    def test_context_is_included(self):
        mock_logger = Mock()
        probe = DefaultAuthorizationStoreProbe(logger=mock_logger).with_context(
            ObservationContext(request_id="req-1", user_id="admin-1")
        )

        probe.permissions_replaced("operator-1", count=2)

        kwargs = mock_logger.info.call_args[1]
        assert kwargs["request_id"] == "req-1"
        assert kwargs["user_id"] == "admin-1"
        assert kwargs["count"] == 2


class TestDefaultInvitationRepositoryProbe:
    def test_pending_lookup_logs_count_only(self):
        mock_logger = Mock()
        probe = DefaultInvitationRepositoryProbe(logger=mock_logger)

        probe.pending_invitations_found(count=3)

        mock_logger.debug.assert_called_once_with("pending_invitations_found", count=3)


class TestDefaultTenantRepositoryProbe:
    def test_creates_with_default_logger(self):
        probe = DefaultTenantRepositoryProbe()
        assert probe._logger is not None

    def test_tenant_deleted(self):
        mock_logger = Mock()
        probe = DefaultTenantRepositoryProbe(logger=mock_logger)

        probe.tenant_deleted("01TENANT")

        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args[1]["tenant_id"] == "01TENANT"
