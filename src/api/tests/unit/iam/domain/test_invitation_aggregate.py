"""Unit tests for the Invitation aggregate."""

import pytest

from iam.domain.aggregates import Invitation
from iam.domain.exceptions import InvitationAlreadyAcceptedError
from iam.domain.value_objects import IdentityId, InvitationStatus, TenantId


@pytest.fixture
def invitation() -> Invitation:
    return Invitation.create(
        email="New.Hire@Example.com",
        tenant_id=TenantId.generate(),
        invited_by=IdentityId.from_string("admin-1"),
    )


class TestInvitationCreation:
    def test_starts_pending_with_normalized_email(self, invitation):
        assert invitation.status == InvitationStatus.PENDING
        assert invitation.email == "new.hire@example.com"
        assert invitation.can_edit is False

    def test_blank_email_is_rejected(self):
        with pytest.raises(ValueError):
            Invitation.create(
                email="  ",
                tenant_id=TenantId.generate(),
                invited_by=IdentityId.from_string("admin-1"),
            )


class TestInvitationMerge:
    def test_more_generous_flags_win(self, invitation):
        invitation.merge(can_edit=True, is_global_admin=False)
        invitation.merge(can_edit=False, is_global_admin=False)

        assert invitation.can_edit is True
        assert invitation.is_global_admin is False

    def test_cannot_merge_into_accepted(self, invitation):
        invitation.accept()

        with pytest.raises(InvitationAlreadyAcceptedError):
            invitation.merge(can_edit=True, is_global_admin=False)


class TestInvitationAccept:
    def test_accept_is_one_way(self, invitation):
        invitation.accept()

        assert invitation.status == InvitationStatus.ACCEPTED
        assert not invitation.is_pending
        with pytest.raises(InvitationAlreadyAcceptedError):
            invitation.accept()
