"""Unit tests for the Identity aggregate."""

import pytest

from iam.domain.aggregates import Identity
from iam.domain.value_objects import IdentityId, TenantId, TenantPermission
from shared_kernel.authorization.types import AccessLevel


def _permission(identity: Identity, can_edit: bool) -> TenantPermission:
    return TenantPermission(
        identity_id=identity.id, tenant_id=TenantId.generate(), can_edit=can_edit
    )


class TestIdentityCreation:
    def test_email_is_lower_cased(self):
        identity = Identity.create(IdentityId.from_string("u1"), "  Jane@Store.COM ")

        assert identity.email == "jane@store.com"
        assert identity.is_global_admin is False
        assert identity.created_at is not None

    def test_blank_subject_is_rejected(self):
        with pytest.raises(ValueError):
            IdentityId.from_string("   ")

    def test_overlong_subject_is_rejected(self):
        with pytest.raises(ValueError):
            IdentityId.from_string("x" * 256)

    def test_with_profile_returns_updated_copy(self):
        identity = Identity.create(IdentityId.from_string("u1"), "a@example.com")

        updated = identity.with_profile("B@Example.com", "Bea")

        assert updated.email == "b@example.com"
        assert updated.display_name == "Bea"
        assert identity.email == "a@example.com"


class TestIdentityAccess:
    """Truth table for effective access."""

    @pytest.mark.parametrize(
        "is_admin,row,level,expected",
        [
            (True, None, AccessLevel.VIEW, True),
            (True, None, AccessLevel.EDIT, True),
            (False, None, AccessLevel.VIEW, False),
            (False, None, AccessLevel.EDIT, False),
            (False, "view", AccessLevel.VIEW, True),
            (False, "view", AccessLevel.EDIT, False),
            (False, "edit", AccessLevel.VIEW, True),
            (False, "edit", AccessLevel.EDIT, True),
        ],
    )
    def test_truth_table(self, is_admin, row, level, expected):
        identity = Identity.create(
            IdentityId.from_string("u1"), "u@example.com", is_global_admin=is_admin
        )
        permission = None if row is None else _permission(identity, row == "edit")

        assert identity.has_access(permission, level) is expected

    def test_edit_implies_view(self):
        identity = Identity.create(IdentityId.from_string("u1"), "u@example.com")
        permission = _permission(identity, can_edit=True)

        assert identity.has_access(permission, AccessLevel.EDIT)
        assert identity.has_access(permission, AccessLevel.VIEW)

    def test_someone_elses_permission_grants_nothing(self):
        identity = Identity.create(IdentityId.from_string("u1"), "u@example.com")
        other = Identity.create(IdentityId.from_string("u2"), "o@example.com")

        assert not identity.has_access(_permission(other, True), AccessLevel.VIEW)
