"""Unit tests for /tenants and /invites HTTP routes.

A tenant the caller may not see must answer exactly like one that does
not exist.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from iam.application.services import InvitationService, TenantService
from iam.application.value_objects import AuthenticatedUser
from iam.domain.aggregates import Invitation, Tenant
from iam.domain.exceptions import InvalidTenantError
from iam.domain.value_objects import IdentityId, TenantId
from iam.ports.exceptions import (
    InvitationNotFoundError,
    TenantNotFoundError,
    UnauthorizedError,
)


@pytest.fixture
def mock_tenant_service() -> AsyncMock:
    return AsyncMock(spec=TenantService)


@pytest.fixture
def mock_invitation_service() -> AsyncMock:
    return AsyncMock(spec=InvitationService)


@pytest.fixture
def caller() -> AuthenticatedUser:
    return AuthenticatedUser(user_id=IdentityId.from_string("admin-1"))


@pytest.fixture
def test_client(
    mock_tenant_service: AsyncMock,
    mock_invitation_service: AsyncMock,
    caller: AuthenticatedUser,
) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from iam.dependencies.invitation import get_invitation_service
    from iam.dependencies.tenant import get_tenant_service
    from iam.dependencies.user import get_authenticated_user
    from iam.presentation import router

    app = FastAPI()
    app.dependency_overrides[get_tenant_service] = lambda: mock_tenant_service
    app.dependency_overrides[get_invitation_service] = (
        lambda: mock_invitation_service
    )
    app.dependency_overrides[get_authenticated_user] = lambda: caller
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def downtown(caller) -> Tenant:
    return Tenant.create(name="Downtown", created_by=caller.user_id, city="Austin")


class TestTenantRoutes:
    def test_create(self, test_client, mock_tenant_service, downtown):
        mock_tenant_service.create_tenant.return_value = downtown

        response = test_client.post(
            "/tenants", json={"name": "Downtown", "city": "Austin", "zipCode": "78701"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == downtown.id.value
        assert mock_tenant_service.create_tenant.call_args.kwargs["zip_code"] == "78701"

    def test_create_forbidden_for_operator(self, test_client, mock_tenant_service):
        mock_tenant_service.create_tenant.side_effect = UnauthorizedError(
            "Global admin access required"
        )

        response = test_client.post("/tenants", json={"name": "Downtown"})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_invalid_name(self, test_client, mock_tenant_service):
        mock_tenant_service.create_tenant.side_effect = InvalidTenantError(
            "Tenant name must not be empty"
        )

        response = test_client.post("/tenants", json={"name": " "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list(self, test_client, mock_tenant_service, downtown):
        mock_tenant_service.list_tenants.return_value = [downtown]

        response = test_client.get("/tenants")

        assert [t["name"] for t in response.json()] == ["Downtown"]

    def test_forbidden_and_missing_are_identical(
        self, test_client, mock_tenant_service
    ):
        hidden = TenantId.generate().value
        missing = TenantId.generate().value
        mock_tenant_service.get_tenant.side_effect = [
            TenantNotFoundError(hidden),
            TenantNotFoundError(missing),
        ]

        forbidden = test_client.get(f"/tenants/{hidden}")
        absent = test_client.get(f"/tenants/{missing}")

        assert forbidden.status_code == absent.status_code == 404
        assert forbidden.json() == absent.json() == {"detail": "Tenant not found"}

    def test_update_view_only_is_404(self, test_client, mock_tenant_service):
        mock_tenant_service.update_tenant.side_effect = TenantNotFoundError()

        response = test_client.patch(
            f"/tenants/{TenantId.generate().value}", json={"name": "New"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, test_client, mock_tenant_service, downtown):
        response = test_client.delete(f"/tenants/{downtown.id.value}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        mock_tenant_service.delete_tenant.assert_awaited_once()

    def test_delete_visible_but_not_admin_is_403(
        self, test_client, mock_tenant_service, downtown
    ):
        mock_tenant_service.delete_tenant.side_effect = UnauthorizedError(
            "Global admin access required"
        )

        response = test_client.delete(f"/tenants/{downtown.id.value}")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_invisible_is_404(self, test_client, mock_tenant_service):
        mock_tenant_service.delete_tenant.side_effect = TenantNotFoundError()

        response = test_client.delete(f"/tenants/{TenantId.generate().value}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestInviteRoutes:
    @pytest.fixture
    def invitation(self, caller, downtown) -> Invitation:
        return Invitation.create(
            email="hire@example.com", tenant_id=downtown.id, invited_by=caller.user_id
        )

    def test_create_new_is_201(self, test_client, mock_invitation_service, invitation):
        mock_invitation_service.invite.return_value = (invitation, True)

        response = test_client.post(
            "/invites",
            json={
                "email": "hire@example.com",
                "tenantId": invitation.tenant_id.value,
                "canEdit": True,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["status"] == "pending"
        assert mock_invitation_service.invite.call_args.kwargs["can_edit"] is True

    def test_merge_is_200(self, test_client, mock_invitation_service, invitation):
        mock_invitation_service.invite.return_value = (invitation, False)

        response = test_client.post(
            "/invites",
            json={"email": "hire@example.com", "tenantId": invitation.tenant_id.value},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_create_for_unknown_tenant_is_404(
        self, test_client, mock_invitation_service
    ):
        mock_invitation_service.invite.side_effect = TenantNotFoundError()

        response = test_client.post(
            "/invites",
            json={"email": "x@example.com", "tenantId": TenantId.generate().value},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_passes_tenant_filter(
        self, test_client, mock_invitation_service, invitation
    ):
        mock_invitation_service.list_invitations.return_value = [invitation]

        response = test_client.get(
            "/invites", params={"tenantId": invitation.tenant_id.value}
        )

        assert response.status_code == status.HTTP_200_OK
        assert (
            mock_invitation_service.list_invitations.call_args.kwargs["tenant_id"]
            == invitation.tenant_id.value
        )

    def test_list_forbidden_for_operator(self, test_client, mock_invitation_service):
        mock_invitation_service.list_invitations.side_effect = UnauthorizedError(
            "Global admin access required"
        )

        assert test_client.get("/invites").status_code == status.HTTP_403_FORBIDDEN

    def test_delete_missing_is_404(self, test_client, mock_invitation_service):
        mock_invitation_service.delete_invitation.side_effect = (
            InvitationNotFoundError()
        )

        response = test_client.delete("/invites/whatever")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Invite not found"
