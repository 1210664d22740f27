"""Unit tests for /businesses HTTP routes."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from crm.application.services import BusinessService
from crm.domain.aggregates import Business
from crm.domain.value_objects import BusinessId
from iam.application.value_objects import AuthenticatedUser
from iam.domain.value_objects import TenantId


@pytest.fixture
def test_client(businesses, gate, mock_session, operator) -> TestClient:
    from crm.dependencies.services import get_business_service
    from crm.presentation import router
    from iam.dependencies.user import get_authenticated_user

    service = BusinessService(
        business_repository=businesses, access_checker=gate, session=mock_session
    )
    caller = AuthenticatedUser(user_id=operator.id, email=operator.email)
    app = FastAPI()
    app.dependency_overrides[get_business_service] = lambda: service
    app.dependency_overrides[get_authenticated_user] = lambda: caller
    app.include_router(router)
    return TestClient(app)


def _seed(businesses, tenant_id: str, place_id: str | None = None) -> Business:
    business = Business.create(
        tenant_id=tenant_id, name="Corner Cafe", created_by="admin-1", place_id=place_id
    )
    businesses.businesses[business.id] = business
    return business


class TestEditor:
    @pytest.fixture(autouse=True)
    def _grant(self, store, operator, downtown):
        store.grant(operator.id, TenantId(downtown), can_edit=True)

    def test_create_and_list(self, test_client, downtown):
        created = test_client.post(
            "/businesses",
            params={"tenantId": downtown},
            json={"name": "Corner Cafe", "zipCode": "62701", "placeId": "p-1"},
        )
        listed = test_client.get("/businesses", params={"tenantId": downtown})

        assert created.status_code == status.HTTP_201_CREATED
        assert created.json()["zipCode"] == "62701"
        assert created.json()["createdBy"] == "operator-1"
        assert [b["placeId"] for b in listed.json()] == ["p-1"]

    def test_duplicate_place_is_400(self, test_client, businesses, downtown):
        _seed(businesses, downtown, place_id="p-1")

        response = test_client.post(
            "/businesses",
            params={"tenantId": downtown},
            json={"name": "Second", "placeId": "p-1"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "A business already exists for place p-1"}

    def test_blank_name_is_422(self, test_client, downtown):
        response = test_client.post(
            "/businesses", params={"tenantId": downtown}, json={"name": ""}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_patch_and_delete(self, test_client, businesses, downtown):
        business = _seed(businesses, downtown)

        patched = test_client.patch(
            f"/businesses/{business.id.value}", json={"city": "Springfield"}
        )
        deleted = test_client.delete(f"/businesses/{business.id.value}")

        assert patched.json()["city"] == "Springfield"
        assert patched.json()["name"] == "Corner Cafe"
        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert businesses.businesses == {}


class TestOtherTenant:
    def test_foreign_business_matches_nonexistent(
        self, test_client, businesses, store, operator, downtown, uptown
    ):
        store.grant(operator.id, TenantId(downtown), can_edit=True)
        foreign = _seed(businesses, uptown)

        hidden = test_client.patch(
            f"/businesses/{foreign.id.value}", json={"name": "Mine now"}
        )
        absent = test_client.patch(
            f"/businesses/{BusinessId.generate().value}", json={"name": "Mine now"}
        )

        assert hidden.status_code == absent.status_code == 404
        assert hidden.json() == absent.json() == {"detail": "Business not found"}
        assert foreign.name == "Corner Cafe"

    def test_list_without_grant_is_404(self, test_client, uptown):
        response = test_client.get("/businesses", params={"tenantId": uptown})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Tenant not found"}
