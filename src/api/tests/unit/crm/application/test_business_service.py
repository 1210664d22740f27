"""Unit tests for BusinessService."""

import pytest
from sqlalchemy.exc import IntegrityError

from crm.application.services import BusinessService
from crm.domain.aggregates import Business
from crm.ports.exceptions import BusinessNotFoundError, DuplicateBusinessPlaceError
from iam.domain.value_objects import TenantId
from shared_kernel.authorization.exceptions import TenantAccessDeniedError


@pytest.fixture
def service(businesses, gate, mock_session) -> BusinessService:
    return BusinessService(
        business_repository=businesses, access_checker=gate, session=mock_session
    )


@pytest.fixture
def editor(store, operator, downtown) -> str:
    store.grant(operator.id, TenantId(downtown), can_edit=True)
    return operator.id.value


def _business(businesses, tenant_id: str, name: str, place_id=None) -> Business:
    business = Business.create(
        tenant_id=tenant_id, name=name, created_by="admin-1", place_id=place_id
    )
    businesses.businesses[business.id] = business
    return business


class TestListAndCreate:
    @pytest.mark.asyncio
    async def test_list_is_tenant_scoped_and_by_name(
        self, service, businesses, editor, downtown, uptown
    ):
        _business(businesses, downtown, "Zeta Bakery")
        _business(businesses, downtown, "Alpha Deli")
        _business(businesses, uptown, "Elsewhere")

        listed = await service.list_businesses(editor, downtown)

        assert [b.name for b in listed] == ["Alpha Deli", "Zeta Bakery"]

    @pytest.mark.asyncio
    async def test_view_only_can_list_but_not_create(
        self, service, store, operator, downtown
    ):
        store.grant(operator.id, TenantId(downtown), can_edit=False)

        assert await service.list_businesses(operator.id.value, downtown) == []
        with pytest.raises(TenantAccessDeniedError):
            await service.create_business(operator.id.value, downtown, name="Cafe")

    @pytest.mark.asyncio
    async def test_create_records_creator(self, service, businesses, editor, downtown):
        business = await service.create_business(
            editor, downtown, name="Corner Cafe", city="Springfield", place_id="p-1"
        )

        assert businesses.businesses[business.id].created_by == editor
        assert business.place_id == "p-1"

    @pytest.mark.asyncio
    async def test_place_is_unique_per_tenant(
        self, service, businesses, editor, downtown, uptown
    ):
        _business(businesses, downtown, "First", place_id="p-1")
        _business(businesses, uptown, "Other store", place_id="p-2")

        with pytest.raises(DuplicateBusinessPlaceError, match="p-1"):
            await service.create_business(
                editor, downtown, name="Second", place_id="p-1"
            )
        created = await service.create_business(
            editor, downtown, name="Third", place_id="p-2"
        )

        assert created.place_id == "p-2"

    @pytest.mark.asyncio
    async def test_index_race_is_a_duplicate(
        self, service, businesses, editor, downtown, monkeypatch
    ):
        async def lose_race(business):
            raise IntegrityError("INSERT INTO businesses", {}, Exception("unique"))

        monkeypatch.setattr(businesses, "save", lose_race)

        with pytest.raises(DuplicateBusinessPlaceError):
            await service.create_business(editor, downtown, name="Cafe", place_id="p")

    @pytest.mark.asyncio
    async def test_admin_create_in_unknown_tenant(self, service, businesses, admin):
        with pytest.raises(TenantAccessDeniedError, match="Tenant not found"):
            await service.create_business(
                admin.id.value, TenantId.generate().value, name="Cafe"
            )
        assert businesses.businesses == {}


class TestExistingBusiness:
    @pytest.mark.asyncio
    async def test_other_tenant_reads_as_missing(
        self, service, businesses, editor, uptown
    ):
        foreign = _business(businesses, uptown, "Elsewhere")

        with pytest.raises(BusinessNotFoundError):
            await service.get_business(editor, foreign.id.value)

    @pytest.mark.asyncio
    async def test_malformed_id_reads_as_missing(self, service, editor):
        with pytest.raises(BusinessNotFoundError):
            await service.get_business(editor, "not-a-ulid")

    @pytest.mark.asyncio
    async def test_update_keeps_own_place(self, service, businesses, editor, downtown):
        business = _business(businesses, downtown, "Cafe", place_id="p-1")

        updated = await service.update_business(
            editor, business.id.value, name="Cafe Two", place_id="p-1"
        )

        assert updated.name == "Cafe Two"

    @pytest.mark.asyncio
    async def test_update_onto_taken_place(self, service, businesses, editor, downtown):
        _business(businesses, downtown, "Cafe", place_id="p-1")
        other = _business(businesses, downtown, "Deli")

        with pytest.raises(DuplicateBusinessPlaceError):
            await service.update_business(editor, other.id.value, place_id="p-1")

    @pytest.mark.asyncio
    async def test_view_only_cannot_delete(
        self, service, businesses, store, operator, downtown
    ):
        store.grant(operator.id, TenantId(downtown), can_edit=False)
        business = _business(businesses, downtown, "Cafe")

        with pytest.raises(BusinessNotFoundError):
            await service.delete_business(operator.id.value, business.id.value)
        assert business.id in businesses.businesses

    @pytest.mark.asyncio
    async def test_delete(self, service, businesses, editor, downtown):
        business = _business(businesses, downtown, "Cafe")

        await service.delete_business(editor, business.id.value)

        assert businesses.businesses == {}
