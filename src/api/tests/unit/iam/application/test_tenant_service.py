"""Unit tests for TenantService."""

from unittest.mock import Mock

import pytest

from iam.application.observability import TenantServiceProbe
from iam.application.services import AccessGate, TenantService
from iam.domain.aggregates import Tenant
from iam.domain.exceptions import InvalidTenantError
from iam.domain.value_objects import TenantId
from iam.ports.exceptions import TenantNotFoundError, UnauthorizedError
from shared_kernel.authorization.exceptions import ResourceNotFoundError
from tests.unit.iam.fakes import InMemoryAuthorizationStore


class InMemoryTenantRepository:
    def __init__(self, store: InMemoryAuthorizationStore):
        self._store = store
        self.deleted: list[TenantId] = []

    async def save(self, tenant: Tenant) -> None:
        self._store.add_tenant(tenant)

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        return self._store.tenants.get(tenant_id)

    async def list_all(self) -> list[Tenant]:
        return await self._store.list_tenants()

    async def delete(self, tenant: Tenant) -> bool:
        self.deleted.append(tenant.id)
        return self._store.tenants.pop(tenant.id, None) is not None


@pytest.fixture
def store(admin, operator) -> InMemoryAuthorizationStore:
    store = InMemoryAuthorizationStore()
    store.add_identity(admin)
    store.add_identity(operator)
    return store


@pytest.fixture
def tenant_repo(store) -> InMemoryTenantRepository:
    return InMemoryTenantRepository(store)


@pytest.fixture
def probe() -> Mock:
    return Mock(spec=TenantServiceProbe)


@pytest.fixture
def tenant_service(store, tenant_repo, mock_session, probe) -> TenantService:
    return TenantService(
        tenant_repository=tenant_repo,
        authorization_store=store,
        access_gate=AccessGate(store),
        session=mock_session,
        probe=probe,
    )


@pytest.fixture
def downtown(store, admin) -> Tenant:
    return store.add_tenant(Tenant.create(name="Downtown", created_by=admin.id))


class TestCreateTenant:
    @pytest.mark.asyncio
    async def test_admin_creates_tenant(self, tenant_service, store, admin, probe):
        tenant = await tenant_service.create_tenant(admin.id, "Uptown", city="Austin")

        assert store.tenants[tenant.id].name == "Uptown"
        probe.tenant_created.assert_called_once()

    @pytest.mark.asyncio
    async def test_operator_cannot_create(self, tenant_service, operator):
        with pytest.raises(UnauthorizedError):
            await tenant_service.create_tenant(operator.id, "Uptown")

    @pytest.mark.asyncio
    async def test_blank_name(self, tenant_service, admin):
        with pytest.raises(InvalidTenantError):
            await tenant_service.create_tenant(admin.id, "  ")


class TestReadTenant:
    @pytest.mark.asyncio
    async def test_view_permission_is_enough(
        self, tenant_service, store, operator, downtown
    ):
        store.grant(operator.id, downtown.id)

        tenant = await tenant_service.get_tenant(operator.id, downtown.id.value)

        assert tenant.id == downtown.id

    @pytest.mark.asyncio
    async def test_missing_and_forbidden_look_the_same(
        self, tenant_service, operator, downtown
    ):
        with pytest.raises(ResourceNotFoundError) as forbidden:
            await tenant_service.get_tenant(operator.id, downtown.id.value)
        with pytest.raises(ResourceNotFoundError) as missing:
            await tenant_service.get_tenant(operator.id, TenantId.generate().value)

        assert str(forbidden.value) == str(missing.value) == "Tenant not found"

    @pytest.mark.asyncio
    async def test_list_filters_to_permitted(
        self, tenant_service, store, admin, operator, downtown
    ):
        uptown = store.add_tenant(Tenant.create(name="Uptown", created_by=admin.id))
        store.grant(operator.id, uptown.id)

        assert [t.id for t in await tenant_service.list_tenants(operator.id)] == [
            uptown.id
        ]
        assert len(await tenant_service.list_tenants(admin.id)) == 2


class TestUpdateTenant:
    @pytest.mark.asyncio
    async def test_edit_permission_required(
        self, tenant_service, store, operator, downtown
    ):
        store.grant(operator.id, downtown.id, can_edit=False)

        with pytest.raises(ResourceNotFoundError, match="Tenant not found"):
            await tenant_service.update_tenant(
                operator.id, downtown.id.value, name="Renamed"
            )
        assert downtown.name == "Downtown"

    @pytest.mark.asyncio
    async def test_editor_updates(self, tenant_service, store, operator, downtown):
        store.grant(operator.id, downtown.id, can_edit=True)

        tenant = await tenant_service.update_tenant(
            operator.id, downtown.id.value, zip_code="78701"
        )

        assert tenant.zip_code == "78701"
        assert tenant.name == "Downtown"


class TestDeleteTenant:
    @pytest.mark.asyncio
    async def test_admin_deletes(self, tenant_service, tenant_repo, admin, downtown):
        await tenant_service.delete_tenant(admin.id, downtown.id.value)

        assert tenant_repo.deleted == [downtown.id]

    @pytest.mark.asyncio
    async def test_visible_but_not_admin_is_forbidden(
        self, tenant_service, store, tenant_repo, operator, downtown
    ):
        store.grant(operator.id, downtown.id, can_edit=False)

        with pytest.raises(UnauthorizedError):
            await tenant_service.delete_tenant(operator.id, downtown.id.value)
        assert tenant_repo.deleted == []

    @pytest.mark.asyncio
    async def test_invisible_is_not_found(
        self, tenant_service, tenant_repo, operator, downtown
    ):
        with pytest.raises(TenantNotFoundError):
            await tenant_service.delete_tenant(operator.id, downtown.id.value)
        assert tenant_repo.deleted == []
