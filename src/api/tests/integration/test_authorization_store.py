"""Integration tests for AuthorizationStore.

These tests require PostgreSQL to be running.
"""

import pytest

from iam.domain.value_objects import IdentityId, PermissionGrant, TenantId
from iam.infrastructure.authorization_store import AuthorizationStore
from iam.infrastructure.tenant_repository import TenantRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def store(async_session) -> AuthorizationStore:
    return AuthorizationStore(async_session)


class TestPermissions:
    @pytest.mark.asyncio
    async def test_upsert_overwrites_can_edit(
        self, store, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")

        async with async_session.begin():
            await store.upsert_permission(operator.id, tenant.id, can_edit=False)
        async with async_session.begin():
            await store.upsert_permission(operator.id, tenant.id, can_edit=True)

        async with async_session.begin():
            permissions = await store.list_permissions(operator.id)

        assert len(permissions) == 1
        assert permissions[0].tenant_id == tenant.id
        assert permissions[0].can_edit is True

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_tenant_name(
        self, store, async_session, operator, make_tenant
    ):
        uptown = await make_tenant("Uptown")
        airport = await make_tenant("Airport")

        async with async_session.begin():
            await store.upsert_permission(operator.id, uptown.id, can_edit=False)
            await store.upsert_permission(operator.id, airport.id, can_edit=True)

        async with async_session.begin():
            permissions = await store.list_permissions(operator.id)

        assert [p.tenant_id for p in permissions] == [airport.id, uptown.id]

    @pytest.mark.asyncio
    async def test_deleted_tenant_drops_its_permissions(
        self, store, async_session, operator, make_tenant
    ):
        kept = await make_tenant("Downtown")
        gone = await make_tenant("Uptown")
        async with async_session.begin():
            await store.upsert_permission(operator.id, kept.id, can_edit=False)
            await store.upsert_permission(operator.id, gone.id, can_edit=True)

        async with async_session.begin():
            await TenantRepository(async_session).delete(gone)

        async with async_session.begin():
            permissions = await store.list_permissions(operator.id)
            missing = await store.get_permission(operator.id, gone.id)

        assert [p.tenant_id for p in permissions] == [kept.id]
        assert missing is None

    @pytest.mark.asyncio
    async def test_replace_permissions_swaps_the_whole_set(
        self, store, async_session, operator, make_tenant
    ):
        downtown = await make_tenant("Downtown")
        uptown = await make_tenant("Uptown")
        async with async_session.begin():
            await store.upsert_permission(operator.id, downtown.id, can_edit=True)

        async with async_session.begin():
            await store.replace_permissions(
                operator.id, [PermissionGrant(uptown.id, can_edit=False)]
            )

        async with async_session.begin():
            permissions = await store.list_permissions(operator.id)

        assert [(p.tenant_id, p.can_edit) for p in permissions] == [
            (uptown.id, False)
        ]

    @pytest.mark.asyncio
    async def test_delete_permission_reports_whether_a_row_was_removed(
        self, store, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        async with async_session.begin():
            await store.upsert_permission(operator.id, tenant.id, can_edit=False)

        async with async_session.begin():
            first = await store.delete_permission(operator.id, tenant.id)
            second = await store.delete_permission(operator.id, tenant.id)

        assert (first, second) == (True, False)


class TestGlobalAdmin:
    @pytest.mark.asyncio
    async def test_flag_change_is_visible_on_next_read(
        self, store, async_session, operator
    ):
        async with async_session.begin():
            assert await store.get_identity(operator.id) is not None
            changed = await store.set_global_admin(operator.id, True)
            identity = await store.get_identity(operator.id)

        assert changed is True
        assert identity.is_global_admin is True

    @pytest.mark.asyncio
    async def test_unknown_identity_is_not_changed(self, store, async_session):
        async with async_session.begin():
            changed = await store.set_global_admin(IdentityId("nobody"), True)

        assert changed is False


class TestTenants:
    @pytest.mark.asyncio
    async def test_get_tenant(self, store, async_session, make_tenant):
        tenant = await make_tenant("Downtown")

        async with async_session.begin():
            found = await store.get_tenant(tenant.id)
            missing = await store.get_tenant(TenantId.generate())

        assert found.name == "Downtown"
        assert missing is None
