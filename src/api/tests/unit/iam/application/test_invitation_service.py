"""Unit tests for InvitationService."""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.exc import IntegrityError

from iam.application.services import AccessGate, InvitationService
from iam.domain.aggregates import Invitation, Tenant
from iam.domain.value_objects import InvitationId, TenantId
from iam.ports.exceptions import (
    InvitationNotFoundError,
    UnauthorizedError,
)
from iam.ports.repositories import ITenantRepository
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from tests.unit.iam.fakes import (
    InMemoryAuthorizationStore,
    InMemoryInvitationRepository,
)


@pytest.fixture
def store(admin, operator) -> InMemoryAuthorizationStore:
    store = InMemoryAuthorizationStore()
    store.add_identity(admin)
    store.add_identity(operator)
    return store


@pytest.fixture
def downtown(store, admin) -> Tenant:
    return store.add_tenant(Tenant.create(name="Downtown", created_by=admin.id))


@pytest.fixture
def tenant_repo(store) -> Mock:
    repo = Mock(spec=ITenantRepository)
    repo.get_by_id = AsyncMock(side_effect=lambda tid: store.tenants.get(tid))
    return repo


@pytest.fixture
def invitations() -> InMemoryInvitationRepository:
    return InMemoryInvitationRepository()


@pytest.fixture
def service(invitations, tenant_repo, store, mock_session) -> InvitationService:
    return InvitationService(
        invitation_repository=invitations,
        tenant_repository=tenant_repo,
        access_gate=AccessGate(store),
        session=mock_session,
    )


class TestInvite:
    @pytest.mark.asyncio
    async def test_creates_pending_invitation(self, service, admin, downtown):
        invitation, created = await service.invite(
            admin.id, "Hire@Example.com", downtown.id.value, can_edit=True
        )

        assert created is True
        assert invitation.email == "hire@example.com"
        assert invitation.tenant_id == downtown.id
        assert invitation.invited_by == admin.id

    @pytest.mark.asyncio
    async def test_repeat_invite_merges_with_or(
        self, service, invitations, admin, downtown
    ):
        first, _ = await service.invite(
            admin.id, "hire@example.com", downtown.id.value, can_edit=True
        )

        second, created = await service.invite(
            admin.id, "HIRE@example.com", downtown.id.value, can_edit=False
        )

        assert created is False
        assert second.id == first.id
        assert second.can_edit is True
        assert len(invitations.invitations) == 1

    @pytest.mark.asyncio
    async def test_non_admin_cannot_invite(self, service, store, operator, downtown):
        store.grant(operator.id, downtown.id, can_edit=True)

        with pytest.raises(UnauthorizedError):
            await service.invite(operator.id, "x@example.com", downtown.id.value)

    @pytest.mark.asyncio
    async def test_unknown_tenant(self, service, admin, invitations):
        with pytest.raises(TenantAccessDeniedError, match="Tenant not found"):
            await service.invite(admin.id, "x@example.com", TenantId.generate().value)
        assert invitations.invitations == {}

    @pytest.mark.asyncio
    async def test_blank_email(self, service, admin, downtown):
        with pytest.raises(ValueError):
            await service.invite(admin.id, " ", downtown.id.value)

    @pytest.mark.asyncio
    async def test_lost_insert_race_retries_as_merge(
        self, tenant_repo, store, mock_session, admin, downtown
    ):
        winner = Invitation.create(
            email="x@example.com", tenant_id=downtown.id, invited_by=admin.id
        )
        repo = Mock()
        repo.get_pending = AsyncMock(side_effect=[None, winner])
        repo.save = AsyncMock(
            side_effect=[IntegrityError("INSERT", {}, Exception("duplicate")), None]
        )
        service = InvitationService(
            invitation_repository=repo,
            tenant_repository=tenant_repo,
            access_gate=AccessGate(store),
            session=mock_session,
        )

        invitation, created = await service.invite(
            admin.id, "x@example.com", downtown.id.value, can_edit=True
        )

        assert created is False
        assert invitation is winner
        assert winner.can_edit is True


class TestListAndDelete:
    @pytest.mark.asyncio
    async def test_list_filters_by_tenant(self, service, store, admin, downtown):
        uptown = store.add_tenant(Tenant.create(name="Uptown", created_by=admin.id))
        await service.invite(admin.id, "a@example.com", downtown.id.value)
        await service.invite(admin.id, "b@example.com", uptown.id.value)

        listed = await service.list_invitations(admin.id, tenant_id=uptown.id.value)

        assert [i.email for i in listed] == ["b@example.com"]

    @pytest.mark.asyncio
    async def test_list_requires_admin(self, service, operator):
        with pytest.raises(UnauthorizedError):
            await service.list_invitations(operator.id)

    @pytest.mark.asyncio
    async def test_delete(self, service, invitations, admin, downtown):
        invitation, _ = await service.invite(
            admin.id, "a@example.com", downtown.id.value
        )

        await service.delete_invitation(admin.id, invitation.id.value)

        assert invitations.invitations == {}

    @pytest.mark.asyncio
    async def test_delete_missing(self, service, admin):
        with pytest.raises(InvitationNotFoundError, match="Invite not found"):
            await service.delete_invitation(admin.id, InvitationId.generate().value)

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, service, admin):
        with pytest.raises(InvitationNotFoundError):
            await service.delete_invitation(admin.id, "not-a-ulid")

