"""Unit tests for CalendarEventService."""

from datetime import UTC, date, datetime

import pytest

from crm.application.services import CalendarEventService
from crm.domain.aggregates import CalendarEvent, Contact
from crm.domain.value_objects import EventStatus
from crm.ports.exceptions import CalendarEventNotFoundError, ContactNotFoundError
from iam.domain.value_objects import TenantId
from shared_kernel.authorization.exceptions import TenantAccessDeniedError


@pytest.fixture
def service(events, contacts, gate, mock_session) -> CalendarEventService:
    return CalendarEventService(
        event_repository=events,
        contact_repository=contacts,
        access_checker=gate,
        session=mock_session,
    )


@pytest.fixture
def editor(store, operator, downtown) -> str:
    store.grant(operator.id, TenantId(downtown), can_edit=True)
    return operator.id.value


def _contact(contacts, tenant_id: str) -> Contact:
    contact = Contact.create(tenant_id=tenant_id, created_by="admin-1", first_name="A")
    contacts.contacts[contact.id] = contact
    return contact


def _event(events, tenant_id: str, when: datetime) -> CalendarEvent:
    event = CalendarEvent.create(
        tenant_id=tenant_id, title="Visit", date=when, created_by="admin-1"
    )
    events.events[event.id] = event
    return event


class TestListEvents:
    @pytest.mark.asyncio
    async def test_day_filter_is_one_utc_day(self, service, events, editor, downtown):
        inside = _event(events, downtown, datetime(2024, 5, 1, 23, 59, tzinfo=UTC))
        _event(events, downtown, datetime(2024, 5, 2, 0, 0, tzinfo=UTC))

        listed = await service.list_events(editor, downtown, on=date(2024, 5, 1))

        assert [e.id for e in listed] == [inside.id]
        assert events.last_range == (
            datetime(2024, 5, 1, tzinfo=UTC),
            datetime(2024, 5, 2, tzinfo=UTC),
        )

    @pytest.mark.asyncio
    async def test_no_grant_reads_as_missing_tenant(
        self, service, operator, downtown
    ):
        with pytest.raises(TenantAccessDeniedError, match="Tenant not found"):
            await service.list_events(operator.id.value, downtown)


class TestCreateEvent:
    @pytest.mark.asyncio
    async def test_links_contact_in_same_tenant(
        self, service, contacts, editor, downtown
    ):
        contact = _contact(contacts, downtown)

        event = await service.create_event(
            editor,
            downtown,
            title="Follow up",
            date=datetime(2024, 5, 1, tzinfo=UTC),
            contact_id=contact.id.value,
        )

        assert event.contact_id == contact.id

    @pytest.mark.asyncio
    async def test_rejects_contact_from_another_tenant(
        self, service, contacts, editor, downtown, uptown
    ):
        foreign = _contact(contacts, uptown)

        with pytest.raises(ContactNotFoundError):
            await service.create_event(
                editor,
                downtown,
                title="Follow up",
                date=datetime(2024, 5, 1, tzinfo=UTC),
                contact_id=foreign.id.value,
            )

    @pytest.mark.asyncio
    async def test_view_only_cannot_create(
        self, service, store, operator, downtown
    ):
        store.grant(operator.id, TenantId(downtown), can_edit=False)

        with pytest.raises(TenantAccessDeniedError):
            await service.create_event(
                operator.id.value,
                downtown,
                title="Call",
                date=datetime(2024, 5, 1, tzinfo=UTC),
            )

    @pytest.mark.asyncio
    async def test_admin_create_in_unknown_tenant(self, service, events, admin):
        with pytest.raises(TenantAccessDeniedError, match="Tenant not found"):
            await service.create_event(
                admin.id.value,
                TenantId.generate().value,
                title="Call",
                date=datetime(2024, 5, 1, tzinfo=UTC),
            )
        assert events.events == {}


class TestUpdateAndDelete:
    @pytest.mark.asyncio
    async def test_complete_and_unlink(
        self, service, events, contacts, editor, downtown
    ):
        event = _event(events, downtown, datetime(2024, 5, 1, tzinfo=UTC))
        event.link_contact(_contact(contacts, downtown).id)

        updated = await service.update_event(
            editor, event.id.value, status=EventStatus.COMPLETED, unlink_contact=True
        )

        assert updated.status == EventStatus.COMPLETED
        assert updated.completed_at is not None
        assert updated.contact_id is None

    @pytest.mark.asyncio
    async def test_relink_to_foreign_contact_fails(
        self, service, events, contacts, editor, downtown, uptown
    ):
        event = _event(events, downtown, datetime(2024, 5, 1, tzinfo=UTC))

        with pytest.raises(ContactNotFoundError):
            await service.update_event(
                editor, event.id.value, contact_id=_contact(contacts, uptown).id.value
            )

    @pytest.mark.asyncio
    async def test_event_in_other_tenant_reads_as_missing(
        self, service, events, editor, uptown
    ):
        foreign = _event(events, uptown, datetime(2024, 5, 1, tzinfo=UTC))

        with pytest.raises(CalendarEventNotFoundError, match="Event not found"):
            await service.get_event(editor, foreign.id.value)

    @pytest.mark.asyncio
    async def test_delete(self, service, events, editor, downtown):
        event = _event(events, downtown, datetime(2024, 5, 1, tzinfo=UTC))

        await service.delete_event(editor, event.id.value)

        assert events.events == {}

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, service, editor):
        with pytest.raises(CalendarEventNotFoundError):
            await service.delete_event(editor, "nope")
