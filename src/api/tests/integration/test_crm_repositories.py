"""Integration tests for the CRM repositories.

These tests require PostgreSQL to be running.
"""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from crm.domain.aggregates import Business, CalendarEvent, Contact, Opportunity
from crm.domain.value_objects import (
    DonationDetails,
    OpportunityStatus,
    Reachout,
    ReachoutId,
)
from crm.infrastructure.business_repository import BusinessRepository
from crm.infrastructure.calendar_event_repository import CalendarEventRepository
from crm.infrastructure.contact_repository import ContactRepository
from crm.infrastructure.opportunity_repository import OpportunityRepository

pytestmark = pytest.mark.integration


def _reachout(created_by: str, days_ago: int, note: str) -> Reachout:
    return Reachout(
        id=ReachoutId.generate(),
        date=datetime(2026, 3, 20, tzinfo=UTC) - timedelta(days=days_ago),
        note=note,
        created_by=created_by,
        donation=DonationDetails(sample_tray=1),
    )


class TestContactRepository:
    @pytest.mark.asyncio
    async def test_replace_reachouts_keeps_only_the_new_set(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        repo = ContactRepository(async_session)
        contact = Contact.create(
            tenant.id.value, operator.id.value, business_name="Bakery"
        )
        author = operator.id.value
        contact.replace_reachouts(
            [_reachout(author, 3, "old"), _reachout(author, 2, "older")]
        )
        async with async_session.begin():
            await repo.save(contact)
            await repo.replace_reachouts(contact)

        contact.replace_reachouts([_reachout(operator.id.value, 0, "latest")])
        async with async_session.begin():
            await repo.save(contact)
            await repo.replace_reachouts(contact)

        async with async_session.begin():
            loaded = await repo.get_by_id(contact.id)

        assert [r.note for r in loaded.reachouts] == ["latest"]
        assert loaded.reachouts[0].donation.sample_tray == 1
        assert loaded.last_reachout_date == contact.last_reachout_date

    @pytest.mark.asyncio
    async def test_unknown_reachout_author_violates_foreign_key(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        repo = ContactRepository(async_session)
        contact = Contact.create(tenant.id.value, operator.id.value, first_name="A")
        async with async_session.begin():
            await repo.save(contact)

        contact.replace_reachouts([_reachout("auth0|nobody", 0, "ghost")])
        with pytest.raises(IntegrityError):
            async with async_session.begin():
                await repo.replace_reachouts(contact)

    @pytest.mark.asyncio
    async def test_list_puts_contacts_without_reachouts_last(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        repo = ContactRepository(async_session)
        never = Contact.create(tenant.id.value, operator.id.value, first_name="Never")
        older = Contact.create(tenant.id.value, operator.id.value, first_name="Older")
        newer = Contact.create(tenant.id.value, operator.id.value, first_name="Newer")
        older.replace_reachouts([_reachout(operator.id.value, 5, "a")])
        newer.replace_reachouts([_reachout(operator.id.value, 1, "b")])

        async with async_session.begin():
            for contact in (never, older, newer):
                await repo.save(contact)
                await repo.replace_reachouts(contact)

        async with async_session.begin():
            listed = await repo.list_by_tenant(tenant.id.value)

        assert [c.first_name for c in listed] == ["Newer", "Older", "Never"]

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_one_tenant(
        self, async_session, operator, make_tenant
    ):
        downtown = await make_tenant("Downtown")
        uptown = await make_tenant("Uptown")
        repo = ContactRepository(async_session)
        async with async_session.begin():
            await repo.save(
                Contact.create(downtown.id.value, operator.id.value, first_name="D")
            )
            await repo.save(
                Contact.create(uptown.id.value, operator.id.value, first_name="U")
            )

        async with async_session.begin():
            listed = await repo.list_by_tenant(uptown.id.value)

        assert [c.first_name for c in listed] == ["U"]


class TestCalendarEventRepository:
    @pytest.mark.asyncio
    async def test_range_is_half_open(self, async_session, operator, make_tenant):
        tenant = await make_tenant("Downtown")
        repo = CalendarEventRepository(async_session)
        day = datetime(2026, 3, 20, tzinfo=UTC)
        inside = CalendarEvent.create(
            tenant.id.value, "Inside", day + timedelta(hours=9), operator.id.value
        )
        at_midnight = CalendarEvent.create(
            tenant.id.value, "Next day", day + timedelta(days=1), operator.id.value
        )
        async with async_session.begin():
            await repo.save(inside)
            await repo.save(at_midnight)

        async with async_session.begin():
            listed = await repo.list_by_tenant(
                tenant.id.value, start=day, end=day + timedelta(days=1)
            )

        assert [e.title for e in listed] == ["Inside"]

    @pytest.mark.asyncio
    async def test_deleting_a_contact_unlinks_its_events(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        contacts = ContactRepository(async_session)
        events = CalendarEventRepository(async_session)
        contact = Contact.create(tenant.id.value, operator.id.value, first_name="Al")
        event = CalendarEvent.create(
            tenant.id.value,
            "Drop off samples",
            datetime(2026, 3, 20, 15, tzinfo=UTC),
            operator.id.value,
            contact_id=contact.id,
        )
        async with async_session.begin():
            await contacts.save(contact)
            await events.save(event)

        async with async_session.begin():
            await contacts.delete(contact)

        async_session.expunge_all()
        async with async_session.begin():
            loaded = await events.get_by_id(event.id)

        assert loaded is not None
        assert loaded.contact_id is None


def _opportunity(tenant_id: str, created_by: str, place_id: str) -> Opportunity:
    return Opportunity.create(tenant_id, place_id, f"Place {place_id}", created_by)


class TestBusinessRepository:
    @pytest.mark.asyncio
    async def test_place_is_unique_within_a_tenant(
        self, async_session, operator, make_tenant
    ):
        downtown = await make_tenant("Downtown")
        uptown = await make_tenant("Uptown")
        repo = BusinessRepository(async_session)
        async with async_session.begin():
            for tenant in (downtown, uptown):
                await repo.save(
                    Business.create(
                        tenant.id.value, "Cafe", operator.id.value, place_id="p"
                    )
                )
            await repo.save(Business.create(downtown.id.value, "A", operator.id.value))
            await repo.save(Business.create(downtown.id.value, "B", operator.id.value))

        with pytest.raises(IntegrityError):
            async with async_session.begin():
                await repo.save(
                    Business.create(
                        downtown.id.value, "Copy", operator.id.value, place_id="p"
                    )
                )

    @pytest.mark.asyncio
    async def test_lookup_by_place_and_list_by_name(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        repo = BusinessRepository(async_session)
        deli = Business.create(tenant.id.value, "Deli", operator.id.value, place_id="p")
        async with async_session.begin():
            await repo.save(deli)
            await repo.save(
                Business.create(tenant.id.value, "Bakery", operator.id.value)
            )

        async with async_session.begin():
            found = await repo.get_by_place_id(tenant.id.value, "p")
            listed = await repo.list_by_tenant(tenant.id.value)

        assert found is not None and found.id == deli.id
        assert [b.name for b in listed] == ["Bakery", "Deli"]

    @pytest.mark.asyncio
    async def test_deleting_a_business_unlinks_its_opportunity(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        businesses = BusinessRepository(async_session)
        opportunities = OpportunityRepository(async_session)
        opportunity = _opportunity(tenant.id.value, operator.id.value, "p-1")
        business = Business.create(
            tenant.id.value, "Cafe", operator.id.value, place_id="p-1"
        )
        async with async_session.begin():
            await opportunities.add_new([opportunity])
            await businesses.save(business)
            opportunity.mark_converted(business.id)
            await opportunities.save(opportunity)

        async with async_session.begin():
            await businesses.delete(business)

        async_session.expunge_all()
        async with async_session.begin():
            loaded = await opportunities.get_by_id(opportunity.id)

        assert loaded is not None
        assert loaded.status == OpportunityStatus.CONVERTED
        assert loaded.business_id is None


class TestOpportunityRepository:
    @pytest.mark.asyncio
    async def test_add_new_skips_known_places(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        other = await make_tenant("Uptown")
        repo = OpportunityRepository(async_session)
        async with async_session.begin():
            await repo.add_new(
                [_opportunity(tenant.id.value, operator.id.value, "p-1")]
            )

        batch = [
            _opportunity(tenant.id.value, operator.id.value, "p-1"),
            _opportunity(tenant.id.value, operator.id.value, "p-2"),
            _opportunity(other.id.value, operator.id.value, "p-1"),
        ]
        async with async_session.begin():
            inserted = await repo.add_new(batch)

        assert [o.id for o in inserted] == [batch[1].id, batch[2].id]

    @pytest.mark.asyncio
    async def test_list_is_newest_first_within_status(
        self, async_session, operator, make_tenant
    ):
        tenant = await make_tenant("Downtown")
        repo = OpportunityRepository(async_session)
        older = _opportunity(tenant.id.value, operator.id.value, "p-old")
        older.created_at = datetime.now(UTC) - timedelta(days=1)
        newer = _opportunity(tenant.id.value, operator.id.value, "p-new")
        dismissed = _opportunity(tenant.id.value, operator.id.value, "p-gone")
        async with async_session.begin():
            await repo.add_new([older, newer, dismissed])
            dismissed.dismiss()
            await repo.save(dismissed)

        async with async_session.begin():
            fresh = await repo.list_by_tenant(tenant.id.value, OpportunityStatus.NEW)
            gone = await repo.list_by_tenant(
                tenant.id.value, OpportunityStatus.DISMISSED
            )

        assert [o.place_id for o in fresh] == ["p-new", "p-old"]
        assert [o.place_id for o in gone] == ["p-gone"]
