"""Unit tests for the CalendarEvent aggregate."""

from datetime import UTC, datetime

import pytest

from crm.domain.aggregates import CalendarEvent
from crm.domain.value_objects import EventStatus, EventType


@pytest.fixture
def event() -> CalendarEvent:
    return CalendarEvent.create(
        tenant_id="t1",
        title="  Drop off samples ",
        date=datetime(2024, 5, 1, tzinfo=UTC),
        created_by="operator-1",
        start_time="09:30",
    )


class TestCalendarEventCreation:
    def test_defaults(self, event):
        assert event.title == "Drop off samples"
        assert event.status == EventStatus.SCHEDULED
        assert event.type == EventType.OTHER
        assert event.contact_id is None

    def test_blank_title_rejected(self):
        with pytest.raises(ValueError):
            CalendarEvent.create(
                tenant_id="t1",
                title=" ",
                date=datetime(2024, 5, 1, tzinfo=UTC),
                created_by="operator-1",
            )

    @pytest.mark.parametrize("value", ["9:30", "24:00", "12:60", "noon"])
    def test_malformed_time_rejected(self, value):
        with pytest.raises(ValueError, match="HH:MM"):
            CalendarEvent.create(
                tenant_id="t1",
                title="Call",
                date=datetime(2024, 5, 1, tzinfo=UTC),
                created_by="operator-1",
                end_time=value,
            )


class TestCalendarEventStatus:
    def test_complete_stamps_completed_at(self, event):
        event.change_status(EventStatus.COMPLETED)

        assert event.completed_at is not None
        assert event.cancelled_at is None

    def test_cancel_after_complete_swaps_stamps(self, event):
        event.change_status(EventStatus.COMPLETED)

        event.change_status(EventStatus.CANCELLED)

        assert event.cancelled_at is not None
        assert event.completed_at is None

    def test_reschedule_clears_stamps(self, event):
        event.change_status(EventStatus.CANCELLED)

        event.change_status(EventStatus.SCHEDULED)

        assert event.completed_at is None
        assert event.cancelled_at is None

    def test_same_status_is_noop(self, event):
        event.change_status(EventStatus.COMPLETED)
        stamped = event.completed_at

        event.change_status(EventStatus.COMPLETED)

        assert event.completed_at == stamped


def test_update_validates_title(event):
    with pytest.raises(ValueError):
        event.update(title="")

    event.update(location="Main St")

    assert event.location == "Main St"
    assert event.title == "Drop off samples"
