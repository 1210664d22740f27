"""Unit tests for the Opportunity aggregate."""

import pytest

from crm.domain.aggregates import Opportunity
from crm.domain.value_objects import BusinessId, OpportunityStatus


def _opportunity() -> Opportunity:
    return Opportunity.create(
        tenant_id="t1", place_id=" place-1 ", name=" Corner Cafe", created_by="op"
    )


class TestOpportunity:
    def test_create_starts_new(self):
        opportunity = _opportunity()

        assert opportunity.place_id == "place-1"
        assert opportunity.name == "Corner Cafe"
        assert opportunity.status == OpportunityStatus.NEW
        assert opportunity.business_id is None

    @pytest.mark.parametrize("place_id,name", [("", "Cafe"), ("place-1", "  ")])
    def test_place_and_name_are_required(self, place_id, name):
        with pytest.raises(ValueError, match="needs a place id and a name"):
            Opportunity.create(
                tenant_id="t1", place_id=place_id, name=name, created_by="op"
            )

    def test_mark_converted_records_business(self):
        opportunity = _opportunity()
        business_id = BusinessId.generate()

        opportunity.mark_converted(business_id)

        assert opportunity.is_converted
        assert opportunity.business_id == business_id
        assert opportunity.converted_at is not None

    def test_conversion_is_final(self):
        opportunity = _opportunity()
        opportunity.mark_converted(BusinessId.generate())

        with pytest.raises(ValueError, match="already converted"):
            opportunity.dismiss()
        with pytest.raises(ValueError, match="already converted"):
            opportunity.mark_converted(BusinessId.generate())

    def test_dismissed_can_still_convert(self):
        opportunity = _opportunity()
        opportunity.dismiss()

        opportunity.mark_converted(BusinessId.generate())

        assert opportunity.status == OpportunityStatus.CONVERTED
