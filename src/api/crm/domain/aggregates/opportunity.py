"""Opportunity aggregate for CRM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from crm.domain.value_objects import BusinessId, OpportunityId, OpportunityStatus


@dataclass
class Opportunity:
    """A discovered place the store may pursue.

    An opportunity starts as new and ends either dismissed or converted
    into a Business. Conversion is final.
    """

    id: OpportunityId
    tenant_id: str
    place_id: str
    name: str
    created_by: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    status: OpportunityStatus = OpportunityStatus.NEW
    business_id: BusinessId | None = None
    created_at: datetime | None = None
    converted_at: datetime | None = None

    @classmethod
    def create(
        cls,
        tenant_id: str,
        place_id: str,
        name: str,
        created_by: str,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
    ) -> Opportunity:
        """Factory method for recording a new opportunity.

        Raises:
            ValueError: If the place id or name is blank
        """
        if not place_id.strip() or not name.strip():
            raise ValueError("An opportunity needs a place id and a name")
        return cls(
            id=OpportunityId.generate(),
            tenant_id=tenant_id,
            place_id=place_id.strip(),
            name=name.strip(),
            created_by=created_by,
            address=address,
            city=city,
            state=state,
            zip_code=zip_code,
            created_at=datetime.now(UTC),
        )

    @property
    def is_converted(self) -> bool:
        return self.status == OpportunityStatus.CONVERTED

    def dismiss(self) -> None:
        """Stop pursuing the opportunity.

        Raises:
            ValueError: If it has already been converted
        """
        if self.is_converted:
            raise ValueError("Opportunity already converted")
        self.status = OpportunityStatus.DISMISSED

    def mark_converted(self, business_id: BusinessId) -> None:
        """Record the business this opportunity became.

        Raises:
            ValueError: If it has already been converted
        """
        if self.is_converted:
            raise ValueError("Opportunity already converted")
        self.status = OpportunityStatus.CONVERTED
        self.business_id = business_id
        self.converted_at = datetime.now(UTC)
