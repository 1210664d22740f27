"""Business aggregate for CRM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from crm.domain.value_objects import BusinessId


def _check_name(name: str) -> str:
    if not name.strip():
        raise ValueError("Business name must not be empty")
    return name.strip()


@dataclass
class Business:
    """A place a store sells to or works with.

    ``place_id`` ties the business to the map listing it came from. Within
    one tenant at most one business holds a given place id.
    """

    id: BusinessId
    tenant_id: str
    name: str
    created_by: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    place_id: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        tenant_id: str,
        name: str,
        created_by: str,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
        place_id: str | None = None,
    ) -> Business:
        """Factory method for creating a new business.

        Raises:
            ValueError: If the name is blank
        """
        return cls(
            id=BusinessId.generate(),
            tenant_id=tenant_id,
            name=_check_name(name),
            created_by=created_by,
            address=address,
            city=city,
            state=state,
            zip_code=zip_code,
            place_id=place_id or None,
            created_at=datetime.now(UTC),
        )

    def update(
        self,
        name: str | None = None,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
        place_id: str | None = None,
    ) -> None:
        """Apply a partial update. None leaves a field unchanged."""
        if name is not None:
            self.name = _check_name(name)
        if address is not None:
            self.address = address
        if city is not None:
            self.city = city
        if state is not None:
            self.state = state
        if zip_code is not None:
            self.zip_code = zip_code
        if place_id is not None:
            self.place_id = place_id or None
