"""Inputs accepted by CRM application services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from crm.domain.value_objects import DonationDetails, ReachoutType


@dataclass(frozen=True)
class ReachoutDraft:
    """A reachout as submitted by a client, before it gets an id.

    ``created_by`` falls back to the caller when omitted.
    """

    date: datetime
    note: str
    type: ReachoutType = ReachoutType.OTHER
    donation: DonationDetails = field(default_factory=DonationDetails)
    created_by: str | None = None


@dataclass(frozen=True)
class OpportunityDraft:
    """A discovered place as submitted by a client.

    Drafts missing a place id or a name are skipped rather than rejected.
    """

    place_id: str | None
    name: str | None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool((self.place_id or "").strip() and (self.name or "").strip())


@dataclass(frozen=True)
class BusinessDetails:
    """Field overrides applied when an opportunity becomes a business.

    None keeps the value recorded on the opportunity.
    """

    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
