"""Pydantic models for contact API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from crm.application.value_objects import ReachoutDraft
from crm.domain.aggregates import Contact
from crm.domain.value_objects import (
    ContactStatus,
    DonationDetails,
    Reachout,
    ReachoutType,
)
from shared_kernel.api_models import CamelModel


class DonationModel(CamelModel):
    """Donated items for one reachout. Counts are never negative."""

    free_bundlet_card: int = Field(default=0, ge=0)
    dozen_bundtinis: int = Field(default=0, ge=0)
    cake_8inch: int = Field(default=0, ge=0)
    cake_10inch: int = Field(default=0, ge=0)
    sample_tray: int = Field(default=0, ge=0)
    bundtlet_tower: int = Field(default=0, ge=0)
    notes: str | None = None
    ordered_from_us: bool = False
    followed_up: bool = False

    def to_domain(self) -> DonationDetails:
        return DonationDetails(**self.model_dump())

    @classmethod
    def from_domain(cls, donation: DonationDetails) -> DonationModel:
        return cls(
            free_bundlet_card=donation.free_bundlet_card,
            dozen_bundtinis=donation.dozen_bundtinis,
            cake_8inch=donation.cake_8inch,
            cake_10inch=donation.cake_10inch,
            sample_tray=donation.sample_tray,
            bundtlet_tower=donation.bundtlet_tower,
            notes=donation.notes,
            ordered_from_us=donation.ordered_from_us,
            followed_up=donation.followed_up,
        )


class ReachoutRequest(CamelModel):
    date: datetime
    note: str = Field(..., max_length=10_000)
    type: ReachoutType = ReachoutType.OTHER
    created_by: str | None = None
    donation: DonationModel = Field(default_factory=DonationModel)

    def to_draft(self) -> ReachoutDraft:
        return ReachoutDraft(
            date=self.date,
            note=self.note,
            type=self.type,
            donation=self.donation.to_domain(),
            created_by=self.created_by,
        )


class ReplaceReachoutsRequest(CamelModel):
    """The complete new set of reachouts for a contact."""

    reachouts: list[ReachoutRequest]


class ReachoutResponse(CamelModel):
    id: str
    date: datetime
    note: str
    type: ReachoutType
    created_by: str
    donation: DonationModel

    @classmethod
    def from_domain(cls, reachout: Reachout) -> ReachoutResponse:
        return cls(
            id=reachout.id.value,
            date=reachout.date,
            note=reachout.note,
            type=reachout.type,
            created_by=reachout.created_by,
            donation=DonationModel.from_domain(reachout.donation),
        )


class CreateContactRequest(CamelModel):
    """Request model for creating a contact."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    business_name: str | None = Field(default=None, max_length=255)
    status: ContactStatus = ContactStatus.NEW
    notes: str | None = None


class UpdateContactRequest(CamelModel):
    """Request model for a partial contact update. Omitted fields are kept."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    business_name: str | None = Field(default=None, max_length=255)
    status: ContactStatus | None = None
    notes: str | None = None


class ContactResponse(CamelModel):
    """Response model for a contact with its reachouts, newest first."""

    id: str
    tenant_id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    business_name: str | None = None
    status: ContactStatus
    notes: str | None = None
    last_reachout_date: datetime | None = None
    created_by: str
    created_at: datetime | None = None
    reachouts: list[ReachoutResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, contact: Contact) -> ContactResponse:
        """Convert domain Contact aggregate to API response."""
        return cls(
            id=contact.id.value,
            tenant_id=contact.tenant_id,
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            phone=contact.phone,
            business_name=contact.business_name,
            status=contact.status,
            notes=contact.notes,
            last_reachout_date=contact.last_reachout_date,
            created_by=contact.created_by,
            created_at=contact.created_at,
            reachouts=[ReachoutResponse.from_domain(r) for r in contact.reachouts],
        )
