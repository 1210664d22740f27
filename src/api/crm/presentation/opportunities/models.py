"""Pydantic models for opportunity API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from crm.application.value_objects import BusinessDetails, OpportunityDraft
from crm.domain.aggregates import Opportunity
from crm.domain.value_objects import OpportunityStatus
from crm.presentation.businesses.models import BusinessResponse
from shared_kernel.api_models import CamelModel


class OpportunityDraftRequest(CamelModel):
    """One discovered place. Entries without a place id or name are skipped."""

    place_id: str | None = Field(default=None, max_length=255)
    name: str | None = Field(default=None, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)

    def to_draft(self) -> OpportunityDraft:
        return OpportunityDraft(
            place_id=self.place_id,
            name=self.name,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
        )


class RecordOpportunitiesRequest(CamelModel):
    opportunities: list[OpportunityDraftRequest]


class UpdateOpportunityRequest(CamelModel):
    """Only dismissal is accepted. Conversion has its own endpoint."""

    status: str | None = None

    @property
    def dismisses(self) -> bool:
        return self.status == OpportunityStatus.DISMISSED


class ConvertOpportunityRequest(CamelModel):
    """Overrides for the new business. Omitted fields come from the opportunity."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)

    def to_details(self) -> BusinessDetails:
        return BusinessDetails(
            name=self.name,
            address=self.address,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
        )


class OpportunityResponse(CamelModel):
    id: str
    tenant_id: str
    place_id: str
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    status: OpportunityStatus
    business_id: str | None = None
    created_by: str
    created_at: datetime | None = None
    converted_at: datetime | None = None

    @classmethod
    def from_domain(cls, opportunity: Opportunity) -> OpportunityResponse:
        """Convert domain Opportunity aggregate to API response."""
        return cls(
            id=opportunity.id.value,
            tenant_id=opportunity.tenant_id,
            place_id=opportunity.place_id,
            name=opportunity.name,
            address=opportunity.address,
            city=opportunity.city,
            state=opportunity.state,
            zip_code=opportunity.zip_code,
            status=opportunity.status,
            business_id=(
                opportunity.business_id.value if opportunity.business_id else None
            ),
            created_by=opportunity.created_by,
            created_at=opportunity.created_at,
            converted_at=opportunity.converted_at,
        )


class ConversionResponse(CamelModel):
    business: BusinessResponse
    opportunity: OpportunityResponse
