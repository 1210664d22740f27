"""Pydantic models for business API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from crm.domain.aggregates import Business
from shared_kernel.api_models import CamelModel


class CreateBusinessRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)
    place_id: str | None = Field(default=None, max_length=255)


class UpdateBusinessRequest(CamelModel):
    """Partial update. Omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)
    place_id: str | None = Field(default=None, max_length=255)


class BusinessResponse(CamelModel):
    id: str
    tenant_id: str
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    place_id: str | None = None
    created_by: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, business: Business) -> BusinessResponse:
        """Convert domain Business aggregate to API response."""
        return cls(
            id=business.id.value,
            tenant_id=business.tenant_id,
            name=business.name,
            address=business.address,
            city=business.city,
            state=business.state,
            zip_code=business.zip_code,
            place_id=business.place_id,
            created_by=business.created_by,
            created_at=business.created_at,
        )
