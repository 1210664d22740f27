"""Pydantic models for tenant API requests."""

from __future__ import annotations

from pydantic import Field

from shared_kernel.api_models import CamelModel


class CreateTenantRequest(CamelModel):
    """Request model for creating a tenant."""

    name: str = Field(..., description="Store name", min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)


class UpdateTenantRequest(CamelModel):
    """Request model for a partial tenant update. Omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip_code: str | None = Field(default=None, max_length=20)
