"""Pydantic models shared by IAM API routes."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from iam.domain.aggregates import Identity, Tenant
from iam.domain.value_objects import TenantPermission
from shared_kernel.api_models import CamelModel


class IdentityResponse(CamelModel):
    """Response model for an identity."""

    id: str = Field(..., description="Identity provider subject")
    email: str = Field(..., description="Lower-cased email")
    display_name: str | None = Field(default=None, description="Display name")
    is_global_admin: bool = Field(..., description="Unrestricted access flag")
    created_at: datetime | None = Field(default=None, description="Provisioned at")

    @classmethod
    def from_domain(cls, identity: Identity) -> IdentityResponse:
        """Convert domain Identity aggregate to API response."""
        return cls(
            id=identity.id.value,
            email=identity.email,
            display_name=identity.display_name,
            is_global_admin=identity.is_global_admin,
            created_at=identity.created_at,
        )


class TenantPermissionResponse(CamelModel):
    """Response model for one per-tenant grant."""

    tenant_id: str = Field(..., description="Tenant ID (ULID format)")
    can_edit: bool = Field(..., description="Edit access in addition to view")

    @classmethod
    def from_domain(cls, permission: TenantPermission) -> TenantPermissionResponse:
        return cls(
            tenant_id=permission.tenant_id.value, can_edit=permission.can_edit
        )


class TenantResponse(CamelModel):
    """Response model for tenant."""

    id: str = Field(..., description="Tenant ID (ULID format)")
    name: str = Field(..., description="Store name")
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    created_by: str = Field(..., description="Identity that created the tenant")
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantResponse:
        """Convert domain Tenant aggregate to API response.

        Args:
            tenant: Tenant domain aggregate

        Returns:
            TenantResponse
        """
        return cls(
            id=tenant.id.value,
            name=tenant.name,
            address=tenant.address,
            city=tenant.city,
            state=tenant.state,
            zip_code=tenant.zip_code,
            created_by=tenant.created_by.value,
            created_at=tenant.created_at,
        )
