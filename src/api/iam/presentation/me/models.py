"""Pydantic models for the authorization summary endpoint."""

from __future__ import annotations

from pydantic import Field

from iam.application.value_objects import AuthorizationSummary
from iam.presentation.models import (
    IdentityResponse,
    TenantPermissionResponse,
    TenantResponse,
)
from shared_kernel.api_models import CamelModel


class MeResponse(CamelModel):
    """Everything the client needs to resolve permissions in one round trip.

    ``identity`` is null until the caller has been provisioned through
    ``POST /users/sync``.
    """

    identity: IdentityResponse | None = None
    tenant_permissions: list[TenantPermissionResponse] = Field(default_factory=list)
    tenants: list[TenantResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: AuthorizationSummary) -> MeResponse:
        return cls(
            identity=(
                IdentityResponse.from_domain(summary.identity)
                if summary.identity
                else None
            ),
            tenant_permissions=[
                TenantPermissionResponse.from_domain(p) for p in summary.permissions
            ],
            tenants=[TenantResponse.from_domain(t) for t in summary.tenants],
        )
