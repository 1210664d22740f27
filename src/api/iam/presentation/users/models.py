"""Pydantic models for identity API requests and responses."""

from __future__ import annotations

from pydantic import Field

from iam.application.value_objects import IdentityWithPermissions, SyncResult
from iam.domain.value_objects import PermissionGrant, TenantId
from iam.presentation.models import IdentityResponse, TenantPermissionResponse
from shared_kernel.api_models import CamelModel


class SyncUserRequest(CamelModel):
    """Request model for provisioning the caller's identity.

    A missing email is answered with 400 rather than a validation error.
    """

    email: str | None = Field(default=None, max_length=320)
    display_name: str | None = Field(default=None, max_length=255)


class UserPermissionsResponse(CamelModel):
    """An identity together with its per-tenant grants."""

    identity: IdentityResponse
    tenant_permissions: list[TenantPermissionResponse]

    @classmethod
    def from_sync(cls, result: SyncResult) -> UserPermissionsResponse:
        return cls(
            identity=IdentityResponse.from_domain(result.identity),
            tenant_permissions=[
                TenantPermissionResponse.from_domain(p) for p in result.permissions
            ],
        )

    @classmethod
    def from_view(cls, view: IdentityWithPermissions) -> UserPermissionsResponse:
        return cls(
            identity=IdentityResponse.from_domain(view.identity),
            tenant_permissions=[
                TenantPermissionResponse.from_domain(p) for p in view.permissions
            ],
        )


class TenantPermissionRequest(CamelModel):
    """One grant in an admin edit."""

    tenant_id: str = Field(..., min_length=1)
    can_edit: bool = False

    def to_domain(self) -> PermissionGrant:
        """Convert to a PermissionGrant.

        Raises:
            ValueError: If tenant_id is not a valid ULID
        """
        return PermissionGrant(
            tenant_id=TenantId.from_string(self.tenant_id), can_edit=self.can_edit
        )


class UpdateUserRequest(CamelModel):
    """Request model for an admin edit of an identity.

    ``tenant_permissions`` replaces the identity's full permission set
    when present.
    """

    is_global_admin: bool | None = None
    tenant_permissions: list[TenantPermissionRequest] | None = None
