"""Conversions between IAM ORM models and domain objects."""

from __future__ import annotations

from iam.domain.aggregates import Identity, Invitation, Tenant
from iam.domain.value_objects import (
    IdentityId,
    InvitationId,
    InvitationStatus,
    TenantId,
    TenantPermission,
)
from iam.infrastructure.models import (
    IdentityModel,
    InvitationModel,
    TenantModel,
    TenantPermissionModel,
)


def identity_from_model(model: IdentityModel) -> Identity:
    return Identity(
        id=IdentityId(value=model.id),
        email=model.email,
        display_name=model.display_name,
        is_global_admin=model.is_global_admin,
        created_at=model.created_at,
    )


def tenant_from_model(model: TenantModel) -> Tenant:
    return Tenant(
        id=TenantId(value=model.id),
        name=model.name,
        created_by=IdentityId(value=model.created_by),
        address=model.address,
        city=model.city,
        state=model.state,
        zip_code=model.zip_code,
        created_at=model.created_at,
    )


def permission_from_model(model: TenantPermissionModel) -> TenantPermission:
    return TenantPermission(
        identity_id=IdentityId(value=model.identity_id),
        tenant_id=TenantId(value=model.tenant_id),
        can_edit=model.can_edit,
    )


def invitation_from_model(model: InvitationModel) -> Invitation:
    return Invitation(
        id=InvitationId(value=model.id),
        email=model.email,
        tenant_id=TenantId(value=model.tenant_id),
        invited_by=IdentityId(value=model.invited_by),
        can_edit=model.can_edit,
        is_global_admin=model.is_global_admin,
        status=InvitationStatus(model.status),
        invited_at=model.invited_at,
    )
