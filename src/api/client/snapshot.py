"""Immutable view of the caller's authorization summary.

Parsed from the camelCase body of ``GET /me``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class IdentitySummary(_Frozen):
    id: str
    email: str
    display_name: str | None = None
    is_global_admin: bool = False
    created_at: datetime | None = None


class TenantGrant(_Frozen):
    tenant_id: str
    can_edit: bool = False


class TenantSummary(_Frozen):
    id: str
    name: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None


class PermissionSnapshot(_Frozen):
    """Identity, per-tenant grants and visible tenants at one point in time.

    ``identity`` is None for a credential with no provisioned identity yet.
    """

    identity: IdentitySummary | None = None
    tenant_permissions: tuple[TenantGrant, ...] = Field(default_factory=tuple)
    tenants: tuple[TenantSummary, ...] = Field(default_factory=tuple)

    @property
    def is_global_admin(self) -> bool:
        return self.identity is not None and self.identity.is_global_admin

    def grant_for(self, tenant_id: str) -> TenantGrant | None:
        for grant in self.tenant_permissions:
            if grant.tenant_id == tenant_id:
                return grant
        return None

    def has_tenant(self, tenant_id: str) -> bool:
        return any(tenant.id == tenant_id for tenant in self.tenants)

    def ordered_grants(self) -> list[TenantGrant]:
        """Grants ordered by tenant name, then id.

        Grants whose tenant is not in ``tenants`` sort last.
        """
        names = {tenant.id: tenant.name for tenant in self.tenants}
        return sorted(
            self.tenant_permissions,
            key=lambda g: (
                g.tenant_id not in names,
                names.get(g.tenant_id, ""),
                g.tenant_id,
            ),
        )
