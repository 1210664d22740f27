"""Tenant aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.exceptions import InvalidTenantError
from iam.domain.value_objects import IdentityId, TenantId

MAX_TENANT_NAME_LENGTH = 255


def _clean_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidTenantError("Tenant name must not be empty")
    if len(cleaned) > MAX_TENANT_NAME_LENGTH:
        raise InvalidTenantError(
            f"Tenant name must be at most {MAX_TENANT_NAME_LENGTH} characters"
        )
    return cleaned


@dataclass
class Tenant:
    """A physical store: the unit of data isolation.

    A tenant's lifecycle is independent of the permissions that reference
    it. Deleting a tenant cascades its TenantPermission rows and
    tenant-scoped records.
    """

    id: TenantId
    name: str
    created_by: IdentityId
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        created_by: IdentityId,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
    ) -> Tenant:
        """Factory method for creating a new tenant.

        Raises:
            InvalidTenantError: If the name is blank or too long
        """
        return cls(
            id=TenantId.generate(),
            name=_clean_name(name),
            created_by=created_by,
            address=address,
            city=city,
            state=state,
            zip_code=zip_code,
            created_at=datetime.now(UTC),
        )

    def update(
        self,
        name: str | None = None,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
    ) -> None:
        """Apply a partial update. None leaves a field unchanged."""
        if name is not None:
            self.name = _clean_name(name)
        if address is not None:
            self.address = address
        if city is not None:
            self.city = city
        if state is not None:
            self.state = state
        if zip_code is not None:
            self.zip_code = zip_code
