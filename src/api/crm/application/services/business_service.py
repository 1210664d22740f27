"""Business application service for CRM bounded context."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.observability import (
    BusinessServiceProbe,
    DefaultBusinessServiceProbe,
)
from crm.domain.aggregates import Business
from crm.domain.value_objects import BusinessId
from crm.ports.exceptions import BusinessNotFoundError, DuplicateBusinessPlaceError
from crm.ports.repositories import IBusinessRepository
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from shared_kernel.authorization.protocols import TenantAccessChecker
from shared_kernel.authorization.types import AccessLevel


async def ensure_place_is_free(
    repository: IBusinessRepository,
    tenant_id: str,
    place_id: str | None,
    owner: BusinessId | None = None,
) -> None:
    """Raise unless no other business in the tenant holds ``place_id``.

    Raises:
        DuplicateBusinessPlaceError: If another business already holds it
    """
    if not place_id:
        return
    existing = await repository.get_by_place_id(tenant_id, place_id)
    if existing is not None and existing.id != owner:
        raise DuplicateBusinessPlaceError(place_id)


class BusinessService:
    """Application service for a tenant's businesses.

    Reads need view access and writes need edit access. Operations on an
    existing business take the tenant from the stored record, so a
    business the caller cannot reach is reported like a missing one.
    """

    def __init__(
        self,
        business_repository: IBusinessRepository,
        access_checker: TenantAccessChecker,
        session: AsyncSession,
        probe: BusinessServiceProbe | None = None,
    ):
        self._business_repository = business_repository
        self._access = access_checker
        self._session = session
        self._probe = probe or DefaultBusinessServiceProbe()

    async def list_businesses(self, caller_id: str, tenant_id: str) -> list[Business]:
        """List a tenant's businesses by name.

        Raises:
            TenantAccessDeniedError: If the caller cannot view the tenant
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.VIEW, "Tenant")
            businesses = await self._business_repository.list_by_tenant(tenant_id)

        self._probe.businesses_listed(tenant_id=tenant_id, count=len(businesses))
        return businesses

    async def create_business(
        self,
        caller_id: str,
        tenant_id: str,
        name: str,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
        place_id: str | None = None,
    ) -> Business:
        """Create a business in a tenant the caller can edit.

        Raises:
            TenantAccessDeniedError: If the caller cannot edit the tenant
            DuplicateBusinessPlaceError: If the place already has a business
            ValueError: If the name is blank
        """
        try:
            async with self._session.begin():
                await self._access.require(
                    caller_id, tenant_id, AccessLevel.EDIT, "Tenant"
                )
                business = Business.create(
                    tenant_id=tenant_id,
                    name=name,
                    created_by=caller_id,
                    address=address,
                    city=city,
                    state=state,
                    zip_code=zip_code,
                    place_id=place_id,
                )
                await ensure_place_is_free(
                    self._business_repository, tenant_id, business.place_id
                )
                await self._business_repository.save(business)
        except IntegrityError as e:
            # Lost a race on the per-tenant place index
            raise DuplicateBusinessPlaceError(place_id or "") from e

        self._probe.business_created(
            business_id=business.id.value, tenant_id=tenant_id, created_by=caller_id
        )
        return business

    async def get_business(self, caller_id: str, business_id: str) -> Business:
        """Return a business.

        Raises:
            BusinessNotFoundError: If missing or not visible to the caller
        """
        async with self._session.begin():
            return await self._load(caller_id, business_id, AccessLevel.VIEW)

    async def update_business(
        self,
        caller_id: str,
        business_id: str,
        name: str | None = None,
        address: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip_code: str | None = None,
        place_id: str | None = None,
    ) -> Business:
        """Apply a partial update to a business.

        Raises:
            BusinessNotFoundError: If missing or not editable by the caller
            DuplicateBusinessPlaceError: If the new place has another business
            ValueError: If the new name is blank
        """
        try:
            async with self._session.begin():
                business = await self._load(caller_id, business_id, AccessLevel.EDIT)
                business.update(
                    name=name,
                    address=address,
                    city=city,
                    state=state,
                    zip_code=zip_code,
                    place_id=place_id,
                )
                await ensure_place_is_free(
                    self._business_repository,
                    business.tenant_id,
                    business.place_id,
                    owner=business.id,
                )
                await self._business_repository.save(business)
        except IntegrityError as e:
            raise DuplicateBusinessPlaceError(place_id or "") from e

        self._probe.business_updated(
            business_id=business.id.value, tenant_id=business.tenant_id
        )
        return business

    async def delete_business(self, caller_id: str, business_id: str) -> None:
        """Delete a business.

        Raises:
            BusinessNotFoundError: If missing or not editable by the caller
        """
        async with self._session.begin():
            business = await self._load(caller_id, business_id, AccessLevel.EDIT)
            await self._business_repository.delete(business)

        self._probe.business_deleted(
            business_id=business.id.value,
            tenant_id=business.tenant_id,
            deleted_by=caller_id,
        )

    async def _load(
        self, caller_id: str, business_id: str, level: AccessLevel
    ) -> Business:
        try:
            parsed = BusinessId.from_string(business_id)
        except ValueError:
            self._probe.business_not_found(business_id=business_id)
            raise BusinessNotFoundError() from None

        business = await self._business_repository.get_by_id(parsed)
        if business is None:
            self._probe.business_not_found(business_id=business_id)
            raise BusinessNotFoundError()

        try:
            await self._access.require(
                caller_id, business.tenant_id, level, "Business"
            )
        except TenantAccessDeniedError:
            raise BusinessNotFoundError() from None
        return business
