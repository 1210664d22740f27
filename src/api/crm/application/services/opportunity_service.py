"""Opportunity application service for CRM bounded context."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.observability import (
    DefaultOpportunityServiceProbe,
    OpportunityServiceProbe,
)
from crm.application.services.business_service import ensure_place_is_free
from crm.application.value_objects import BusinessDetails, OpportunityDraft
from crm.domain.aggregates import Business, Opportunity
from crm.domain.value_objects import OpportunityId, OpportunityStatus
from crm.ports.exceptions import DuplicateBusinessPlaceError, OpportunityNotFoundError
from crm.ports.repositories import IBusinessRepository, IOpportunityRepository
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from shared_kernel.authorization.protocols import TenantAccessChecker
from shared_kernel.authorization.types import AccessLevel


class OpportunityService:
    """Application service for discovered places a store may pursue.

    Opportunities are recorded in batches, one per map listing and tenant.
    Each is later dismissed or converted into a Business in the same
    tenant. Access follows the contact rules.
    """

    def __init__(
        self,
        opportunity_repository: IOpportunityRepository,
        business_repository: IBusinessRepository,
        access_checker: TenantAccessChecker,
        session: AsyncSession,
        probe: OpportunityServiceProbe | None = None,
    ):
        self._opportunity_repository = opportunity_repository
        self._business_repository = business_repository
        self._access = access_checker
        self._session = session
        self._probe = probe or DefaultOpportunityServiceProbe()

    async def list_opportunities(
        self,
        caller_id: str,
        tenant_id: str,
        status: OpportunityStatus = OpportunityStatus.NEW,
    ) -> list[Opportunity]:
        """List a tenant's opportunities in one status, newest first.

        Raises:
            TenantAccessDeniedError: If the caller cannot view the tenant
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.VIEW, "Tenant")
            opportunities = await self._opportunity_repository.list_by_tenant(
                tenant_id, status
            )

        self._probe.opportunities_listed(
            tenant_id=tenant_id, status=status, count=len(opportunities)
        )
        return opportunities

    async def record_opportunities(
        self, caller_id: str, tenant_id: str, drafts: list[OpportunityDraft]
    ) -> list[Opportunity]:
        """Record discovered places as new opportunities.

        Incomplete drafts and places the tenant already has are skipped.
        Within one batch the first draft for a place wins.

        Returns:
            Only the opportunities that were newly recorded

        Raises:
            TenantAccessDeniedError: If the caller cannot edit the tenant
            ValueError: If no drafts were submitted
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.EDIT, "Tenant")
            if not drafts:
                raise ValueError("At least one opportunity is required")

            candidates: dict[str, Opportunity] = {}
            for draft in drafts:
                if not draft.is_complete:
                    continue
                opportunity = Opportunity.create(
                    tenant_id=tenant_id,
                    place_id=draft.place_id or "",
                    name=draft.name or "",
                    created_by=caller_id,
                    address=draft.address,
                    city=draft.city,
                    state=draft.state,
                    zip_code=draft.zip_code,
                )
                candidates.setdefault(opportunity.place_id, opportunity)

            recorded = await self._opportunity_repository.add_new(
                list(candidates.values())
            )

        self._probe.opportunities_recorded(
            tenant_id=tenant_id, submitted=len(drafts), recorded=len(recorded)
        )
        return recorded

    async def get_opportunity(self, caller_id: str, opportunity_id: str) -> Opportunity:
        """Return an opportunity.

        Raises:
            OpportunityNotFoundError: If missing or not visible to the caller
        """
        async with self._session.begin():
            return await self._load(caller_id, opportunity_id, AccessLevel.VIEW)

    async def dismiss_opportunity(
        self, caller_id: str, opportunity_id: str
    ) -> Opportunity:
        """Mark an opportunity as dismissed.

        Raises:
            OpportunityNotFoundError: If missing or not editable by the caller
            ValueError: If it has already been converted
        """
        async with self._session.begin():
            opportunity = await self._load(caller_id, opportunity_id, AccessLevel.EDIT)
            opportunity.dismiss()
            await self._opportunity_repository.save(opportunity)

        self._probe.opportunity_dismissed(
            opportunity_id=opportunity.id.value, tenant_id=opportunity.tenant_id
        )
        return opportunity

    async def convert_opportunity(
        self,
        caller_id: str,
        opportunity_id: str,
        details: BusinessDetails | None = None,
    ) -> tuple[Business, Opportunity]:
        """Turn an opportunity into a business in the same tenant.

        The business takes the opportunity's place id and its address fields
        unless ``details`` overrides them.

        Raises:
            OpportunityNotFoundError: If missing or not editable by the caller
            DuplicateBusinessPlaceError: If the place already has a business
            ValueError: If it has already been converted
        """
        details = details or BusinessDetails()
        try:
            async with self._session.begin():
                opportunity = await self._load(
                    caller_id, opportunity_id, AccessLevel.EDIT
                )
                if opportunity.is_converted:
                    raise ValueError("Opportunity already converted")

                business = Business.create(
                    tenant_id=opportunity.tenant_id,
                    name=details.name or opportunity.name,
                    created_by=caller_id,
                    address=_pick(details.address, opportunity.address),
                    city=_pick(details.city, opportunity.city),
                    state=_pick(details.state, opportunity.state),
                    zip_code=_pick(details.zip_code, opportunity.zip_code),
                    place_id=opportunity.place_id,
                )
                await ensure_place_is_free(
                    self._business_repository,
                    opportunity.tenant_id,
                    opportunity.place_id,
                )
                await self._business_repository.save(business)
                opportunity.mark_converted(business.id)
                await self._opportunity_repository.save(opportunity)
        except IntegrityError as e:
            raise DuplicateBusinessPlaceError(opportunity.place_id) from e

        self._probe.opportunity_converted(
            opportunity_id=opportunity.id.value,
            business_id=business.id.value,
            tenant_id=opportunity.tenant_id,
        )
        return business, opportunity

    async def _load(
        self, caller_id: str, opportunity_id: str, level: AccessLevel
    ) -> Opportunity:
        try:
            parsed = OpportunityId.from_string(opportunity_id)
        except ValueError:
            self._probe.opportunity_not_found(opportunity_id=opportunity_id)
            raise OpportunityNotFoundError() from None

        opportunity = await self._opportunity_repository.get_by_id(parsed)
        if opportunity is None:
            self._probe.opportunity_not_found(opportunity_id=opportunity_id)
            raise OpportunityNotFoundError()

        try:
            await self._access.require(
                caller_id, opportunity.tenant_id, level, "Opportunity"
            )
        except TenantAccessDeniedError:
            raise OpportunityNotFoundError() from None
        return opportunity


def _pick(override: str | None, recorded: str | None) -> str | None:
    return override if override is not None else recorded
