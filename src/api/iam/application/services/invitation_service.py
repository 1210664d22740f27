"""Invitation application service for IAM bounded context."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultInvitationServiceProbe,
    InvitationServiceProbe,
)
from iam.application.services.access_gate import AccessGate
from iam.domain.aggregates import Invitation
from iam.domain.value_objects import (
    IdentityId,
    InvitationId,
    TenantId,
    normalize_email,
)
from iam.ports.exceptions import InvitationNotFoundError, TenantNotFoundError
from iam.ports.repositories import IInvitationRepository, ITenantRepository


class InvitationService:
    """Application service for managing invitations (global admin only).

    At most one invitation per (email, tenant) is pending at a time. A
    repeated invitation is merged into the pending one, keeping the more
    generous grant on each flag.
    """

    def __init__(
        self,
        invitation_repository: IInvitationRepository,
        tenant_repository: ITenantRepository,
        access_gate: AccessGate,
        session: AsyncSession,
        probe: InvitationServiceProbe | None = None,
    ):
        self._invitations = invitation_repository
        self._tenants = tenant_repository
        self._gate = access_gate
        self._session = session
        self._probe = probe or DefaultInvitationServiceProbe()

    async def list_invitations(
        self, caller_id: IdentityId, tenant_id: str | None = None
    ) -> list[Invitation]:
        """List invitations, optionally for a single tenant.

        Raises:
            UnauthorizedError: If the caller is not a global admin
            TenantAccessDeniedError: If the tenant filter is not accessible
        """
        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)
            tenant_filter = None
            if tenant_id is not None:
                await self._gate.require_view(caller_id.value, tenant_id, "Tenant")
                tenant_filter = TenantId.from_string(tenant_id)
            invitations = await self._invitations.list_all(tenant_id=tenant_filter)

        self._probe.invitations_listed(count=len(invitations), tenant_id=tenant_id)
        return invitations

    async def invite(
        self,
        caller_id: IdentityId,
        email: str,
        tenant_id: str,
        can_edit: bool = False,
        is_global_admin: bool = False,
    ) -> tuple[Invitation, bool]:
        """Create a pending invitation or merge into the existing one.

        Returns:
            The pending invitation and True if it was newly created

        Raises:
            UnauthorizedError: If the caller is not a global admin
            TenantAccessDeniedError: If the tenant does not exist
            ValueError: If email is blank
        """
        if not normalize_email(email):
            raise ValueError("Email is required")
        try:
            return await self._invite_once(
                caller_id, email, tenant_id, can_edit, is_global_admin
            )
        except IntegrityError:
            # Lost the race on the pending (email, tenant) index; merge instead
            return await self._invite_once(
                caller_id, email, tenant_id, can_edit, is_global_admin
            )

    async def _invite_once(
        self,
        caller_id: IdentityId,
        email: str,
        tenant_id: str,
        can_edit: bool,
        is_global_admin: bool,
    ) -> tuple[Invitation, bool]:
        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)
            await self._gate.require_view(caller_id.value, tenant_id, "Tenant")

            parsed_tenant = TenantId.from_string(tenant_id)
            if await self._tenants.get_by_id(parsed_tenant) is None:
                raise TenantNotFoundError(tenant_id)

            existing = await self._invitations.get_pending(
                normalize_email(email), parsed_tenant
            )
            if existing is not None:
                existing.merge(can_edit=can_edit, is_global_admin=is_global_admin)
                await self._invitations.save(existing)
                invitation, created = existing, False
            else:
                invitation = Invitation.create(
                    email=email,
                    tenant_id=parsed_tenant,
                    invited_by=caller_id,
                    can_edit=can_edit,
                    is_global_admin=is_global_admin,
                )
                await self._invitations.save(invitation)
                created = True

        if created:
            self._probe.invitation_created(
                invitation_id=invitation.id.value,
                tenant_id=tenant_id,
                invited_by=caller_id.value,
            )
        else:
            self._probe.invitation_merged(
                invitation_id=invitation.id.value, tenant_id=tenant_id
            )
        return invitation, created

    async def delete_invitation(
        self, caller_id: IdentityId, invitation_id: str
    ) -> None:
        """Delete an invitation.

        Raises:
            UnauthorizedError: If the caller is not a global admin
            InvitationNotFoundError: If it does not exist or its tenant is
                not accessible
        """
        try:
            parsed = InvitationId.from_string(invitation_id)
        except ValueError as e:
            raise InvitationNotFoundError() from e

        async with self._session.begin():
            await self._gate.require_global_admin(caller_id.value)
            invitation = await self._invitations.get_by_id(parsed)
            if invitation is None or not await self._gate.can_access(
                caller_id.value, invitation.tenant_id.value
            ):
                raise InvitationNotFoundError()
            await self._invitations.delete(invitation)

        self._probe.invitation_deleted(
            invitation_id=invitation_id, deleted_by=caller_id.value
        )
