"""PostgreSQL implementation of IInvitationRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Invitation
from iam.domain.value_objects import InvitationId, InvitationStatus, TenantId
from iam.infrastructure.mappers import invitation_from_model
from iam.infrastructure.models import InvitationModel
from iam.infrastructure.observability import (
    DefaultInvitationRepositoryProbe,
    InvitationRepositoryProbe,
)
from iam.ports.repositories import IInvitationRepository


class InvitationRepository(IInvitationRepository):
    """PostgreSQL-backed repository for Invitation aggregates.

    The partial unique index on pending (email, tenant_id) backs the
    one-pending-invitation rule; a concurrent duplicate insert surfaces
    as IntegrityError on flush.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: InvitationRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultInvitationRepositoryProbe()

    async def save(self, invitation: Invitation) -> None:
        model = await self._session.get(InvitationModel, invitation.id.value)
        if model:
            model.can_edit = invitation.can_edit
            model.is_global_admin = invitation.is_global_admin
            model.status = invitation.status.value
        else:
            model = InvitationModel(
                id=invitation.id.value,
                email=invitation.email,
                tenant_id=invitation.tenant_id.value,
                can_edit=invitation.can_edit,
                is_global_admin=invitation.is_global_admin,
                invited_by=invitation.invited_by.value,
                invited_at=invitation.invited_at,
                status=invitation.status.value,
            )
            self._session.add(model)

        await self._session.flush()
        self._probe.invitation_saved(invitation.id.value, invitation.status.value)

    async def get_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        model = await self._session.get(InvitationModel, invitation_id.value)
        return invitation_from_model(model) if model else None

    async def get_pending(self, email: str, tenant_id: TenantId) -> Invitation | None:
        stmt = select(InvitationModel).where(
            InvitationModel.email == email,
            InvitationModel.tenant_id == tenant_id.value,
            InvitationModel.status == InvitationStatus.PENDING.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return invitation_from_model(model) if model else None

    async def list_pending_by_email(self, email: str) -> list[Invitation]:
        stmt = (
            select(InvitationModel)
            .where(
                InvitationModel.email == email,
                InvitationModel.status == InvitationStatus.PENDING.value,
            )
            .order_by(InvitationModel.invited_at, InvitationModel.id)
        )
        result = await self._session.execute(stmt)
        invitations = [invitation_from_model(m) for m in result.scalars().all()]

        self._probe.pending_invitations_found(len(invitations))
        return invitations

    async def list_all(self, tenant_id: TenantId | None = None) -> list[Invitation]:
        stmt = select(InvitationModel).order_by(InvitationModel.invited_at.desc())
        if tenant_id is not None:
            stmt = stmt.where(InvitationModel.tenant_id == tenant_id.value)
        result = await self._session.execute(stmt)
        return [invitation_from_model(m) for m in result.scalars().all()]

    async def delete(self, invitation: Invitation) -> bool:
        model = await self._session.get(InvitationModel, invitation.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.invitation_deleted(invitation.id.value)
        return True
