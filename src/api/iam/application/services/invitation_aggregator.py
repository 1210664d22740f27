"""Folds pending invitations into permissions when an identity is created."""

from __future__ import annotations

from iam.application.observability import (
    DefaultInvitationAggregatorProbe,
    InvitationAggregatorProbe,
)
from iam.application.value_objects import AggregationResult
from iam.domain.value_objects import (
    IdentityId,
    PermissionGrant,
    TenantId,
    normalize_email,
)
from iam.ports.authorization import IAuthorizationStore
from iam.ports.repositories import IInvitationRepository


class InvitationAggregator:
    """Turns every pending invitation for an email into a permission set.

    Rules:
    - An invitation carrying ``is_global_admin`` makes the identity a
      global admin; per-tenant rows are then not written
    - Several invitations for one tenant collapse into one permission whose
      ``can_edit`` is the OR of theirs
    - Invitations are marked accepted only after every upsert, so a retry
      after a partial failure re-reads the same pending set

    Runs inside the caller's transaction. Re-running on the same pending
    set produces the same permission rows.
    """

    def __init__(
        self,
        invitation_repository: IInvitationRepository,
        authorization_store: IAuthorizationStore,
        probe: InvitationAggregatorProbe | None = None,
    ):
        self._invitations = invitation_repository
        self._store = authorization_store
        self._probe = probe or DefaultInvitationAggregatorProbe()

    async def aggregate(self, identity_id: IdentityId, email: str) -> AggregationResult:
        """Apply pending invitations for ``email`` to ``identity_id``.

        Args:
            identity_id: The freshly provisioned identity
            email: The identity's email; matched case-insensitively

        Returns:
            What was granted and which invitations were consumed
        """
        pending = await self._invitations.list_pending_by_email(normalize_email(email))
        if not pending:
            self._probe.no_pending_invitations(identity_id=identity_id.value)
            return AggregationResult(identity_id=identity_id)

        is_global_admin = any(invitation.is_global_admin for invitation in pending)
        grants: tuple[PermissionGrant, ...] = ()

        if is_global_admin:
            await self._store.set_global_admin(identity_id, True)
        else:
            merged: dict[TenantId, bool] = {}
            for invitation in pending:
                merged[invitation.tenant_id] = (
                    merged.get(invitation.tenant_id, False) or invitation.can_edit
                )
            for tenant_id, can_edit in merged.items():
                await self._store.upsert_permission(identity_id, tenant_id, can_edit)
            grants = tuple(
                PermissionGrant(tenant_id=tenant_id, can_edit=can_edit)
                for tenant_id, can_edit in merged.items()
            )

        for invitation in pending:
            invitation.accept()
            await self._invitations.save(invitation)

        self._probe.invitations_aggregated(
            identity_id=identity_id.value,
            invitation_count=len(pending),
            tenant_count=len(grants),
            is_global_admin=is_global_admin,
        )
        return AggregationResult(
            identity_id=identity_id,
            is_global_admin=is_global_admin,
            grants=grants,
            consumed=tuple(invitation.id for invitation in pending),
        )
