"""Invitation aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.exceptions import InvitationAlreadyAcceptedError
from iam.domain.value_objects import (
    IdentityId,
    InvitationId,
    InvitationStatus,
    TenantId,
    normalize_email,
)


@dataclass
class Invitation:
    """A pending grant addressed to an email, not yet bound to an identity.

    Business rules:
    - At most one pending invitation per (email, tenant)
    - Only transition is PENDING -> ACCEPTED; accepted invitations are
      immutable and never reopened
    - ``is_global_admin`` is carried redundantly on each row for the email
    """

    id: InvitationId
    email: str
    tenant_id: TenantId
    invited_by: IdentityId
    can_edit: bool = False
    is_global_admin: bool = False
    status: InvitationStatus = InvitationStatus.PENDING
    invited_at: datetime | None = None

    @classmethod
    def create(
        cls,
        email: str,
        tenant_id: TenantId,
        invited_by: IdentityId,
        can_edit: bool = False,
        is_global_admin: bool = False,
    ) -> Invitation:
        """Factory for a new pending invitation."""
        normalized = normalize_email(email)
        if not normalized:
            raise ValueError("Invitation email must not be empty")
        return cls(
            id=InvitationId.generate(),
            email=normalized,
            tenant_id=tenant_id,
            invited_by=invited_by,
            can_edit=can_edit,
            is_global_admin=is_global_admin,
            invited_at=datetime.now(UTC),
        )

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING

    def merge(self, can_edit: bool, is_global_admin: bool) -> None:
        """Fold a repeated invitation for the same (email, tenant) into this one.

        The more generous grant wins on each flag.

        Raises:
            InvitationAlreadyAcceptedError: If the invitation was accepted
        """
        if not self.is_pending:
            raise InvitationAlreadyAcceptedError(
                f"Invitation {self.id} has already been accepted"
            )
        self.can_edit = self.can_edit or can_edit
        self.is_global_admin = self.is_global_admin or is_global_admin

    def accept(self) -> None:
        """Mark the invitation as consumed.

        Raises:
            InvitationAlreadyAcceptedError: If the invitation was accepted
        """
        if not self.is_pending:
            raise InvitationAlreadyAcceptedError(
                f"Invitation {self.id} has already been accepted"
            )
        self.status = InvitationStatus.ACCEPTED
