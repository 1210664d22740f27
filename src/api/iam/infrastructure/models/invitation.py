"""SQLAlchemy ORM model for the invitations table."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class InvitationModel(Base):
    """ORM model for invitations table.

    A partial unique index keeps at most one pending row per
    (email, tenant_id). Accepted rows are history and may repeat.
    """

    __tablename__ = "invitations"
    __table_args__ = (
        Index(
            "uq_invitations_pending_email_tenant",
            "email",
            "tenant_id",
            unique=True,
            postgresql_where=text("status = 'pending'"),
        ),
        Index("ix_invitations_email_status", "email", "status"),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    can_edit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_global_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    invited_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("identities.id", ondelete="RESTRICT"), nullable=False
    )
    invited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="pending", server_default="pending"
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<InvitationModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"status={self.status})>"
        )
