"""SQLAlchemy ORM model for the tenant_permissions table."""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class TenantPermissionModel(Base, TimestampMixin):
    """ORM model for tenant_permissions table.

    The composite primary key enforces one row per (identity, tenant).
    Rows disappear with either side.
    """

    __tablename__ = "tenant_permissions"

    identity_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("identities.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    can_edit: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<TenantPermissionModel(identity_id={self.identity_id}, "
            f"tenant_id={self.tenant_id}, can_edit={self.can_edit})>"
        )
