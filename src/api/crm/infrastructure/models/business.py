"""SQLAlchemy ORM models for businesses and opportunities."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class BusinessModel(Base, TimestampMixin):
    """ORM model for businesses table.

    A place id is unique within a tenant when present.
    """

    __tablename__ = "businesses"
    __table_args__ = (
        Index(
            "uq_businesses_tenant_id_place_id",
            "tenant_id",
            "place_id",
            unique=True,
            postgresql_where=text("place_id IS NOT NULL"),
        ),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    place_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("identities.id", ondelete="RESTRICT"), nullable=False
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<BusinessModel(id={self.id}, name={self.name})>"


class OpportunityModel(Base, TimestampMixin):
    """ORM model for opportunities table.

    Deleting the business an opportunity became keeps the opportunity and
    clears the link.
    """

    __tablename__ = "opportunities"
    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "place_id", name="uq_opportunities_tenant_id_place_id"
        ),
        Index("ix_opportunities_tenant_id_status", "tenant_id", "status"),
    )

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        String(26), ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False
    )
    place_id: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="new")
    business_id: Mapped[str | None] = mapped_column(
        String(26), ForeignKey("businesses.id", ondelete="SET NULL"), nullable=True
    )
    created_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("identities.id", ondelete="RESTRICT"), nullable=False
    )
    converted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<OpportunityModel(id={self.id}, status={self.status})>"
