"""SQLAlchemy ORM models for contacts and reachouts."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ContactModel(Base, TimestampMixin):
    """ORM model for contacts table.

    Rows are removed with their tenant. Reachouts live in their own table
    and are loaded explicitly by the repository.
    """

    __tablename__ = "contacts"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    tenant_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    business_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="new")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_reachout_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("identities.id", ondelete="RESTRICT"), nullable=False
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ContactModel(id={self.id}, tenant_id={self.tenant_id})>"


class ReachoutModel(Base):
    """ORM model for reachouts table, one row per logged interaction."""

    __tablename__ = "reachouts"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    contact_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("contacts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    created_by: Mapped[str] = mapped_column(
        String(255), ForeignKey("identities.id", ondelete="RESTRICT"), nullable=False
    )
    free_bundlet_card: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dozen_bundtinis: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cake_8inch: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cake_10inch: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sample_tray: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bundtlet_tower: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    donation_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    ordered_from_us: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    followed_up: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ReachoutModel(id={self.id}, contact_id={self.contact_id})>"
