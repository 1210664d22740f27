"""SQLAlchemy ORM model for the identities table.

Identities are provisioned from the identity provider on first sync.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class IdentityModel(Base, TimestampMixin):
    """ORM model for identities table.

    Note: id is VARCHAR(255) to accommodate external provider subjects
    (Firebase uids, UUIDs, etc.)
    """

    __tablename__ = "identities"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_global_admin: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<IdentityModel(id={self.id}, email={self.email})>"
