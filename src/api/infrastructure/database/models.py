"""SQLAlchemy declarative base shared by every bounded context.

Each context declares its ORM models against ``Base`` so a single
metadata object describes the whole schema.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utc_now() -> datetime:
    """Timestamp default, evaluated at INSERT/UPDATE time."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all ORM models.

    Every ``Mapped[datetime]`` column is stored timezone-aware.
    """

    type_annotation_map: dict[Any, Any] = {
        datetime: DateTime(timezone=True),
    }


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` (UTC) to a model.

    ``created_at`` may be assigned explicitly before insert; otherwise it
    is filled in at INSERT time.
    """

    created_at: Mapped[datetime] = mapped_column(
        insert_default=_utc_now,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        insert_default=_utc_now,
        onupdate=_utc_now,
        nullable=False,
    )
