"""Value objects for CRM domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from ulid import ULID


@dataclass(frozen=True)
class _UlidId:
    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls):
        """Generate a new identifier using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str):
        """Create identifier from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid {cls.__name__}: {value}") from e
        return cls(value=value)


class ContactId(_UlidId):
    """Identifier for a Contact aggregate."""


class ReachoutId(_UlidId):
    """Identifier for a reachout within a contact."""


class CalendarEventId(_UlidId):
    """Identifier for a CalendarEvent aggregate."""


class BusinessId(_UlidId):
    """Identifier for a Business aggregate."""


class OpportunityId(_UlidId):
    """Identifier for an Opportunity aggregate."""


class ContactStatus(StrEnum):
    NEW = "new"
    CONTACTED = "contacted"
    ACTIVE = "active"
    CONVERTED = "converted"
    INACTIVE = "inactive"


class OpportunityStatus(StrEnum):
    NEW = "new"
    CONVERTED = "converted"
    DISMISSED = "dismissed"


class ReachoutType(StrEnum):
    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    OTHER = "other"


class EventType(StrEnum):
    REACHOUT = "reachout"
    FOLLOWUP = "followup"
    MEETING = "meeting"
    CALL = "call"
    EMAIL = "email"
    TEXT = "text"
    OTHER = "other"


class EventPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EventStatus(StrEnum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class DonationDetails:
    """Items donated during a reachout.

    Only counts are recorded here; point and quota arithmetic happens
    elsewhere.
    """

    free_bundlet_card: int = 0
    dozen_bundtinis: int = 0
    cake_8inch: int = 0
    cake_10inch: int = 0
    sample_tray: int = 0
    bundtlet_tower: int = 0
    notes: str | None = None
    ordered_from_us: bool = False
    followed_up: bool = False

    def __post_init__(self) -> None:
        for name in (
            "free_bundlet_card",
            "dozen_bundtinis",
            "cake_8inch",
            "cake_10inch",
            "sample_tray",
            "bundtlet_tower",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass(frozen=True)
class Reachout:
    """One logged interaction with a contact."""

    id: ReachoutId
    date: datetime
    note: str
    created_by: str
    type: ReachoutType = ReachoutType.OTHER
    donation: DonationDetails = field(default_factory=DonationDetails)
