"""Contact aggregate for CRM context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from crm.domain.value_objects import ContactId, ContactStatus, Reachout


@dataclass
class Contact:
    """A person a store is working with.

    The contact belongs to exactly one tenant for its whole life; no
    operation moves it to another tenant. Reachouts are owned by the
    contact and replaced as a set.
    """

    id: ContactId
    tenant_id: str
    created_by: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    business_name: str | None = None
    status: ContactStatus = ContactStatus.NEW
    notes: str | None = None
    last_reachout_date: datetime | None = None
    created_at: datetime | None = None
    reachouts: list[Reachout] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        tenant_id: str,
        created_by: str,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        business_name: str | None = None,
        status: ContactStatus = ContactStatus.NEW,
        notes: str | None = None,
    ) -> Contact:
        """Factory method for creating a new contact.

        Raises:
            ValueError: If neither a name nor a business name is given
        """
        if not any(
            (value or "").strip() for value in (first_name, last_name, business_name)
        ):
            raise ValueError("A contact needs a name or a business name")
        return cls(
            id=ContactId.generate(),
            tenant_id=tenant_id,
            created_by=created_by,
            first_name=first_name,
            last_name=last_name,
            email=email.strip().lower() if email else None,
            phone=phone,
            business_name=business_name,
            status=status,
            notes=notes,
            created_at=datetime.now(UTC),
        )

    def update(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        business_name: str | None = None,
        status: ContactStatus | None = None,
        notes: str | None = None,
    ) -> None:
        """Apply a partial update. None leaves a field unchanged."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if email is not None:
            self.email = email.strip().lower() or None
        if phone is not None:
            self.phone = phone
        if business_name is not None:
            self.business_name = business_name
        if status is not None:
            self.status = status
        if notes is not None:
            self.notes = notes

    def replace_reachouts(self, reachouts: list[Reachout]) -> None:
        """Replace every reachout; newest first.

        ``last_reachout_date`` follows the newest reachout.
        """
        self.reachouts = sorted(reachouts, key=lambda r: r.date, reverse=True)
        self.last_reachout_date = self.reachouts[0].date if self.reachouts else None

    @property
    def display_name(self) -> str:
        name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return name or self.business_name or ""
