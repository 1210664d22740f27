"""PostgreSQL implementation of IContactRepository."""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from crm.domain.aggregates import Contact
from crm.domain.value_objects import ContactId
from crm.infrastructure.mappers import contact_from_model, reachout_to_model
from crm.infrastructure.models import ContactModel, ReachoutModel
from crm.infrastructure.observability import (
    ContactRepositoryProbe,
    DefaultContactRepositoryProbe,
)
from crm.ports.repositories import IContactRepository


class ContactRepository(IContactRepository):
    """Repository managing PostgreSQL storage for Contact aggregates.

    Reachouts are read with their contact and written only through
    replace_reachouts, which deletes the stored set before inserting.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: ContactRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultContactRepositoryProbe()

    async def save(self, contact: Contact) -> None:
        """Insert or update the contact row."""
        model = await self._session.get(ContactModel, contact.id.value)
        if model is None:
            model = ContactModel(
                id=contact.id.value,
                tenant_id=contact.tenant_id,
                created_by=contact.created_by,
            )
            if contact.created_at is not None:
                model.created_at = contact.created_at
            self._session.add(model)

        model.first_name = contact.first_name
        model.last_name = contact.last_name
        model.email = contact.email
        model.phone = contact.phone
        model.business_name = contact.business_name
        model.status = contact.status.value
        model.notes = contact.notes
        model.last_reachout_date = contact.last_reachout_date

        await self._session.flush()
        self._probe.contact_saved(contact.id.value)

    async def replace_reachouts(self, contact: Contact) -> None:
        """Replace the stored reachouts with ``contact.reachouts``."""
        await self._session.execute(
            delete(ReachoutModel).where(ReachoutModel.contact_id == contact.id.value)
        )
        self._session.add_all(
            [reachout_to_model(contact.id.value, r) for r in contact.reachouts]
        )
        await self._session.flush()
        self._probe.reachouts_written(contact.id.value, len(contact.reachouts))

    async def get_by_id(self, contact_id: ContactId) -> Contact | None:
        model = await self._session.get(ContactModel, contact_id.value)
        if model is None:
            return None

        reachouts = await self._reachouts_for([model.id])
        return contact_from_model(model, reachouts.get(model.id, []))

    async def list_by_tenant(self, tenant_id: str) -> list[Contact]:
        stmt = (
            select(ContactModel)
            .where(ContactModel.tenant_id == tenant_id)
            .order_by(
                ContactModel.last_reachout_date.desc().nulls_last(),
                ContactModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)
        models = list(result.scalars().all())

        reachouts = await self._reachouts_for([m.id for m in models])
        return [contact_from_model(m, reachouts.get(m.id, [])) for m in models]

    async def delete(self, contact: Contact) -> bool:
        model = await self._session.get(ContactModel, contact.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        self._probe.contact_deleted(contact.id.value)
        return True

    async def _reachouts_for(
        self, contact_ids: list[str]
    ) -> dict[str, list[ReachoutModel]]:
        if not contact_ids:
            return {}
        stmt = (
            select(ReachoutModel)
            .where(ReachoutModel.contact_id.in_(contact_ids))
            .order_by(ReachoutModel.date.desc(), ReachoutModel.id)
        )
        result = await self._session.execute(stmt)
        grouped: dict[str, list[ReachoutModel]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[row.contact_id].append(row)
        return grouped
