"""Contact application service for CRM bounded context."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm.application.observability import (
    ContactServiceProbe,
    DefaultContactServiceProbe,
)
from crm.application.value_objects import ReachoutDraft
from crm.domain.aggregates import Contact
from crm.domain.value_objects import ContactId, ContactStatus, Reachout, ReachoutId
from crm.ports.exceptions import ContactNotFoundError, UnknownReachoutAuthorError
from crm.ports.repositories import IContactRepository
from shared_kernel.authorization.exceptions import TenantAccessDeniedError
from shared_kernel.authorization.protocols import TenantAccessChecker
from shared_kernel.authorization.types import AccessLevel


class ContactService:
    """Application service for contacts and their reachouts.

    Listing and creating take the tenant from the request and answer
    "Tenant not found" when the caller has no access. Every operation on
    an existing contact derives the tenant from the stored record, so a
    contact in a tenant the caller cannot reach is reported exactly like
    a missing one.
    """

    def __init__(
        self,
        contact_repository: IContactRepository,
        access_checker: TenantAccessChecker,
        session: AsyncSession,
        probe: ContactServiceProbe | None = None,
    ):
        self._contact_repository = contact_repository
        self._access = access_checker
        self._session = session
        self._probe = probe or DefaultContactServiceProbe()

    async def list_contacts(self, caller_id: str, tenant_id: str) -> list[Contact]:
        """List a tenant's contacts, most recently reached first.

        Raises:
            TenantAccessDeniedError: If the caller cannot view the tenant
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.VIEW, "Tenant")
            contacts = await self._contact_repository.list_by_tenant(tenant_id)

        self._probe.contacts_listed(tenant_id=tenant_id, count=len(contacts))
        return contacts

    async def create_contact(
        self,
        caller_id: str,
        tenant_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        business_name: str | None = None,
        status: ContactStatus = ContactStatus.NEW,
        notes: str | None = None,
    ) -> Contact:
        """Create a contact in a tenant the caller can edit.

        Raises:
            TenantAccessDeniedError: If the caller cannot edit the tenant
            ValueError: If the contact has no name at all
        """
        async with self._session.begin():
            await self._access.require(caller_id, tenant_id, AccessLevel.EDIT, "Tenant")
            contact = Contact.create(
                tenant_id=tenant_id,
                created_by=caller_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                business_name=business_name,
                status=status,
                notes=notes,
            )
            await self._contact_repository.save(contact)

        self._probe.contact_created(
            contact_id=contact.id.value, tenant_id=tenant_id, created_by=caller_id
        )
        return contact

    async def get_contact(self, caller_id: str, contact_id: str) -> Contact:
        """Return a contact with its reachouts.

        Raises:
            ContactNotFoundError: If missing or in a tenant the caller cannot view
        """
        async with self._session.begin():
            return await self._load(caller_id, contact_id, AccessLevel.VIEW)

    async def update_contact(
        self,
        caller_id: str,
        contact_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        business_name: str | None = None,
        status: ContactStatus | None = None,
        notes: str | None = None,
    ) -> Contact:
        """Apply a partial update to a contact.

        Raises:
            ContactNotFoundError: If missing or in a tenant the caller cannot edit
        """
        async with self._session.begin():
            contact = await self._load(caller_id, contact_id, AccessLevel.EDIT)
            contact.update(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                business_name=business_name,
                status=status,
                notes=notes,
            )
            await self._contact_repository.save(contact)

        self._probe.contact_updated(
            contact_id=contact.id.value, tenant_id=contact.tenant_id
        )
        return contact

    async def delete_contact(self, caller_id: str, contact_id: str) -> None:
        """Delete a contact and its reachouts.

        Raises:
            ContactNotFoundError: If missing or in a tenant the caller cannot edit
        """
        async with self._session.begin():
            contact = await self._load(caller_id, contact_id, AccessLevel.EDIT)
            await self._contact_repository.delete(contact)

        self._probe.contact_deleted(
            contact_id=contact.id.value,
            tenant_id=contact.tenant_id,
            deleted_by=caller_id,
        )

    async def replace_reachouts(
        self,
        caller_id: str,
        contact_id: str,
        drafts: list[ReachoutDraft],
    ) -> Contact:
        """Replace every reachout of a contact with ``drafts``.

        A draft keeps its own author so that reachouts logged by someone else
        survive a replace. Drafts without one are attributed to the caller.

        Raises:
            ContactNotFoundError: If missing or in a tenant the caller cannot edit
            UnknownReachoutAuthorError: If a draft names an author with no identity
        """
        try:
            async with self._session.begin():
                contact = await self._load(caller_id, contact_id, AccessLevel.EDIT)
                contact.replace_reachouts(
                    [
                        Reachout(
                            id=ReachoutId.generate(),
                            date=draft.date,
                            note=draft.note,
                            created_by=draft.created_by or caller_id,
                            type=draft.type,
                            donation=draft.donation,
                        )
                        for draft in drafts
                    ]
                )
                await self._contact_repository.replace_reachouts(contact)
                await self._contact_repository.save(contact)
        except IntegrityError as e:
            # reachouts.created_by references identities
            raise UnknownReachoutAuthorError() from e

        self._probe.reachouts_replaced(
            contact_id=contact.id.value, count=len(contact.reachouts)
        )
        return contact

    async def _load(
        self, caller_id: str, contact_id: str, level: AccessLevel
    ) -> Contact:
        try:
            parsed = ContactId.from_string(contact_id)
        except ValueError:
            self._probe.contact_not_found(contact_id=contact_id)
            raise ContactNotFoundError() from None

        contact = await self._contact_repository.get_by_id(parsed)
        if contact is None:
            self._probe.contact_not_found(contact_id=contact_id)
            raise ContactNotFoundError()

        try:
            await self._access.require(caller_id, contact.tenant_id, level, "Contact")
        except TenantAccessDeniedError:
            raise ContactNotFoundError() from None
        return contact
