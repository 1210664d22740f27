"""PostgreSQL implementation of IIdentityRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Identity
from iam.domain.value_objects import IdentityId
from iam.infrastructure.mappers import identity_from_model
from iam.infrastructure.models import IdentityModel
from iam.infrastructure.observability import (
    DefaultIdentityRepositoryProbe,
    IdentityRepositoryProbe,
)
from iam.ports.repositories import IIdentityRepository


class IdentityRepository(IIdentityRepository):
    """PostgreSQL-backed repository for Identity aggregates.

    Never opens a transaction; the calling service owns the unit of work.
    """

    def __init__(
        self, session: AsyncSession, probe: IdentityRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultIdentityRepositoryProbe()

    async def save(self, identity: Identity) -> None:
        """Insert or update an identity's profile.

        The admin flag is written on insert only; changes go through the
        authorization store.

        Raises:
            IntegrityError: If a concurrent insert created the same identity
        """
        model = await self._session.get(IdentityModel, identity.id.value)
        if model:
            model.email = identity.email
            model.display_name = identity.display_name
        else:
            model = IdentityModel(
                id=identity.id.value,
                email=identity.email,
                display_name=identity.display_name,
                is_global_admin=identity.is_global_admin,
            )
            self._session.add(model)

        # Flush so permission rows written next can reference the identity
        await self._session.flush()
        self._probe.identity_saved(identity.id.value)

    async def get_by_id(self, identity_id: IdentityId) -> Identity | None:
        """Retrieve an identity by its provider subject.

        Args:
            identity_id: The unique identifier of the identity

        Returns:
            The Identity aggregate, or None if not found
        """
        stmt = select(IdentityModel).where(IdentityModel.id == identity_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.identity_not_found(identity_id.value)
            return None

        self._probe.identity_retrieved(identity_id.value)
        return identity_from_model(model)

    async def list_all(self) -> list[Identity]:
        stmt = select(IdentityModel).order_by(IdentityModel.email, IdentityModel.id)
        result = await self._session.execute(stmt)
        return [identity_from_model(model) for model in result.scalars().all()]
