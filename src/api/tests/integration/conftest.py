"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance.
Use docker-compose for testing.
"""

from collections.abc import AsyncGenerator
import os

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import crm.infrastructure.models  # noqa: F401
import iam.infrastructure.models  # noqa: F401
from iam.domain.aggregates import Identity, Tenant
from iam.domain.value_objects import IdentityId
from iam.infrastructure.identity_repository import IdentityRepository
from iam.infrastructure.tenant_repository import TenantRepository
from infrastructure.database import Base
from infrastructure.database.engines import create_engine
from infrastructure.settings import DatabaseSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        FIELDBOOK_DB_HOST, FIELDBOOK_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("FIELDBOOK_DB_HOST", "localhost"),
        port=int(os.getenv("FIELDBOOK_DB_PORT", "5432")),
        database=os.getenv("FIELDBOOK_DB_DATABASE", "fieldbook"),
        username=os.getenv("FIELDBOOK_DB_USERNAME", "fieldbook"),
        password=SecretStr(
            os.getenv("FIELDBOOK_DB_PASSWORD", "fieldbook_dev_password")
        ),
    )


@pytest_asyncio.fixture
async def engine(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """Engine over a freshly created schema, dropped after the test."""
    engine = create_engine(integration_db_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async session for integration tests."""
    sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
    async with sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def operator(async_session: AsyncSession) -> Identity:
    identity = Identity.create(IdentityId("auth0|operator"), "op@example.com")
    async with async_session.begin():
        await IdentityRepository(async_session).save(identity)
    return identity


@pytest_asyncio.fixture
async def make_tenant(async_session: AsyncSession, operator: Identity):
    """Factory that persists a tenant created by the operator."""

    async def _make(name: str) -> Tenant:
        tenant = Tenant.create(name=name, created_by=operator.id)
        async with async_session.begin():
            await TenantRepository(async_session).save(tenant)
        return tenant

    return _make
