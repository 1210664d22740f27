"""Unit test fixtures shared across bounded contexts."""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Identity
from iam.domain.value_objects import IdentityId, TenantId


@pytest.fixture
def mock_session():
    """Mock AsyncSession whose begin() works as an async context manager."""
    session = Mock(spec=AsyncSession)

    ctx_manager = AsyncMock()
    ctx_manager.__aenter__ = AsyncMock(return_value=None)
    ctx_manager.__aexit__ = AsyncMock(return_value=None)

    session.begin = Mock(return_value=ctx_manager)
    return session


@pytest.fixture
def admin() -> Identity:
    return Identity.create(
        IdentityId.from_string("admin-1"), "Admin@Example.com", is_global_admin=True
    )


@pytest.fixture
def operator() -> Identity:
    return Identity.create(IdentityId.from_string("operator-1"), "op@example.com")


@pytest.fixture
def tenant_id() -> TenantId:
    return TenantId.generate()


@pytest.fixture
def other_tenant_id() -> TenantId:
    return TenantId.generate()
