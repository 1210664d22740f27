"""Fixtures shared by CRM tests.

Access decisions go through the real AccessGate over an in-memory
authorization store holding two stores, Downtown and Uptown.
"""

import pytest

from iam.application.services import AccessGate
from iam.domain.aggregates import Tenant
from tests.unit.crm.fakes import (
    InMemoryBusinessRepository,
    InMemoryCalendarEventRepository,
    InMemoryContactRepository,
    InMemoryOpportunityRepository,
)
from tests.unit.iam.fakes import InMemoryAuthorizationStore


@pytest.fixture
def store(admin, operator) -> InMemoryAuthorizationStore:
    store = InMemoryAuthorizationStore()
    store.add_identity(admin)
    store.add_identity(operator)
    return store


@pytest.fixture
def downtown(store, admin) -> str:
    tenant = Tenant.create(name="Downtown", created_by=admin.id)
    return store.add_tenant(tenant).id.value


@pytest.fixture
def uptown(store, admin) -> str:
    tenant = Tenant.create(name="Uptown", created_by=admin.id)
    return store.add_tenant(tenant).id.value


@pytest.fixture
def gate(store) -> AccessGate:
    return AccessGate(store)


@pytest.fixture
def contacts() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture
def events() -> InMemoryCalendarEventRepository:
    return InMemoryCalendarEventRepository()


@pytest.fixture
def businesses() -> InMemoryBusinessRepository:
    return InMemoryBusinessRepository()


@pytest.fixture
def opportunities() -> InMemoryOpportunityRepository:
    return InMemoryOpportunityRepository()
