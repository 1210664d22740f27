"""Tenant service dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)
from iam.application.services import AccessGate, TenantService
from iam.dependencies.authorization import get_access_gate, get_authorization_store
from iam.infrastructure.authorization_store import AuthorizationStore
from iam.infrastructure.tenant_repository import TenantRepository
from infrastructure.database.dependencies import get_session


def get_tenant_service_probe() -> TenantServiceProbe:
    """Get TenantServiceProbe instance.

    Returns:
        DefaultTenantServiceProbe instance for observability
    """
    return DefaultTenantServiceProbe()


def get_tenant_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TenantRepository:
    """Get TenantRepository instance.

    Args:
        session: Async database session

    Returns:
        TenantRepository instance
    """
    return TenantRepository(session=session)


def get_tenant_service(
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
    store: Annotated[AuthorizationStore, Depends(get_authorization_store)],
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    session: Annotated[AsyncSession, Depends(get_session)],
    tenant_service_probe: Annotated[
        TenantServiceProbe, Depends(get_tenant_service_probe)
    ],
) -> TenantService:
    """Get TenantService instance.

    Args:
        tenant_repo: Tenant repository (shares session via FastAPI dependency caching)
        store: Authorization store for visibility filtering
        gate: Access gate for per-tenant and admin checks
        session: Database session for transaction management
        tenant_service_probe: Tenant service probe for observability

    Returns:
        TenantService instance
    """
    return TenantService(
        tenant_repository=tenant_repo,
        authorization_store=store,
        access_gate=gate,
        session=session,
        probe=tenant_service_probe,
    )
