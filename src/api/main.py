"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from crm.presentation import router as crm_router
from iam.presentation import router as iam_router
from infrastructure.database import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__


@asynccontextmanager
async def fieldbook_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - structlog configuration
    - Database engine lifecycle (created lazily, disposed on shutdown)
    """
    configure_logging()
    probe = DefaultStartupProbe()
    probe.application_started(app_name=app.title, version=__version__)

    yield

    await close_database_connections()
    probe.application_stopped()


app = FastAPI(
    title=get_settings().app_name,
    description="Field-operations CRM with tenant-scoped access control",
    version=__version__,
    lifespan=fieldbook_lifespan,
)

# Identity, tenants, invitations and the caller's authorization summary
app.include_router(iam_router)

# Tenant-scoped contacts and calendar
app.include_router(crm_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
