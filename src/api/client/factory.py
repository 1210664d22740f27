"""Wires a PermissionResolver from ClientSettings."""

from __future__ import annotations

from client.api import MeApiClient, TokenProvider
from client.resolver import PermissionResolver
from client.selector import TenantSelector
from client.storage import JsonFileKeyValueStore
from infrastructure.settings import ClientSettings, get_client_settings


def create_permission_resolver(
    token_provider: TokenProvider,
    settings: ClientSettings | None = None,
) -> tuple[PermissionResolver, MeApiClient]:
    """Build a resolver backed by the HTTP API and the JSON state file.

    The returned client owns an HTTP connection pool; close it with
    ``aclose()`` when the session ends.
    """
    settings = settings or get_client_settings()
    api_client = MeApiClient(
        base_url=settings.api_base_url,
        token_provider=token_provider,
        timeout_seconds=settings.timeout_seconds,
    )
    selector = TenantSelector(
        store=JsonFileKeyValueStore(settings.state_path),
        key=settings.selected_tenant_key,
    )
    return PermissionResolver(source=api_client, selector=selector), api_client
