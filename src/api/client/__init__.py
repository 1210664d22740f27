"""Caller-side permission client.

Fetches the caller's authorization summary from the API, resolves the
active tenant and persists that choice between sessions. Nothing here is
trusted by the server; every request is re-checked by the access gate.
"""

from client.exceptions import PermissionFetchError, TenantNotSelectableError
from client.resolver import AppRoute, PermissionResolver
from client.selector import TenantSelector
from client.snapshot import PermissionSnapshot

__all__ = [
    "AppRoute",
    "PermissionFetchError",
    "PermissionResolver",
    "PermissionSnapshot",
    "TenantNotSelectableError",
    "TenantSelector",
]
