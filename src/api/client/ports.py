"""Ports the permission client depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from client.snapshot import PermissionSnapshot


@runtime_checkable
class KeyValueStore(Protocol):
    """Small durable string store for client state.

    Writes either succeed completely or raise.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


@runtime_checkable
class AuthorizationSummarySource(Protocol):
    """Remote source of the caller's authorization summary."""

    async def fetch_summary(self) -> PermissionSnapshot:
        """Fetch the caller's identity, grants and visible tenants.

        Raises:
            PermissionFetchError: If the request fails for any reason
        """
        ...

    async def sync(self, email: str, display_name: str | None = None) -> None:
        """Provision or update the caller's identity.

        Raises:
            PermissionFetchError: If the request fails for any reason
        """
        ...
