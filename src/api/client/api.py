"""HTTP source for the caller's authorization summary."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError

from client.exceptions import PermissionFetchError
from client.snapshot import PermissionSnapshot

TokenProvider = Callable[[], Awaitable[str]]


class MeApiClient:
    """Calls ``GET /me`` and ``POST /users/sync`` with a bearer token.

    The token provider is awaited on every call so refreshed identity
    provider tokens are picked up without rebuilding the client.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._token_provider = token_provider
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds
        )

    async def __aenter__(self) -> MeApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_summary(self) -> PermissionSnapshot:
        """Fetch and parse the caller's authorization summary.

        Raises:
            PermissionFetchError: On transport errors, non-2xx or bad bodies
        """
        body = await self._request("GET", "/me")
        try:
            return PermissionSnapshot.model_validate(body)
        except ValidationError as e:
            raise PermissionFetchError(f"Malformed authorization summary: {e}") from e

    async def sync(self, email: str, display_name: str | None = None) -> None:
        """Provision or update the caller's identity."""
        payload: dict[str, Any] = {"email": email}
        if display_name is not None:
            payload["displayName"] = display_name
        await self._request("POST", "/users/sync", json=payload)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            token = await self._token_provider()
            response = await self._client.request(
                method,
                path,
                headers={"Authorization": f"Bearer {token}"},
                **kwargs,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise PermissionFetchError(
                f"{method} {path} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PermissionFetchError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise PermissionFetchError(f"{method} {path} returned invalid JSON") from e
