"""Bearer credential verification against the external identity provider.

Tokens are RS256 JWTs. Signing keys are discovered through the issuer's
OpenID configuration document and cached for a configurable TTL.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import httpx
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims extracted from a bearer credential.

    Attributes:
        sub: Stable user identifier issued by the identity provider
        email: Lower-cased email claim, or None when the token has none
    """

    sub: str
    email: str | None


class InvalidTokenError(Exception):
    """Raised when a bearer credential cannot be verified."""

    pass


class JWTValidator:
    """Verifies identity provider tokens.

    Checks signature, expiry, issuer and audience. The signing key set is
    fetched lazily and shared across requests.
    """

    def __init__(
        self,
        issuer_url: str,
        audience: str,
        probe: JWTValidatorProbe,
        user_id_claim: str = "sub",
        email_claim: str = "email",
        jwks_cache_ttl: timedelta = timedelta(hours=6),
    ):
        """Initialize the validator.

        Args:
            issuer_url: Issuer URL; must serve /.well-known/openid-configuration
            audience: Expected audience claim value
            probe: Observability probe
            user_id_claim: Claim holding the stable user id
            email_claim: Claim holding the user's email
            jwks_cache_ttl: How long fetched signing keys stay valid
        """
        self._issuer_url = issuer_url.rstrip("/")
        self._audience = audience
        self._probe = probe
        self._user_id_claim = user_id_claim
        self._email_claim = email_claim
        self._jwks_cache_ttl = jwks_cache_ttl

        self._jwks: dict[str, Any] | None = None
        self._jwks_fetched_at: datetime | None = None
        self._jwks_lock = asyncio.Lock()

    async def validate_token(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Raises:
            InvalidTokenError: If the token is malformed, expired or untrusted.
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError as e:
            self._probe.credential_rejected(reason=f"Malformed token: {e}")
            raise InvalidTokenError(f"Invalid token format: {e}") from e

        if not header:
            self._probe.credential_rejected(reason="Missing token header")
            raise InvalidTokenError("Invalid token: missing header")

        jwks = await self._get_jwks()

        try:
            claims = jwt.decode(
                token=token,
                key=jwks,
                algorithms=["RS256"],
                audience=self._audience,
                issuer=self._issuer_url,
            )
        except ExpiredSignatureError as e:
            self._probe.credential_rejected(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            self._probe.credential_rejected(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            self._probe.credential_rejected(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        user_id = claims.get(self._user_id_claim)
        if not user_id:
            self._probe.credential_rejected(
                reason=f"Missing {self._user_id_claim} claim"
            )
            raise InvalidTokenError(f"Missing required claim: {self._user_id_claim}")

        email = claims.get(self._email_claim)
        self._probe.credential_verified(user_id=str(user_id))

        return TokenClaims(
            sub=str(user_id),
            email=str(email).strip().lower() if email else None,
        )

    async def _get_jwks(self) -> dict[str, Any]:
        """Return cached signing keys, refetching once the TTL has elapsed."""
        if self._is_cache_valid():
            self._probe.signing_keys_cache_hit()
            return self._jwks  # type: ignore[return-value]

        async with self._jwks_lock:
            # Another request may have refreshed while we waited
            if self._is_cache_valid():
                self._probe.signing_keys_cache_hit()
                return self._jwks  # type: ignore[return-value]
            return await self._fetch_jwks()

    def _is_cache_valid(self) -> bool:
        if self._jwks is None or self._jwks_fetched_at is None:
            return False
        age = datetime.now(tz=timezone.utc) - self._jwks_fetched_at
        return age < self._jwks_cache_ttl

    async def _fetch_jwks(self) -> dict[str, Any]:
        """Fetch signing keys through OpenID discovery.

        Raises:
            InvalidTokenError: If discovery or key download fails.
        """
        try:
            async with httpx.AsyncClient() as client:
                config_response = await client.get(
                    f"{self._issuer_url}/.well-known/openid-configuration"
                )
                config_response.raise_for_status()
                jwks_uri = config_response.json().get("jwks_uri")
                if not jwks_uri:
                    self._probe.signing_keys_fetch_failed(
                        error="Missing jwks_uri in OpenID configuration"
                    )
                    raise InvalidTokenError(
                        "Identity provider configuration has no jwks_uri"
                    )

                jwks_response = await client.get(jwks_uri)
                jwks_response.raise_for_status()
                jwks = jwks_response.json()
        except httpx.HTTPError as e:
            self._probe.signing_keys_fetch_failed(error=str(e))
            raise InvalidTokenError(f"Failed to fetch signing keys: {e}") from e

        self._jwks = jwks
        self._jwks_fetched_at = datetime.now(tz=timezone.utc)
        self._probe.signing_keys_fetched(key_count=len(jwks.get("keys", [])))
        return jwks
