"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        FIELDBOOK_DB_HOST: Database host (default: localhost)
        FIELDBOOK_DB_PORT: Database port (default: 5432)
        FIELDBOOK_DB_DATABASE: Database name (default: fieldbook)
        FIELDBOOK_DB_USERNAME: Database user (default: fieldbook)
        FIELDBOOK_DB_PASSWORD: Database password (required in production)
        FIELDBOOK_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        FIELDBOOK_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        FIELDBOOK_DB_ECHO: Log SQL statements (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDBOOK_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="fieldbook", description="Database name")
    username: str = Field(default="fieldbook", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OIDCSettings(BaseSettings):
    """Identity provider settings for bearer token validation.

    The identity provider is external. Any issuer publishing an OpenID
    configuration document works (Firebase: https://securetoken.google.com/<project>).

    Environment variables:
        FIELDBOOK_OIDC_ISSUER_URL: Token issuer URL
        FIELDBOOK_OIDC_AUDIENCE: Expected audience claim
        FIELDBOOK_OIDC_USER_ID_CLAIM: Claim holding the stable user id (default: sub)
        FIELDBOOK_OIDC_EMAIL_CLAIM: Claim holding the verified email (default: email)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDBOOK_OIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    issuer_url: str = Field(
        default="http://localhost:8080/realms/fieldbook",
        description="OIDC issuer URL",
    )
    audience: str = Field(default="fieldbook", description="Expected audience")
    user_id_claim: str = Field(default="sub", description="User id claim")
    email_claim: str = Field(default="email", description="Email claim")


class LoggingSettings(BaseSettings):
    """Structured logging settings.

    Environment variables:
        FIELDBOOK_LOG_LEVEL: Minimum level emitted (default: INFO)
        FIELDBOOK_LOG_FORMAT: console, json, or auto to pick by TTY (default: auto)
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDBOOK_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )
    format: Literal["auto", "console", "json"] = Field(
        default="auto", description="Renderer selection"
    )


class ClientSettings(BaseSettings):
    """Settings for the caller-side permission client.

    Environment variables:
        FIELDBOOK_CLIENT_API_BASE_URL: Base URL of the Fieldbook API
        FIELDBOOK_CLIENT_STATE_PATH: JSON file holding persisted client state
        FIELDBOOK_CLIENT_SELECTED_TENANT_KEY: Key for the active tenant id
        FIELDBOOK_CLIENT_TIMEOUT_SECONDS: HTTP timeout for API calls
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDBOOK_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8000", description="Fieldbook API base URL"
    )
    state_path: Path = Field(
        default=Path.home() / ".fieldbook" / "state.json",
        description="Path of the persisted client state file",
    )
    selected_tenant_key: str = Field(
        default="selected_tenant_id",
        description="Key under which the active tenant id is persisted",
        min_length=1,
    )
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP timeout")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Fieldbook API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oidc(self) -> OIDCSettings:
        """Get identity provider settings."""
        return get_oidc_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_oidc_settings() -> OIDCSettings:
    """Get cached identity provider settings."""
    return OIDCSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings."""
    return ClientSettings()
