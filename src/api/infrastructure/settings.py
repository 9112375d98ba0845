"""Application settings using pydantic-settings.

Settings are read from the libpq-style environment variables the service is
deployed with (PGHOST, PGUSER, PGPASSWORD, ...). The admin host and password
have no defaults: a process started without them fails validation and exits.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProvisionerSettings(BaseSettings):
    """Administrative connection and HTTP listener settings.

    Environment variables:
        PGHOST: Admin database host (required)
        PGPORT: Admin database port (default: 5432)
        PGUSER: Admin role name (default: flynn)
        PGPASSWORD: Admin role password (required)
        PGSSLMODE: libpq sslmode for the admin connection (default: unset)
        FLYNN_POSTGRES: System database identifier echoed to tenants (default: postgres)
        PROVISIONER_ADMIN_DATABASE: Database the admin pool connects to (default: postgres)
        PROVISIONER_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 1)
        PROVISIONER_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        PORT: HTTP listen port (default: 3000)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(
        validation_alias="PGHOST",
        min_length=1,
        description="Admin database host",
    )
    port: int = Field(
        default=5432,
        validation_alias="PGPORT",
        description="Admin database port",
        ge=1,
        le=65535,
    )
    username: str = Field(
        default="flynn",
        validation_alias="PGUSER",
        min_length=1,
        description="Admin role name",
    )
    password: SecretStr = Field(
        validation_alias="PGPASSWORD",
        description="Admin role password",
    )
    ssl_mode: str | None = Field(
        default=None,
        validation_alias="PGSSLMODE",
        description="libpq sslmode for the admin connection",
    )
    system_database: str = Field(
        default="postgres",
        validation_alias="FLYNN_POSTGRES",
        description="System database identifier returned to tenants",
    )
    admin_database: str = Field(
        default="postgres",
        validation_alias="PROVISIONER_ADMIN_DATABASE",
        description="Database the admin pool connects to",
    )
    pool_min_connections: int = Field(
        default=1,
        validation_alias="PROVISIONER_POOL_MIN_CONNECTIONS",
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        validation_alias="PROVISIONER_POOL_MAX_CONNECTIONS",
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    listen_port: int = Field(
        default=3000,
        validation_alias="PORT",
        description="HTTP listen port",
        ge=1,
        le=65535,
    )

    @field_validator("password")
    @classmethod
    def validate_password_present(cls, value: SecretStr) -> SecretStr:
        """Reject an empty admin password."""
        if not value.get_secret_value():
            raise ValueError("PGPASSWORD must be set to the database admin user password")
        return value

    @field_validator("ssl_mode")
    @classmethod
    def normalize_ssl_mode(cls, value: str | None) -> str | None:
        """Treat an empty PGSSLMODE as unset."""
        return value or None

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "ProvisionerSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self


@lru_cache
def get_provisioner_settings() -> ProvisionerSettings:
    """Get cached provisioner settings.

    Uses lru_cache to ensure settings are only loaded once.

    Raises:
        pydantic.ValidationError: If PGHOST or PGPASSWORD is missing.
    """
    return ProvisionerSettings()
