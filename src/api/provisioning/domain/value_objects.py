"""Value objects for the provisioning domain.

A tenant database is a Postgres database plus the single role that owns it.
Outside Postgres it is known only by the composite identifier
``role:database``.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from provisioning.ports.exceptions import InvalidTenantIdentifierError

TOKEN_BYTES = 16
DEFAULT_POSTGRES_PORT = 5432

# Resource paths handed out by older clients carry this prefix.
DATABASES_PREFIX = "/databases/"


def generate_token() -> str:
    """Return a random 16-byte token as 32 lowercase hex characters."""
    return secrets.token_hex(TOKEN_BYTES)


@dataclass(frozen=True)
class TenantDatabaseId:
    """Identifier for a provisioned database and its owning role."""

    role: str
    database: str

    def __str__(self) -> str:
        """Return the ``role:database`` form."""
        return f"{self.role}:{self.database}"

    @classmethod
    def parse(cls, raw: str | None) -> TenantDatabaseId:
        """Create a TenantDatabaseId from its external string form.

        A leading ``/databases/`` prefix is stripped, then the remainder is
        split on the first ``:``. Both halves must be non-empty.

        Args:
            raw: Identifier as supplied by the caller

        Returns:
            TenantDatabaseId instance

        Raises:
            InvalidTenantIdentifierError: If the identifier is malformed
        """
        value = (raw or "").removeprefix(DATABASES_PREFIX)
        role, sep, database = value.partition(":")
        if not sep or not role or not database:
            raise InvalidTenantIdentifierError(field="id", value=raw)
        return cls(role=role, database=database)


@dataclass(frozen=True)
class ProvisionedDatabase:
    """Connection parameters for a newly created tenant database."""

    role: str
    password: str
    database: str
    host: str
    system_database: str
    port: int = DEFAULT_POSTGRES_PORT

    @property
    def id(self) -> TenantDatabaseId:
        return TenantDatabaseId(role=self.role, database=self.database)

    @property
    def url(self) -> str:
        return (
            f"postgres://{self.role}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    def environment(self) -> dict[str, str]:
        """Return the environment a tenant application connects with."""
        return {
            "FLYNN_POSTGRES": self.system_database,
            "PGHOST": self.host,
            "PGUSER": self.role,
            "PGPASSWORD": self.password,
            "PGDATABASE": self.database,
            "DATABASE_URL": self.url,
        }
