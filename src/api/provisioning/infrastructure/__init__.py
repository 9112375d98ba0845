"""Infrastructure layer for the provisioning bounded context."""

from provisioning.infrastructure.postgres_administrator import (
    PostgresDatabaseAdministrator,
)

__all__ = ["PostgresDatabaseAdministrator"]
