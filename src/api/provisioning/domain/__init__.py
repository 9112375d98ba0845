"""Domain layer for the provisioning bounded context."""

from provisioning.domain.value_objects import (
    DATABASES_PREFIX,
    ProvisionedDatabase,
    TenantDatabaseId,
    generate_token,
)

__all__ = [
    "DATABASES_PREFIX",
    "ProvisionedDatabase",
    "TenantDatabaseId",
    "generate_token",
]
