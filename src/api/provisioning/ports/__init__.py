"""Ports for the provisioning bounded context."""

from provisioning.ports.exceptions import (
    InvalidTenantIdentifierError,
    ProvisioningError,
)
from provisioning.ports.protocols import DatabaseAdministrator

__all__ = [
    "DatabaseAdministrator",
    "InvalidTenantIdentifierError",
    "ProvisioningError",
]
