"""Application layer for the provisioning bounded context."""

from provisioning.application.services import DatabaseProvisioningService

__all__ = ["DatabaseProvisioningService"]
