"""Domain probes for Provisioning application layer."""

from provisioning.application.observability.provisioning_service_probe import (
    ProvisioningServiceProbe,
)
from provisioning.application.observability.default_provisioning_service_probe import (
    DefaultProvisioningServiceProbe,
)

__all__ = [
    "ProvisioningServiceProbe",
    "DefaultProvisioningServiceProbe",
]
