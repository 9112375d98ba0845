"""Protocol for provisioning service observability.

Defines the interface for domain probes that capture application-level
domain events for database provisioning operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ProvisioningServiceProbe(Protocol):
    """Domain probe for provisioning service operations."""

    def database_created(self, tenant_id: str) -> None:
        """Record that a tenant database and its role were created."""
        ...

    def database_creation_failed(self, operation: str, error: Exception) -> None:
        """Record that a create step failed."""
        ...

    def role_cleanup_succeeded(self, role: str) -> None:
        """Record that a compensating role drop succeeded."""
        ...

    def role_cleanup_failed(self, role: str, error: Exception) -> None:
        """Record that a compensating role drop failed and the role may linger."""
        ...

    def database_dropped(self, tenant_id: str) -> None:
        """Record that a tenant database and its role were dropped."""
        ...

    def database_drop_failed(
        self, tenant_id: str, operation: str, error: Exception
    ) -> None:
        """Record that a drop step failed."""
        ...

    def invalid_identifier_rejected(self, value: str | None) -> None:
        """Record that a malformed tenant identifier was rejected."""
        ...

    def ping_failed(self, error: Exception) -> None:
        """Record that the admin connection health check failed."""
        ...

    def with_context(self, context: ObservationContext) -> ProvisioningServiceProbe:
        """Create a new probe with observation context bound."""
        ...
