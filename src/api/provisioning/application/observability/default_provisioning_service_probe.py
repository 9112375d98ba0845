"""Default implementation of provisioning service probe.

Provides a structlog-based implementation of the ProvisioningServiceProbe
protocol. Passwords never reach these events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from provisioning.application.observability.provisioning_service_probe import (
    ProvisioningServiceProbe,
)

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DefaultProvisioningServiceProbe(ProvisioningServiceProbe):
    """Default implementation of ProvisioningServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultProvisioningServiceProbe:
        return DefaultProvisioningServiceProbe(logger=self._logger, context=context)

    def database_created(self, tenant_id: str) -> None:
        self._logger.info(
            "tenant_database_created",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def database_creation_failed(self, operation: str, error: Exception) -> None:
        self._logger.error(
            "tenant_database_creation_failed",
            operation=operation,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def role_cleanup_succeeded(self, role: str) -> None:
        self._logger.info(
            "tenant_role_cleanup_succeeded",
            role=role,
            **self._get_context_kwargs(),
        )

    def role_cleanup_failed(self, role: str, error: Exception) -> None:
        self._logger.warning(
            "tenant_role_cleanup_failed",
            role=role,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def database_dropped(self, tenant_id: str) -> None:
        self._logger.info(
            "tenant_database_dropped",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def database_drop_failed(
        self, tenant_id: str, operation: str, error: Exception
    ) -> None:
        self._logger.error(
            "tenant_database_drop_failed",
            tenant_id=tenant_id,
            operation=operation,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def invalid_identifier_rejected(self, value: str | None) -> None:
        self._logger.info(
            "tenant_identifier_rejected",
            value=value,
            **self._get_context_kwargs(),
        )

    def ping_failed(self, error: Exception) -> None:
        self._logger.error(
            "admin_ping_failed",
            error=str(error),
            **self._get_context_kwargs(),
        )
