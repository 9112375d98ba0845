"""Dependency injection for the Provisioning bounded context.

Composes infrastructure resources (settings, admin pool) with the
provisioning administrator and service.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.dependencies import get_admin_connection_pool, get_settings
from infrastructure.settings import ProvisionerSettings
from provisioning.application.observability import DefaultProvisioningServiceProbe
from provisioning.application.services import DatabaseProvisioningService
from provisioning.infrastructure.postgres_administrator import (
    PostgresDatabaseAdministrator,
)
from provisioning.ports.protocols import DatabaseAdministrator
from shared_kernel.observability_context import ObservationContext


def get_database_administrator(
    pool: Annotated[ConnectionPool, Depends(get_admin_connection_pool)],
) -> DatabaseAdministrator:
    """Get the administrator bound to the shared admin pool.

    Args:
        pool: Application-scoped connection pool

    Returns:
        PostgresDatabaseAdministrator instance
    """
    return PostgresDatabaseAdministrator(pool)


def get_provisioning_service(
    request: Request,
    administrator: Annotated[
        DatabaseAdministrator, Depends(get_database_administrator)
    ],
    settings: Annotated[ProvisionerSettings, Depends(get_settings)],
) -> DatabaseProvisioningService:
    """Get a request-scoped DatabaseProvisioningService.

    The service probe carries the request id so every event of one
    operation can be correlated.
    """
    context = ObservationContext(
        request_id=getattr(request.state, "request_id", None),
    )
    return DatabaseProvisioningService(
        administrator=administrator,
        admin_user=settings.username,
        host=settings.host,
        system_database=settings.system_database,
        port=settings.port,
        probe=DefaultProvisioningServiceProbe().with_context(context),
    )
