"""Shared infrastructure dependencies.

Provides ONLY raw infrastructure resources (settings, admin connection pool).
Does NOT import from bounded contexts to maintain DDD boundaries.

Both resources are created once by the application lifespan and stored on
``app.state``; these providers hand the same instances to every request.
"""

from fastapi import Request

from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.settings import ProvisionerSettings


def get_settings(request: Request) -> ProvisionerSettings:
    """Get the settings the application was started with."""
    return request.app.state.settings


def get_admin_connection_pool(request: Request) -> ConnectionPool:
    """Get the application-scoped admin connection pool.

    The pool is thread-safe and shared across all requests.

    Raises:
        DatabaseConnectionError: If the lifespan has not opened the pool.
    """
    pool = getattr(request.app.state, "admin_pool", None)
    if pool is None:
        raise DatabaseConnectionError("Connection pool not initialized")
    return pool
