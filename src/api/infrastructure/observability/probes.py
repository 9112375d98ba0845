"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for admin connection pool observability.

    This probe captures domain-significant events related to database
    connections without exposing logging implementation details.
    """

    def connection_failed(self, host: str, database: str, error: Exception) -> None:
        """Record that a database connection attempt failed."""
        ...

    def pool_initialized(
        self, host: str, database: str, min_conn: int, max_conn: int
    ) -> None:
        """Record that connection pool was initialized."""
        ...

    def pool_initialization_failed(
        self, host: str, database: str, error: Exception
    ) -> None:
        """Record that pool initialization failed."""
        ...

    def connection_acquired_from_pool(self) -> None:
        """Record that a connection was acquired from the pool."""
        ...

    def connection_returned_to_pool(self) -> None:
        """Record that a connection was returned to the pool."""
        ...

    def pool_exhausted(self) -> None:
        """Record that a checkout is waiting for a connection to be returned."""
        ...

    def connection_return_failed(self, error: Exception) -> None:
        """Record that returning connection to pool failed."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog.

    Request-scoped metadata reaches these events through the structlog
    contextvars bound by the request middleware.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def connection_failed(self, host: str, database: str, error: Exception) -> None:
        self._logger.error(
            "database_connection_failed",
            host=host,
            database=database,
            error=str(error),
        )

    def pool_initialized(
        self, host: str, database: str, min_conn: int, max_conn: int
    ) -> None:
        self._logger.info(
            "connection_pool_initialized",
            host=host,
            database=database,
            min_connections=min_conn,
            max_connections=max_conn,
        )

    def pool_initialization_failed(
        self, host: str, database: str, error: Exception
    ) -> None:
        self._logger.error(
            "connection_pool_initialization_failed",
            host=host,
            database=database,
            error=str(error),
        )

    def connection_acquired_from_pool(self) -> None:
        self._logger.debug("connection_acquired_from_pool")

    def connection_returned_to_pool(self) -> None:
        self._logger.debug("connection_returned_to_pool")

    def pool_exhausted(self) -> None:
        self._logger.warning("connection_pool_exhausted")

    def connection_return_failed(self, error: Exception) -> None:
        self._logger.error(
            "connection_return_failed",
            error=str(error),
        )

    def pool_closed(self) -> None:
        self._logger.info("connection_pool_closed")
