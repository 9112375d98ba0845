"""Connection pool for the administrative PostgreSQL connection.

This module provides connection pooling using psycopg2.pool.ThreadedConnectionPool.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import psycopg2
from psycopg2 import pool as psycopg2_pool

from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)

if TYPE_CHECKING:
    from psycopg2.extensions import connection as PsycopgConnection

    from infrastructure.settings import ProvisionerSettings


class ConnectionPool:
    """Thread-safe pool of admin connections.

    Wraps psycopg2.pool.ThreadedConnectionPool. Every connection handed out
    is in autocommit mode, since CREATE DATABASE and DROP DATABASE cannot
    run inside a transaction block.

    ThreadedConnectionPool raises as soon as maxconn connections are checked
    out; a bounded semaphore sized to maxconn makes further checkouts wait
    for a connection to be returned instead.

    Attributes:
        _settings: Provisioner configuration settings
        _pool: The underlying ThreadedConnectionPool instance
        _slots: One permit per connection the pool may hand out
        _probe: Observability probe for monitoring
    """

    def __init__(
        self,
        settings: ProvisionerSettings,
        probe: ConnectionProbe | None = None,
    ):
        """Initialize the connection pool.

        Args:
            settings: Provisioner settings holding the admin credentials
            probe: Optional observability probe

        Raises:
            DatabaseConnectionError: If the initial connections cannot be opened.
        """
        self._settings = settings
        self._probe = probe or DefaultConnectionProbe()
        self._pool: psycopg2_pool.ThreadedConnectionPool | None = None
        self._slots = threading.BoundedSemaphore(settings.pool_max_connections)

        self._initialize_pool()

    def _connection_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "host": self._settings.host,
            "port": self._settings.port,
            "dbname": self._settings.admin_database,
            "user": self._settings.username,
            "password": self._settings.password.get_secret_value(),
        }
        if self._settings.ssl_mode:
            kwargs["sslmode"] = self._settings.ssl_mode
        return kwargs

    def _initialize_pool(self) -> None:
        """Initialize the ThreadedConnectionPool."""
        try:
            self._pool = psycopg2_pool.ThreadedConnectionPool(
                minconn=self._settings.pool_min_connections,
                maxconn=self._settings.pool_max_connections,
                **self._connection_kwargs(),
            )
            self._probe.pool_initialized(
                host=self._settings.host,
                database=self._settings.admin_database,
                min_conn=self._settings.pool_min_connections,
                max_conn=self._settings.pool_max_connections,
            )
        except psycopg2.Error as e:
            self._probe.pool_initialization_failed(
                host=self._settings.host,
                database=self._settings.admin_database,
                error=e,
            )
            raise DatabaseConnectionError(
                f"Failed to initialize connection pool: {e}"
            ) from e

    def get_connection(self) -> PsycopgConnection:
        """Get an autocommit connection from the pool.

        Blocks while every connection is checked out.

        Returns:
            A psycopg2 connection.

        Raises:
            DatabaseConnectionError: If pool is not initialized or connection fails.
        """
        if self._pool is None:
            raise DatabaseConnectionError("Connection pool not initialized")

        if not self._slots.acquire(blocking=False):
            self._probe.pool_exhausted()
            self._slots.acquire()

        try:
            conn = self._pool.getconn()
        except psycopg2_pool.PoolError as e:
            self._slots.release()
            raise DatabaseConnectionError(
                f"Pool exhausted, cannot get connection: {e}"
            ) from e
        except psycopg2.Error as e:
            self._slots.release()
            self._probe.connection_failed(
                host=self._settings.host,
                database=self._settings.admin_database,
                error=e,
            )
            raise DatabaseConnectionError(f"Failed to connect to database: {e}") from e

        if not conn.autocommit:
            conn.autocommit = True
        self._probe.connection_acquired_from_pool()
        return conn

    def return_connection(self, conn: PsycopgConnection) -> None:
        """Return a connection to the pool.

        Connections the server has closed are discarded instead of reused.

        Args:
            conn: The connection to return.
        """
        try:
            if self._pool is None:
                return
            self._pool.putconn(conn, close=bool(conn.closed))
            self._probe.connection_returned_to_pool()
        except Exception as e:
            self._probe.connection_return_failed(error=e)
            # Don't raise - connection will be discarded
        finally:
            self._slots.release()

    @contextmanager
    def connection(self) -> Iterator[PsycopgConnection]:
        """Borrow a connection for the duration of a ``with`` block."""
        conn = self.get_connection()
        try:
            yield conn
        finally:
            self.return_connection(conn)

    def close_all(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._probe.pool_closed()
            self._pool = None
