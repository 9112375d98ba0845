"""Administrative DDL against PostgreSQL.

Identifiers are always quoted with ``psycopg2.sql.Identifier`` and the role
password is rendered with ``psycopg2.sql.Literal``; plain values are bound
as query parameters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import psycopg2
from psycopg2 import sql

from infrastructure.database.exceptions import StatementExecutionError

if TYPE_CHECKING:
    from infrastructure.database.connection_pool import ConnectionPool

CREATE_ROLE = sql.SQL("CREATE ROLE {role} WITH LOGIN PASSWORD {password}")
GRANT_ROLE = sql.SQL("GRANT {role} TO {grantee}")
CREATE_DATABASE = sql.SQL("CREATE DATABASE {database} WITH OWNER = {owner}")
DISALLOW_CONNECTIONS = sql.SQL("ALTER DATABASE {database} WITH ALLOW_CONNECTIONS false")
TERMINATE_CONNECTIONS = sql.SQL(
    """
SELECT pg_terminate_backend(pg_stat_activity.pid)
FROM pg_stat_activity
WHERE pg_stat_activity.datname = %s
  AND pid <> pg_backend_pid()
"""
)
DROP_DATABASE = sql.SQL("DROP DATABASE {database}")
DROP_ROLE = sql.SQL("DROP ROLE {role}")
PING = sql.SQL("SELECT 1")


class PostgresDatabaseAdministrator:
    """Runs provisioning statements on connections borrowed from the admin pool."""

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

    def _execute(
        self,
        name: str,
        statement: sql.Composable,
        params: tuple[Any, ...] | None = None,
    ) -> None:
        with self._pool.connection() as conn:
            try:
                with conn.cursor() as cursor:
                    cursor.execute(statement, params)
            except psycopg2.Error as e:
                raise StatementExecutionError(
                    f"{name} failed: {e}", statement=name
                ) from e

    def create_role(self, role: str, password: str) -> None:
        self._execute(
            "create_role",
            CREATE_ROLE.format(
                role=sql.Identifier(role), password=sql.Literal(password)
            ),
        )

    def grant_role(self, role: str, grantee: str) -> None:
        self._execute(
            "grant_role",
            GRANT_ROLE.format(
                role=sql.Identifier(role), grantee=sql.Identifier(grantee)
            ),
        )

    def create_database(self, database: str, owner: str) -> None:
        self._execute(
            "create_database",
            CREATE_DATABASE.format(
                database=sql.Identifier(database), owner=sql.Identifier(owner)
            ),
        )

    def disallow_connections(self, database: str) -> None:
        self._execute(
            "disallow_connections",
            DISALLOW_CONNECTIONS.format(database=sql.Identifier(database)),
        )

    def terminate_connections(self, database: str) -> None:
        self._execute("terminate_connections", TERMINATE_CONNECTIONS, (database,))

    def drop_database(self, database: str) -> None:
        self._execute(
            "drop_database", DROP_DATABASE.format(database=sql.Identifier(database))
        )

    def drop_role(self, role: str) -> None:
        self._execute("drop_role", DROP_ROLE.format(role=sql.Identifier(role)))

    def ping(self) -> None:
        self._execute("ping", PING)
