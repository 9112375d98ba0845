"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    StatementExecutionError,
)

__all__ = [
    "DatabaseConnectionError",
    "DatabaseError",
    "StatementExecutionError",
]
