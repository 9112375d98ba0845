"""Database-specific exceptions shared by the admin connection layer."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when the admin pool cannot be created or cannot hand out a connection."""

    pass


class StatementExecutionError(DatabaseError):
    """Raised when an administrative SQL statement fails."""

    def __init__(self, message: str, statement: str | None = None):
        super().__init__(message)
        self.statement = statement
