"""Protocol for the administrative database operations.

Each method issues exactly one statement against the admin connection and
commits it independently.
"""

from __future__ import annotations

from typing import Protocol


class DatabaseAdministrator(Protocol):
    """Administrative DDL used by the provisioning service.

    Implementations raise ``infrastructure.database.DatabaseError`` on failure.
    """

    def create_role(self, role: str, password: str) -> None:
        """Create a login role with the given password."""
        ...

    def grant_role(self, role: str, grantee: str) -> None:
        """Grant membership in ``role`` to ``grantee``."""
        ...

    def create_database(self, database: str, owner: str) -> None:
        """Create a database owned by ``owner``."""
        ...

    def disallow_connections(self, database: str) -> None:
        """Stop the database from accepting new connections."""
        ...

    def terminate_connections(self, database: str) -> None:
        """Terminate every other backend connected to the database."""
        ...

    def drop_database(self, database: str) -> None:
        """Drop the database."""
        ...

    def drop_role(self, role: str) -> None:
        """Drop the role."""
        ...

    def ping(self) -> None:
        """Run a no-op query."""
        ...
