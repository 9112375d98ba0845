"""Provisioning application service.

Orchestrates the administrative statements behind each API operation. Every
statement commits on its own; nothing here spans a transaction.
"""

from __future__ import annotations

from collections.abc import Callable

from infrastructure.database.exceptions import DatabaseError
from provisioning.application.observability import (
    DefaultProvisioningServiceProbe,
    ProvisioningServiceProbe,
)
from provisioning.domain.value_objects import (
    DEFAULT_POSTGRES_PORT,
    ProvisionedDatabase,
    TenantDatabaseId,
    generate_token,
)
from provisioning.ports.exceptions import (
    InvalidTenantIdentifierError,
    ProvisioningError,
)
from provisioning.ports.protocols import DatabaseAdministrator


class DatabaseProvisioningService:
    """Creates, drops, and health-checks tenant databases.

    Args:
        administrator: Executes the individual DDL statements
        admin_user: Admin role that is granted every tenant role
        host: Host name handed back to tenants
        system_database: Value returned as ``FLYNN_POSTGRES``
        port: Port handed back to tenants
        token_factory: Source of random role, password and database names
        probe: Optional domain probe for observability
    """

    def __init__(
        self,
        administrator: DatabaseAdministrator,
        admin_user: str,
        host: str,
        system_database: str,
        port: int = DEFAULT_POSTGRES_PORT,
        token_factory: Callable[[], str] = generate_token,
        probe: ProvisioningServiceProbe | None = None,
    ):
        self._administrator = administrator
        self._admin_user = admin_user
        self._host = host
        self._system_database = system_database
        self._port = port
        self._token_factory = token_factory
        self._probe = probe or DefaultProvisioningServiceProbe()

    def create_database(self) -> ProvisionedDatabase:
        """Create a role, grant it to the admin role, and create its database.

        If the grant or the database creation fails, the new role is dropped
        on a best-effort basis and the original error is raised.

        Returns:
            Connection parameters for the new database

        Raises:
            ProvisioningError: If any statement fails
        """
        role = self._token_factory()
        password = self._token_factory()
        database = self._token_factory()

        try:
            self._administrator.create_role(role, password)
        except DatabaseError as e:
            self._probe.database_creation_failed(operation="create_role", error=e)
            raise ProvisioningError(str(e), operation="create_role") from e

        try:
            self._administrator.grant_role(role, self._admin_user)
        except DatabaseError as e:
            self._probe.database_creation_failed(operation="grant_role", error=e)
            self._cleanup_role(role)
            raise ProvisioningError(str(e), operation="grant_role") from e

        try:
            self._administrator.create_database(database, owner=role)
        except DatabaseError as e:
            self._probe.database_creation_failed(operation="create_database", error=e)
            self._cleanup_role(role)
            raise ProvisioningError(str(e), operation="create_database") from e

        provisioned = ProvisionedDatabase(
            role=role,
            password=password,
            database=database,
            host=self._host,
            system_database=self._system_database,
            port=self._port,
        )
        self._probe.database_created(tenant_id=str(provisioned.id))
        return provisioned

    def _cleanup_role(self, role: str) -> None:
        """Drop a role left behind by a failed create.

        The outcome is only recorded; a failure here must not replace the
        error that triggered the cleanup.
        """
        try:
            self._administrator.drop_role(role)
        except DatabaseError as e:
            self._probe.role_cleanup_failed(role=role, error=e)
        else:
            self._probe.role_cleanup_succeeded(role=role)

    def drop_database(self, raw_id: str | None) -> TenantDatabaseId:
        """Drop a tenant database and then its owning role.

        New connections are refused and existing ones terminated before the
        drop, so the database cannot be in use when it is dropped.

        Args:
            raw_id: Identifier of the form ``role:database``, optionally
                prefixed with ``/databases/``

        Returns:
            The parsed identifier of the dropped database

        Raises:
            InvalidTenantIdentifierError: If the identifier is malformed
            ProvisioningError: If any statement fails
        """
        try:
            tenant_id = TenantDatabaseId.parse(raw_id)
        except InvalidTenantIdentifierError:
            self._probe.invalid_identifier_rejected(value=raw_id)
            raise

        steps: list[tuple[str, Callable[[], None]]] = [
            (
                "disallow_connections",
                lambda: self._administrator.disallow_connections(tenant_id.database),
            ),
            (
                "terminate_connections",
                lambda: self._administrator.terminate_connections(tenant_id.database),
            ),
            (
                "drop_database",
                lambda: self._administrator.drop_database(tenant_id.database),
            ),
            ("drop_role", lambda: self._administrator.drop_role(tenant_id.role)),
        ]
        for operation, step in steps:
            try:
                step()
            except DatabaseError as e:
                self._probe.database_drop_failed(
                    tenant_id=str(tenant_id), operation=operation, error=e
                )
                raise ProvisioningError(str(e), operation=operation) from e

        self._probe.database_dropped(tenant_id=str(tenant_id))
        return tenant_id

    def ping(self) -> None:
        """Check that the admin connection can serve a query.

        Raises:
            ProvisioningError: If the query fails
        """
        try:
            self._administrator.ping()
        except DatabaseError as e:
            self._probe.ping_failed(error=e)
            raise ProvisioningError(str(e), operation="ping") from e
