"""Integration test fixtures for provisioning against a real PostgreSQL.

These fixtures require a running PostgreSQL server and an admin role that
may create roles and databases. Point them at it with the same variables
the service reads (PGHOST, PGPORT, PGUSER, PGPASSWORD, PGSSLMODE).
"""

from collections.abc import Generator
import os

import pytest
from fastapi.testclient import TestClient

from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.settings import ProvisionerSettings
from main import create_app


@pytest.fixture(scope="session")
def integration_settings() -> ProvisionerSettings:
    """Provisioner settings for integration tests.

    Skips the session when no admin server is configured.
    """
    if not os.getenv("PGHOST") or not os.getenv("PGPASSWORD"):
        pytest.skip("PGHOST and PGPASSWORD must point at an admin PostgreSQL server")
    return ProvisionerSettings(
        _env_file=None,
        pool_min_connections=1,
        pool_max_connections=4,
    )


@pytest.fixture
def api_client(
    integration_settings: ProvisionerSettings,
) -> Generator[TestClient, None, None]:
    """Provide a client for the real application and admin pool."""
    app = create_app(integration_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def provisioned(api_client: TestClient) -> Generator[dict, None, None]:
    """Create a tenant database, dropping it afterwards if the test did not."""
    response = api_client.post("/databases")
    assert response.status_code == 200
    body = response.json()

    yield body

    api_client.delete("/databases", params={"id": body["id"]})


@pytest.fixture
def admin_pool(
    integration_settings: ProvisionerSettings,
) -> Generator[ConnectionPool, None, None]:
    """Provide the admin connection pool outside of the application."""
    pool = ConnectionPool(integration_settings)
    yield pool
    pool.close_all()
