"""Unit test fixtures with mocked dependencies."""

import pytest
from unittest.mock import MagicMock

PROVISIONER_ENV_VARS = (
    "PGHOST",
    "PGPORT",
    "PGUSER",
    "PGPASSWORD",
    "PGSSLMODE",
    "FLYNN_POSTGRES",
    "PROVISIONER_ADMIN_DATABASE",
    "PROVISIONER_POOL_MIN_CONNECTIONS",
    "PROVISIONER_POOL_MAX_CONNECTIONS",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove provisioner variables inherited from the test runner's environment."""
    for name in PROVISIONER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def mock_settings(clean_env):
    """Provide test provisioner settings."""
    from infrastructure.settings import ProvisionerSettings

    return ProvisionerSettings(
        _env_file=None,
        host="testhost",
        port=5432,
        username="flynn",
        password="testpass",
        system_database="postgres",
        pool_min_connections=1,
        pool_max_connections=5,
    )


@pytest.fixture
def mock_psycopg2_connection():
    """Provide a mocked psycopg2 connection."""
    conn = MagicMock()
    conn.closed = 0
    conn.autocommit = True

    cursor = MagicMock()
    cursor.fetchone.return_value = (1,)

    # Set up context manager
    cursor.__enter__ = MagicMock(return_value=cursor)
    cursor.__exit__ = MagicMock(return_value=False)
    conn.cursor.return_value = cursor

    return conn, cursor


@pytest.fixture
def mock_pool(mock_psycopg2_connection):
    """Provide a mocked admin ConnectionPool handing out the mocked connection."""
    conn, _ = mock_psycopg2_connection
    pool = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    pool.connection.return_value.__exit__.return_value = False
    return pool
