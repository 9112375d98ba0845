"""Unit tests for the main FastAPI application wiring."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import psycopg2
import pytest
from fastapi.testclient import TestClient

import main
from main import create_app


@pytest.fixture
def app_client(mock_settings, mock_pool):
    """Run the real application with a mocked admin pool."""
    app = create_app(mock_settings, pool_factory=lambda settings: mock_pool)
    with TestClient(app) as client:
        yield client


class TestLifespan:
    """Tests for admin pool lifecycle."""

    def test_pool_created_from_settings(self, mock_settings, mock_pool):
        factory = MagicMock(return_value=mock_pool)
        app = create_app(mock_settings, pool_factory=factory)

        with TestClient(app):
            factory.assert_called_once_with(mock_settings)
            assert app.state.admin_pool is mock_pool
            assert app.state.settings is mock_settings

    def test_pool_closed_on_shutdown(self, mock_settings, mock_pool):
        app = create_app(mock_settings, pool_factory=lambda settings: mock_pool)

        with TestClient(app):
            mock_pool.close_all.assert_not_called()

        mock_pool.close_all.assert_called_once()
        assert app.state.admin_pool is None

    def test_settings_loaded_from_environment_when_omitted(
        self, mock_settings, mock_pool
    ):
        app = create_app(pool_factory=lambda settings: mock_pool)

        with patch("main.get_provisioner_settings", return_value=mock_settings):
            with TestClient(app):
                assert app.state.settings is mock_settings


class TestRoutesWiring:
    """Tests that the HTTP surface reaches the admin pool end to end."""

    def test_registered_routes(self, mock_settings):
        app = create_app(mock_settings)
        paths = {
            (route.path, tuple(sorted(route.methods)))
            for route in app.routes
            if hasattr(route, "methods")
        }

        assert ("/databases", ("POST",)) in paths
        assert ("/databases", ("DELETE",)) in paths
        assert ("/ping", ("GET",)) in paths

    def test_ping_executes_select_one(self, app_client, mock_psycopg2_connection):
        _, cursor = mock_psycopg2_connection

        response = app_client.get("/ping")

        assert response.status_code == 200
        assert cursor.execute.call_args.args[0].string == "SELECT 1"

    def test_ping_fails_when_admin_connection_is_down(
        self, app_client, mock_psycopg2_connection
    ):
        _, cursor = mock_psycopg2_connection
        cursor.execute.side_effect = psycopg2.OperationalError("server closed")

        response = app_client.get("/ping")

        assert response.status_code == 500

    def test_create_database_runs_three_statements(
        self, app_client, mock_psycopg2_connection
    ):
        _, cursor = mock_psycopg2_connection

        response = app_client.post("/databases")

        assert response.status_code == 200
        assert cursor.execute.call_count == 3
        role, database = response.json()["id"].split(":")
        assert response.json()["env"]["PGUSER"] == role
        assert response.json()["env"]["PGDATABASE"] == database
        assert response.json()["env"]["PGHOST"] == "testhost"

    def test_drop_database_runs_four_statements(
        self, app_client, mock_psycopg2_connection
    ):
        _, cursor = mock_psycopg2_connection

        response = app_client.delete("/databases", params={"id": "r0le:datab"})

        assert response.status_code == 200
        assert cursor.execute.call_count == 4

    def test_malformed_drop_runs_no_statements(
        self, app_client, mock_psycopg2_connection
    ):
        _, cursor = mock_psycopg2_connection

        response = app_client.delete("/databases", params={"id": "r0le:"})

        assert response.status_code == 400
        cursor.execute.assert_not_called()

    def test_request_id_is_echoed(self, app_client):
        response = app_client.get("/ping", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, app_client):
        response = app_client.get("/ping")

        assert response.headers["X-Request-ID"]


class TestServe:
    """Tests for the serve() entry point."""

    def test_missing_configuration_exits(self, clean_env):
        main.get_provisioner_settings.cache_clear()
        probe = MagicMock()

        try:
            with (
                patch("main.DefaultStartupProbe", return_value=probe),
                patch("main.configure_logging"),
                patch("main.uvicorn.run") as run,
            ):
                with pytest.raises(SystemExit) as exc_info:
                    main.serve()
        finally:
            main.get_provisioner_settings.cache_clear()

        assert exc_info.value.code == 1
        probe.configuration_invalid.assert_called_once()
        run.assert_not_called()

    def test_runs_uvicorn_on_configured_port(self, mock_settings):
        listen = mock_settings.model_copy(update={"listen_port": 8080})

        with (
            patch("main.get_provisioner_settings", return_value=listen),
            patch("main.configure_logging"),
            patch("main.uvicorn.run") as run,
        ):
            main.serve()

        run.assert_called_once()
        assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 8080}
