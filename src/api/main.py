"""Main FastAPI application entry point."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from infrastructure.database.connection_pool import ConnectionPool
from infrastructure.logging import configure_logging
from infrastructure.observability.startup_probe import DefaultStartupProbe
from infrastructure.settings import ProvisionerSettings, get_provisioner_settings
from infrastructure.version import __version__
from provisioning.presentation import routes as provisioning_routes
from shared_kernel.middleware import RequestContextMiddleware

COMPONENT_NAME = "pg-provisioner"


def create_app(
    settings: ProvisionerSettings | None = None,
    pool_factory: Callable[[ProvisionerSettings], ConnectionPool] = ConnectionPool,
) -> FastAPI:
    """Build the provisioner application.

    Args:
        settings: Settings to run with; loaded from the environment at
            startup when omitted
        pool_factory: Builds the admin connection pool from settings

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def provisioner_lifespan(app: FastAPI):
        """Application lifespan context.

        Manages:
        - Logging configuration
        - Admin connection pool lifecycle (opened at startup, closed on shutdown)
        """
        if not structlog.is_configured():
            configure_logging()

        resolved = settings if settings is not None else get_provisioner_settings()
        app.state.settings = resolved
        app.state.admin_pool = pool_factory(resolved)

        yield

        app.state.admin_pool.close_all()
        app.state.admin_pool = None

    app = FastAPI(
        title="Postgres Provisioner API",
        description="Provisions tenant Postgres databases and their owning roles",
        version=__version__,
        lifespan=provisioner_lifespan,
    )
    app.add_middleware(RequestContextMiddleware, component=COMPONENT_NAME)
    app.include_router(provisioning_routes.router)
    return app


app = create_app()


def serve() -> None:
    """Run the provisioner with uvicorn.

    Exits with status 1 when PGHOST or PGPASSWORD is missing.
    """
    configure_logging()
    probe = DefaultStartupProbe()

    try:
        settings = get_provisioner_settings()
    except ValidationError as e:
        probe.configuration_invalid(error=str(e))
        raise SystemExit(1) from e

    probe.server_starting(
        port=settings.listen_port,
        admin_host=settings.host,
        version=__version__,
    )
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.listen_port)


if __name__ == "__main__":
    serve()
