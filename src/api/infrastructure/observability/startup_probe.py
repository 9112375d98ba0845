"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def configuration_invalid(self, error: str) -> None:
        """Record that required configuration was missing or malformed."""
        ...

    def server_starting(self, port: int, admin_host: str, version: str) -> None:
        """Record that the HTTP server is about to listen."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def configuration_invalid(self, error: str) -> None:
        """Record that required configuration was missing or malformed."""
        self._logger.critical(
            "configuration_invalid",
            error=error,
        )

    def server_starting(self, port: int, admin_host: str, version: str) -> None:
        """Record that the HTTP server is about to listen."""
        self._logger.info(
            "server_starting",
            port=port,
            admin_host=admin_host,
            version=version,
        )
