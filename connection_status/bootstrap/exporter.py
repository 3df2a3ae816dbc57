"""Bootstrap wiring for the exporter.

Startup sequence:
1. Load and validate the socket set (fatal on any error)
2. Create a dedicated CollectorRegistry
3. Register the socket set collector with its prober
4. Build the FastAPI application serving the registry

Nothing is registered in prometheus_client's global REGISTRY, so several
exporters (e.g., one per test) can coexist in one process.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI
from prometheus_client import CollectorRegistry

from connection_status.api.main import create_app
from connection_status.application.ports.socket_prober import SocketProberProtocol
from connection_status.config.exporter_config import ExporterSettings
from connection_status.config.socket_config_loader import load_socket_set
from connection_status.domain.models.socket import SocketSet
from connection_status.infrastructure.adapters.socket_prober import SocketProber
from connection_status.infrastructure.monitoring.metrics_exporter import (
    PrometheusMetricsExporter,
)
from connection_status.infrastructure.monitoring.socket_metrics import SocketSetCollector
from connection_status.infrastructure.observability.logging import get_logger_for_service


@dataclass(frozen=True)
class ExporterComponents:
    """Objects wired for one exporter process."""

    settings: ExporterSettings
    socket_set: SocketSet
    registry: CollectorRegistry
    collector: SocketSetCollector
    exporter: PrometheusMetricsExporter
    app: FastAPI


def build_exporter(
    settings: ExporterSettings,
    prober: SocketProberProtocol | None = None,
    logger: Any | None = None,
) -> ExporterComponents:
    """Wire the exporter from its settings.

    Args:
        settings: Process settings.
        prober: Prober to use. Defaults to a SocketProber.
        logger: structlog logger for startup events.

    Returns:
        The wired components.

    Raises:
        ConfigLoadError: If the socket configuration cannot be loaded.
        SocketValidationError: If a socket is invalid.
    """
    log = logger if logger is not None else get_logger_for_service("exporter", "bootstrap")

    socket_set = load_socket_set(settings.config_file)
    log.info(
        "socket_set_validated",
        config_file=settings.config_file,
        sockets=len(socket_set),
        worst_case_scrape_seconds=socket_set.worst_case_scrape_seconds,
    )

    registry = CollectorRegistry()
    collector = SocketSetCollector(
        socket_set,
        prober if prober is not None else SocketProber(),
        registry=registry,
    )
    exporter = PrometheusMetricsExporter(registry)
    app = create_app(exporter, metrics_path=settings.metrics_path)

    log.info("exporter_initialized", metrics_path=settings.metrics_path)
    return ExporterComponents(
        settings=settings,
        socket_set=socket_set,
        registry=registry,
        collector=collector,
        exporter=exporter,
        app=app,
    )
