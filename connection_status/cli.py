"""Command-line entry point of the exporter.

Usage:
    connection-status-exporter --config-file config/config.yaml --listen-address :8888
    python -m connection_status --config-file config/config.yaml

Flags override the CONNECTION_STATUS_* environment variables. A
configuration that cannot be loaded or validated stops the process with
exit status 1 before anything is served.
"""

from __future__ import annotations

import argparse
from dataclasses import replace

import uvicorn

from connection_status.bootstrap.exporter import build_exporter
from connection_status.config.exporter_config import (
    DEFAULT_ENVIRONMENT,
    ExporterSettings,
)
from connection_status.domain.exceptions import ConnectionStatusError
from connection_status.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connection-status-exporter",
        description="Expose the reachability of configured sockets as Prometheus metrics.",
    )
    parser.add_argument("--config-file", help="Exporter configuration file.")
    parser.add_argument(
        "--listen-address",
        help="The address to listen on for HTTP requests (e.g. :8888).",
    )
    parser.add_argument("--metrics-path", help="Path serving the metrics.")
    return parser


def resolve_settings(args: argparse.Namespace) -> ExporterSettings:
    """Merge command-line flags over the environment settings."""
    overrides = {
        key: value
        for key, value in (
            ("config_file", args.config_file),
            ("listen_address", args.listen_address),
            ("metrics_path", args.metrics_path),
        )
        if value is not None
    }
    return replace(ExporterSettings.from_env(), **overrides)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ValueError as exc:
        configure_structlog(environment=DEFAULT_ENVIRONMENT)
        get_logger_for_service("exporter", "bootstrap").error(
            "exporter_startup_failed", error=str(exc)
        )
        return 1

    configure_structlog(environment=settings.environment)
    log = get_logger_for_service("exporter", "bootstrap")

    try:
        components = build_exporter(settings, logger=log)
    except ConnectionStatusError as exc:
        log.error("exporter_startup_failed", error=str(exc))
        return 1

    log.info(
        "exporter_serving",
        listen_address=settings.listen_address,
        metrics_path=settings.metrics_path,
    )
    uvicorn.run(
        components.app,
        host=settings.listen_host,
        port=settings.listen_port,
        log_level="warning",
    )
    return 0
