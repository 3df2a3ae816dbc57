"""Exporter process settings.

Settings come from environment variables and can be overridden by the
command-line flags of the exporter.

Environment Variables:
- CONNECTION_STATUS_CONFIG_FILE: Socket configuration file (default: config/config.yaml)
- CONNECTION_STATUS_LISTEN_ADDRESS: HTTP listen address (default: :8888)
- CONNECTION_STATUS_METRICS_PATH: Path serving the metrics (default: /metrics)
- ENVIRONMENT: 'production' for JSON logs, anything else for console logs
  (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

CONFIG_FILE_ENV = "CONNECTION_STATUS_CONFIG_FILE"
LISTEN_ADDRESS_ENV = "CONNECTION_STATUS_LISTEN_ADDRESS"
METRICS_PATH_ENV = "CONNECTION_STATUS_METRICS_PATH"
ENVIRONMENT_ENV = "ENVIRONMENT"

DEFAULT_CONFIG_FILE = "config/config.yaml"
DEFAULT_LISTEN_ADDRESS = ":8888"
DEFAULT_METRICS_PATH = "/metrics"
DEFAULT_ENVIRONMENT = "development"

# Path reserved for the liveness endpoint
HEALTH_PATH = "/health"

# Host used when the listen address omits one (":8888")
ALL_INTERFACES = "0.0.0.0"


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split a listen address into host and port.

    Accepts ``:port``, ``host:port`` and ``[ipv6]:port``. An empty host
    listens on all interfaces.

    Args:
        address: The listen address.

    Returns:
        Tuple of (host, port).

    Raises:
        ValueError: If the address has no port or the port is invalid.
    """
    host, separator, port_text = address.strip().rpartition(":")
    if not separator:
        raise ValueError(f"listen address must be [host]:port, got {address!r}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in listen address {address!r}") from None
    if not 0 < port <= 65535:
        raise ValueError(f"port must be between 1 and 65535, got {port}")

    return (host or ALL_INTERFACES, port)


@dataclass(frozen=True)
class ExporterSettings:
    """Settings of the exporter process.

    Attributes:
        config_file: Path of the YAML socket configuration.
        listen_address: Address the HTTP server listens on.
        metrics_path: Path serving the Prometheus metrics.
        environment: Deployment environment, selects the log renderer.
    """

    config_file: str = DEFAULT_CONFIG_FILE
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    metrics_path: str = DEFAULT_METRICS_PATH
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.config_file:
            raise ValueError("config_file must not be empty")
        if not self.metrics_path.startswith("/"):
            raise ValueError(f"metrics_path must start with '/', got {self.metrics_path!r}")
        if self.metrics_path == HEALTH_PATH:
            raise ValueError(f"metrics_path cannot be {HEALTH_PATH}")
        parse_listen_address(self.listen_address)

    @classmethod
    def from_env(cls) -> ExporterSettings:
        """Create settings from environment variables.

        Returns:
            ExporterSettings with values from environment or defaults.
        """
        return cls(
            config_file=os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE),
            listen_address=os.environ.get(LISTEN_ADDRESS_ENV, DEFAULT_LISTEN_ADDRESS),
            metrics_path=os.environ.get(METRICS_PATH_ENV, DEFAULT_METRICS_PATH),
            environment=os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT),
        )

    @property
    def listen_host(self) -> str:
        return parse_listen_address(self.listen_address)[0]

    @property
    def listen_port(self) -> int:
        return parse_listen_address(self.listen_address)[1]
