"""Configuration for the connection status exporter.

- exporter_config: process settings (config file, listen address, ...)
- socket_config_loader: YAML socket document -> validated SocketSet
"""

from connection_status.config.exporter_config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_METRICS_PATH,
    ExporterSettings,
    parse_listen_address,
)
from connection_status.config.socket_config_loader import (
    load_socket_set,
    parse_socket_set,
)

__all__: list[str] = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_LISTEN_ADDRESS",
    "DEFAULT_METRICS_PATH",
    "ExporterSettings",
    "load_socket_set",
    "parse_listen_address",
    "parse_socket_set",
]
