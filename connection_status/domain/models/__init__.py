"""Domain models for socket probing."""

from connection_status.domain.models.probe import MetricSample, ProbeOutcome
from connection_status.domain.models.socket import (
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT_SECONDS,
    Socket,
    SocketProtocol,
    SocketSet,
    is_valid_protocol,
)

__all__: list[str] = [
    "DEFAULT_PROTOCOL",
    "DEFAULT_TIMEOUT_SECONDS",
    "MetricSample",
    "ProbeOutcome",
    "Socket",
    "SocketProtocol",
    "SocketSet",
    "is_valid_protocol",
]
