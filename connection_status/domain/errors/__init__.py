"""Domain errors for the connection status exporter.

All exceptions inherit from ConnectionStatusError.
"""

from connection_status.domain.errors.socket_config import (
    ConfigLoadError,
    InvalidProtocolError,
    InvalidTimeoutError,
    MissingFieldError,
    SocketValidationError,
)

__all__: list[str] = [
    "ConfigLoadError",
    "InvalidProtocolError",
    "InvalidTimeoutError",
    "MissingFieldError",
    "SocketValidationError",
]
