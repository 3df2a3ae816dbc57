"""Socket configuration errors.

This module provides exception classes for configuration failures:
- ConfigLoadError: Document unreadable, unparseable or badly shaped
- SocketValidationError: Base class for per-socket validation failures
- MissingFieldError: A required field (name, host, port) is empty
- InvalidProtocolError: Protocol is not one of the supported networks
- InvalidTimeoutError: Timeout is negative

All of them are fatal at startup: no partially validated socket set
is ever served.
"""

from connection_status.domain.exceptions import ConnectionStatusError


class ConfigLoadError(ConnectionStatusError):
    """Raised when the configuration document cannot be loaded.

    Attributes:
        path: Path of the document, when loaded from a file.
        reason: Short description of what went wrong.
    """

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.path = path
        self.reason = reason

        if path is None:
            message = f"Invalid configuration document: {reason}"
        else:
            message = f"Error loading configuration file {path}: {reason}"
        super().__init__(message)


class SocketValidationError(ConnectionStatusError):
    """Base class for socket validation errors.

    Attributes:
        socket_name: Name of the offending socket (may be empty).
    """

    def __init__(self, message: str, socket_name: str = "") -> None:
        self.socket_name = socket_name
        super().__init__(message)


class MissingFieldError(SocketValidationError):
    """Raised when a required socket field is empty.

    Attributes:
        field_name: The missing field (name, host or port).
    """

    def __init__(self, field_name: str, socket_name: str = "") -> None:
        self.field_name = field_name
        super().__init__(
            f"All sockets must have the field {field_name} completed",
            socket_name=socket_name,
        )


class InvalidProtocolError(SocketValidationError):
    """Raised when a socket names a protocol outside the supported set.

    Attributes:
        protocol: The rejected protocol string.
    """

    def __init__(self, protocol: str, socket_name: str = "") -> None:
        self.protocol = protocol
        super().__init__(
            f"The protocol {protocol!r} of socket {socket_name!r} is not a valid one",
            socket_name=socket_name,
        )


class InvalidTimeoutError(SocketValidationError):
    """Raised when a socket timeout is negative.

    Attributes:
        timeout: The rejected timeout in seconds.
    """

    def __init__(self, timeout: int, socket_name: str = "") -> None:
        self.timeout = timeout
        super().__init__(
            f"The timeout of socket {socket_name!r} must be positive, got {timeout}",
            socket_name=socket_name,
        )
