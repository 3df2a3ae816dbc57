"""Base exception classes for the connection status domain layer."""


class ConnectionStatusError(Exception):
    """Base exception for all domain errors.

    Every error raised while loading or validating the socket
    configuration inherits from this class, so the process bootstrap
    can treat them uniformly as fatal startup failures.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
