"""Socket descriptor and socket set models.

A Socket describes one endpoint to probe. Validation fills the optional
fields (protocol, timeout) with their defaults and rejects descriptors
that could never be probed. A SocketSet is the ordered, validated
collection loaded once at startup.

Defaults:
- protocol: "tcp"
- timeout: 5 seconds
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from connection_status.domain.errors.socket_config import (
    InvalidProtocolError,
    InvalidTimeoutError,
    MissingFieldError,
)

# Default values for the optional fields of a socket
DEFAULT_PROTOCOL = "tcp"
DEFAULT_TIMEOUT_SECONDS = 5


class SocketProtocol(str, Enum):
    """Networks a socket can be dialed on."""

    TCP = "tcp"
    TCP4 = "tcp4"
    TCP6 = "tcp6"
    UDP = "udp"
    UDP4 = "udp4"
    UDP6 = "udp6"
    IP = "ip"
    IP4 = "ip4"
    IP6 = "ip6"
    UNIX = "unix"
    UNIXGRAM = "unixgram"
    UNIXPACKET = "unixpacket"


_VALID_PROTOCOLS = frozenset(protocol.value for protocol in SocketProtocol)


def is_valid_protocol(protocol: str) -> bool:
    """Check if a string is among the valid protocols."""
    return protocol in _VALID_PROTOCOLS


def _is_empty_port(port: int | str | None) -> bool:
    if port is None:
        return True
    text = str(port).strip()
    return text == "" or text == "0"


@dataclass
class Socket:
    """One endpoint to probe.

    Attributes:
        name: Identifier exposed as the ``name`` metric label.
        host: Hostname or IP literal (a filesystem path for unix sockets).
        port: Port number or service name.
        protocol: One of SocketProtocol; empty means DEFAULT_PROTOCOL.
        timeout: Seconds allowed for the connection attempt; 0 means
            DEFAULT_TIMEOUT_SECONDS.
    """

    name: str = ""
    host: str = ""
    port: int | str | None = None
    protocol: str = ""
    timeout: int = 0

    def validate(self) -> None:
        """Check the sanity of the socket and fill the default values.

        Raises:
            MissingFieldError: If name, host or port is empty.
            InvalidProtocolError: If protocol is not a supported network.
            InvalidTimeoutError: If timeout is negative.
        """
        if not self.name:
            raise MissingFieldError("name")
        if not self.host:
            raise MissingFieldError("host", socket_name=self.name)
        if _is_empty_port(self.port):
            raise MissingFieldError("port", socket_name=self.name)

        if not self.protocol:
            self.protocol = DEFAULT_PROTOCOL
        if not is_valid_protocol(self.protocol):
            raise InvalidProtocolError(self.protocol, socket_name=self.name)

        if self.timeout < 0:
            raise InvalidTimeoutError(self.timeout, socket_name=self.name)
        if self.timeout == 0:
            self.timeout = DEFAULT_TIMEOUT_SECONDS

    @property
    def port_label(self) -> str:
        """Port as exposed in the ``port`` metric label."""
        return str(self.port)

    @property
    def address(self) -> str:
        """Dial target in ``host:port`` form."""
        return f"{self.host}:{self.port_label}"

    @property
    def labels(self) -> tuple[str, str, str, str]:
        """Label values in (name, host, port, protocol) order."""
        return (self.name, self.host, self.port_label, self.protocol)


@dataclass(frozen=True)
class SocketSet:
    """Ordered, validated collection of sockets.

    Build instances with ``SocketSet.from_sockets`` so every socket is
    validated before the set is used. Iteration follows load order.
    """

    sockets: tuple[Socket, ...] = field(default_factory=tuple)

    @classmethod
    def from_sockets(cls, sockets: Iterable[Socket]) -> SocketSet:
        """Create a socket set, validating every socket.

        Raises:
            SocketValidationError: On the first invalid socket; no partial
                set is returned.
        """
        socket_set = cls(sockets=tuple(sockets))
        socket_set.validate()
        return socket_set

    def validate(self) -> None:
        """Validate every socket in the set, in order."""
        for socket in self.sockets:
            socket.validate()

    @property
    def worst_case_scrape_seconds(self) -> int:
        """Upper bound of one collection cycle.

        Sockets are probed one after another, so a scrape where every
        endpoint times out takes the sum of all timeouts.
        """
        return sum(socket.timeout for socket in self.sockets)

    def __iter__(self) -> Iterator[Socket]:
        return iter(self.sockets)

    def __len__(self) -> int:
        return len(self.sockets)
