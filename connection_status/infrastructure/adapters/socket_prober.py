"""Socket prober adapter: one bounded connection attempt per socket.

The prober opens a connection on the socket's network, records whether
it succeeded and closes it straight away. Every failure (resolution,
refusal, timeout) collapses into UNREACHABLE and is not logged, so a
down endpoint never floods the logs. Only a failure to close an opened
connection is reported.

The socket timeout is a deadline for the whole attempt: name resolution
runs on a worker thread and is abandoned once the deadline passes, and
each resolved address is dialed with the time left.

Networks:
- tcp, tcp4, tcp6: stream socket
- udp, udp4, udp6: datagram socket (connect only fixes the peer)
- ip, ip4, ip6: accepted in the configuration but never dialed; a raw
  socket connect sends nothing, so these always report UNREACHABLE
- unix, unixgram, unixpacket: AF_UNIX stream, datagram and seqpacket
  sockets, dialed on the ``host:port`` address as a filesystem path

Probing is synchronous; a collection cycle that hits only dead
endpoints takes the sum of their timeouts.
"""

from __future__ import annotations

import socket
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from connection_status.application.ports.socket_prober import SocketProberProtocol
from connection_status.domain.models.probe import ProbeOutcome
from connection_status.domain.models.socket import Socket
from connection_status.infrastructure.observability.logging import get_logger_for_service

# (address family, socket type) per dialable internet protocol
_INET_NETWORKS: dict[str, tuple[int, int]] = {
    "tcp": (socket.AF_UNSPEC, socket.SOCK_STREAM),
    "tcp4": (socket.AF_INET, socket.SOCK_STREAM),
    "tcp6": (socket.AF_INET6, socket.SOCK_STREAM),
    "udp": (socket.AF_UNSPEC, socket.SOCK_DGRAM),
    "udp4": (socket.AF_INET, socket.SOCK_DGRAM),
    "udp6": (socket.AF_INET6, socket.SOCK_DGRAM),
}

# Socket type attribute per unix protocol (looked up lazily, not every
# platform has AF_UNIX or SOCK_SEQPACKET)
_UNIX_NETWORKS: dict[str, str] = {
    "unix": "SOCK_STREAM",
    "unixgram": "SOCK_DGRAM",
    "unixpacket": "SOCK_SEQPACKET",
}

# Resolver threads; a lookup stuck past its deadline keeps a worker busy
# until the system resolver gives up
_RESOLVER_POOL = ThreadPoolExecutor(max_workers=4, thread_name_prefix="socket-resolver")


class SocketProber(SocketProberProtocol):
    """Probe sockets with a single connection attempt.

    Usage:
        prober = SocketProber()
        outcome = prober.probe(socket)
        gauge.labels(*socket.labels).set(outcome.metric_value)
    """

    def __init__(self, logger: Any | None = None) -> None:
        """Initialize the prober.

        Args:
            logger: structlog logger for close failures. Defaults to a
                logger bound to this service.
        """
        self._log = (
            logger if logger is not None else get_logger_for_service("SocketProber", "probe")
        )

    def probe(self, target: Socket) -> ProbeOutcome:
        """Try to connect to the socket once and close the connection.

        Args:
            target: A validated socket.

        Returns:
            REACHABLE if the connection opened before the timeout,
            UNREACHABLE on any failure.
        """
        try:
            connection = self._dial(target)
        except (OSError, ValueError, OverflowError):
            return ProbeOutcome.UNREACHABLE

        try:
            connection.close()
        except OSError as exc:
            self._log.warning(
                "socket_close_failed",
                name=target.name,
                address=target.address,
                protocol=target.protocol,
                error=str(exc),
            )
        return ProbeOutcome.REACHABLE

    def _dial(self, target: Socket) -> socket.socket:
        deadline = time.monotonic() + target.timeout
        if target.protocol in _UNIX_NETWORKS:
            return self._dial_unix(target, deadline)
        if target.protocol not in _INET_NETWORKS:
            raise OSError(f"{target.protocol} cannot be dialed")
        return self._dial_inet(target, deadline)

    def _resolve(
        self, target: Socket, family: int, sock_type: int, deadline: float
    ) -> list[tuple[Any, ...]]:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TimeoutError(f"timed out resolving {target.host}")

        lookup = _RESOLVER_POOL.submit(
            socket.getaddrinfo, target.host, target.port, family, sock_type
        )
        try:
            return lookup.result(timeout=remaining)
        except TimeoutError:
            lookup.cancel()
            raise TimeoutError(f"timed out resolving {target.host}") from None

    def _dial_inet(self, target: Socket, deadline: float) -> socket.socket:
        family, sock_type = _INET_NETWORKS[target.protocol]
        addresses = self._resolve(target, family, sock_type, deadline)

        last_error: OSError | None = None
        for af, _, proto, _, sockaddr in addresses:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"timed out connecting to {target.address}")

            connection = socket.socket(af, sock_type, proto)
            try:
                connection.settimeout(remaining)
                connection.connect(sockaddr)
            except OSError as exc:
                connection.close()
                last_error = exc
                continue
            return connection

        if last_error is not None:
            raise last_error
        raise OSError(f"no usable address for {target.address}")

    def _dial_unix(self, target: Socket, deadline: float) -> socket.socket:
        family = getattr(socket, "AF_UNIX", None)
        sock_type = getattr(socket, _UNIX_NETWORKS[target.protocol], None)
        if family is None or sock_type is None:
            raise OSError(f"{target.protocol} sockets are not supported on this platform")

        connection = socket.socket(family, sock_type)
        try:
            connection.settimeout(max(deadline - time.monotonic(), 0.0))
            connection.connect(target.address)
        except OSError:
            connection.close()
            raise
        return connection
