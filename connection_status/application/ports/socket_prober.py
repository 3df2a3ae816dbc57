"""Socket prober port definition.

Defines the interface the metrics collector uses to test one socket.
Keeping it abstract lets tests substitute a stub that never touches
the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from connection_status.domain.models.probe import ProbeOutcome
from connection_status.domain.models.socket import Socket


class SocketProberProtocol(ABC):
    """Abstract interface for probing a socket.

    Implementations make exactly one connection attempt and must never
    raise for connection failures: every failure maps to
    ProbeOutcome.UNREACHABLE.
    """

    @abstractmethod
    def probe(self, socket: Socket) -> ProbeOutcome:
        """Try to connect to a socket once.

        Args:
            socket: A validated socket.

        Returns:
            REACHABLE if a connection was opened before the socket's
            timeout, UNREACHABLE otherwise.
        """
        ...


__all__ = ["SocketProberProtocol"]
