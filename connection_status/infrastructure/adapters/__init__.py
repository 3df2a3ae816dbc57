"""Infrastructure adapters implementing the application ports."""

from connection_status.infrastructure.adapters.socket_prober import SocketProber

__all__: list[str] = ["SocketProber"]
