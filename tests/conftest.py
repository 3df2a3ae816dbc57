"""
Pytest configuration and shared fixtures for the exporter tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Integration tests go in tests/integration/
- Unit tests use SocketProberStub instead of the network wherever the
  prober itself is not under test
"""

import socket
from collections.abc import Iterator

import pytest

from connection_status.domain.models.socket import Socket, SocketSet
from connection_status.infrastructure.stubs.socket_prober_stub import SocketProberStub


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from connection_status import __version__

    return __version__


@pytest.fixture
def tcp_listener() -> Iterator[int]:
    """Listen on an ephemeral loopback port and yield the port."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server.bind(("127.0.0.1", 0))
    server.listen(16)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


@pytest.fixture
def closed_tcp_port() -> int:
    """Return a loopback port nothing listens on."""
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


@pytest.fixture
def socket_set() -> SocketSet:
    """Three validated sockets."""
    return SocketSet.from_sockets(
        [
            Socket(name="web", host="localhost", port=80),
            Socket(name="db", host="10.0.0.5", port="5432", timeout=2),
            Socket(name="dns", host="1.1.1.1", port=53, protocol="udp4", timeout=1),
        ]
    )


@pytest.fixture
def prober_stub() -> SocketProberStub:
    """Prober stub reporting every socket reachable."""
    return SocketProberStub()
