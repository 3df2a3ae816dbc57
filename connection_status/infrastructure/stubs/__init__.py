"""Stub implementations of application ports for tests."""

from connection_status.infrastructure.stubs.socket_prober_stub import SocketProberStub

__all__: list[str] = ["SocketProberStub"]
