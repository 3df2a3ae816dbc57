"""Socket prober stub for testing.

The stub allows tests to:
1. Configure the outcome per socket name (default: REACHABLE)
2. Simulate slow dials to exercise concurrent scrapes
3. Track probe calls for verification
"""

from __future__ import annotations

import threading
import time

from connection_status.application.ports.socket_prober import SocketProberProtocol
from connection_status.domain.models.probe import ProbeOutcome
from connection_status.domain.models.socket import Socket


class SocketProberStub(SocketProberProtocol):
    """Stub implementation of SocketProberProtocol.

    Usage:
        stub = SocketProberStub(outcomes={"db": ProbeOutcome.UNREACHABLE})
        assert stub.probe(Socket(name="db", ...)) == ProbeOutcome.UNREACHABLE
        assert stub.probed == ["db"]
    """

    def __init__(
        self,
        outcomes: dict[str, ProbeOutcome] | None = None,
        default: ProbeOutcome = ProbeOutcome.REACHABLE,
        delay_seconds: float = 0.0,
    ) -> None:
        self.outcomes = dict(outcomes or {})
        self.default = default
        self.delay_seconds = delay_seconds
        self.probed: list[str] = []
        self.max_concurrent = 0
        self._active = 0
        self._counter_lock = threading.Lock()

    def set_outcome(self, name: str, outcome: ProbeOutcome) -> None:
        """Change the outcome returned for a socket name."""
        self.outcomes[name] = outcome

    def probe(self, socket: Socket) -> ProbeOutcome:
        with self._counter_lock:
            self._active += 1
            self.max_concurrent = max(self.max_concurrent, self._active)
            self.probed.append(socket.name)
        try:
            if self.delay_seconds:
                time.sleep(self.delay_seconds)
            return self.outcomes.get(socket.name, self.default)
        finally:
            with self._counter_lock:
                self._active -= 1
