"""Prometheus collector for socket reachability.

Every scrape triggers one collection cycle: each socket of the set is
probed in order and its gauge child is set to 1 (reachable) or 0
(unreachable). Cycles are serialized by a lock, so concurrent scrapes
never interleave their writes or observe a half-written gauge.

Metric:
    connection_status_up{name, host, port, protocol}

The label tuple is the key of a sample; a new cycle overwrites the
previous value for the same socket.
"""

from __future__ import annotations

import threading
from typing import Any

from prometheus_client import CollectorRegistry, Gauge
from prometheus_client.metrics_core import Metric

from connection_status.application.ports.socket_prober import SocketProberProtocol
from connection_status.domain.models.probe import MetricSample
from connection_status.domain.models.socket import SocketSet
from connection_status.infrastructure.observability.logging import get_logger_for_service

# Name of the gauge family for Prometheus
METRIC_NAME = "connection_status_up"
METRIC_DOCUMENTATION = "Connection status of the socket."
LABEL_NAMES = ("name", "host", "port", "protocol")


class SocketSetCollector:
    """Custom Prometheus collector probing a socket set on demand.

    Implements the collector interface of prometheus_client
    (``describe`` and ``collect``), so registering it in a
    CollectorRegistry is enough for ``generate_latest`` to probe.

    Attributes:
        socket_set: The validated sockets probed on each cycle.
    """

    def __init__(
        self,
        socket_set: SocketSet,
        prober: SocketProberProtocol,
        registry: CollectorRegistry | None = None,
        logger: Any | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            socket_set: Validated sockets to probe.
            prober: Prober used for every socket.
            registry: Registry to register with. Nothing is registered
                when omitted.
            logger: structlog logger. Defaults to a logger bound to
                this service.
        """
        self.socket_set = socket_set
        self._prober = prober
        self._lock = threading.Lock()
        self._log = (
            logger
            if logger is not None
            else get_logger_for_service("SocketSetCollector", "monitoring")
        )

        # Not registered anywhere: the collector exposes it itself
        self._gauge = Gauge(
            name=METRIC_NAME,
            documentation=METRIC_DOCUMENTATION,
            labelnames=LABEL_NAMES,
            registry=None,
        )

        if registry is not None:
            registry.register(self)

    def describe(self) -> list[Metric]:
        """Return the gauge family without probing."""
        return self._gauge.describe()

    def collect(self) -> list[Metric]:
        """Probe every socket and return the gauge family.

        The lock is held until the family has been snapshotted, so the
        returned samples all come from the same cycle.
        """
        with self._lock:
            self._run_cycle()
            return list(self._gauge.collect())

    def collect_samples(self) -> list[MetricSample]:
        """Run one collection cycle and return its samples in set order."""
        with self._lock:
            return self._run_cycle()

    def _run_cycle(self) -> list[MetricSample]:
        samples: list[MetricSample] = []
        for socket in self.socket_set:
            outcome = self._prober.probe(socket)
            value = outcome.metric_value
            self._gauge.labels(*socket.labels).set(value)
            samples.append(MetricSample(*socket.labels, value=value))

        self._log.debug(
            "collection_cycle_completed",
            sockets=len(samples),
            reachable=sum(1 for sample in samples if sample.value == 1.0),
        )
        return samples
