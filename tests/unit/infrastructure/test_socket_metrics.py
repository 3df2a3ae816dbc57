"""Unit tests for the SocketSetCollector.

Tests the gauge published per socket, the collector interface used by
prometheus_client and the serialization of concurrent scrapes.
"""

import threading
from unittest.mock import MagicMock

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.parser import text_string_to_metric_families

from connection_status.domain.models.probe import MetricSample, ProbeOutcome
from connection_status.domain.models.socket import Socket, SocketSet
from connection_status.infrastructure.monitoring.socket_metrics import (
    LABEL_NAMES,
    METRIC_NAME,
    SocketSetCollector,
)
from connection_status.infrastructure.stubs.socket_prober_stub import SocketProberStub


def _scrape(registry: CollectorRegistry) -> dict[tuple[str, ...], float]:
    """Render the registry and map label tuples to values."""
    output = generate_latest(registry).decode("utf-8")
    values: dict[tuple[str, ...], float] = {}
    for family in text_string_to_metric_families(output):
        if family.name != METRIC_NAME:
            continue
        for sample in family.samples:
            values[tuple(sample.labels[label] for label in LABEL_NAMES)] = sample.value
    return values


class TestSocketSetCollector:
    """Tests for the collector interface."""

    def test_metric_family_schema(self) -> None:
        collector = SocketSetCollector(SocketSet.from_sockets([]), SocketProberStub())

        (family,) = collector.describe()

        assert family.name == "connection_status_up"
        assert family.type == "gauge"
        assert family.documentation == "Connection status of the socket."
        assert LABEL_NAMES == ("name", "host", "port", "protocol")

    def test_registration_does_not_probe(
        self, socket_set: SocketSet, prober_stub: SocketProberStub
    ) -> None:
        SocketSetCollector(socket_set, prober_stub, registry=CollectorRegistry())

        assert prober_stub.probed == []

    def test_scrape_publishes_one_sample_per_socket(self, socket_set: SocketSet) -> None:
        registry = CollectorRegistry()
        prober = SocketProberStub(outcomes={"db": ProbeOutcome.UNREACHABLE})
        SocketSetCollector(socket_set, prober, registry=registry)

        values = _scrape(registry)

        assert values == {
            ("web", "localhost", "80", "tcp"): 1.0,
            ("db", "10.0.0.5", "5432", "tcp"): 0.0,
            ("dns", "1.1.1.1", "53", "udp4"): 1.0,
        }

    def test_every_scrape_probes_again(
        self, socket_set: SocketSet, prober_stub: SocketProberStub
    ) -> None:
        registry = CollectorRegistry()
        SocketSetCollector(socket_set, prober_stub, registry=registry)

        _scrape(registry)
        _scrape(registry)

        assert prober_stub.probed == ["web", "db", "dns", "web", "db", "dns"]

    def test_new_outcome_overwrites_previous_sample(
        self, socket_set: SocketSet, prober_stub: SocketProberStub
    ) -> None:
        registry = CollectorRegistry()
        SocketSetCollector(socket_set, prober_stub, registry=registry)
        key = ("web", "localhost", "80", "tcp")

        assert _scrape(registry)[key] == 1.0

        prober_stub.set_outcome("web", ProbeOutcome.UNREACHABLE)
        values = _scrape(registry)

        assert values[key] == 0.0
        assert len(values) == 3

    def test_empty_socket_set_exposes_no_samples(self) -> None:
        registry = CollectorRegistry()
        SocketSetCollector(SocketSet.from_sockets([]), SocketProberStub(), registry=registry)

        assert _scrape(registry) == {}

    def test_cycle_is_logged_at_debug(
        self, socket_set: SocketSet, prober_stub: SocketProberStub
    ) -> None:
        logger = MagicMock()
        collector = SocketSetCollector(socket_set, prober_stub, logger=logger)

        collector.collect_samples()

        logger.debug.assert_called_once_with(
            "collection_cycle_completed", sockets=3, reachable=3
        )


class TestCollectSamples:
    """Tests for collect_samples."""

    def test_samples_follow_set_order(self, socket_set: SocketSet) -> None:
        prober = SocketProberStub(outcomes={"dns": ProbeOutcome.UNREACHABLE})
        collector = SocketSetCollector(socket_set, prober)

        samples = collector.collect_samples()

        assert samples == [
            MetricSample("web", "localhost", "80", "tcp", value=1.0),
            MetricSample("db", "10.0.0.5", "5432", "tcp", value=1.0),
            MetricSample("dns", "1.1.1.1", "53", "udp4", value=0.0),
        ]

    def test_consecutive_cycles_are_identical(self, socket_set: SocketSet) -> None:
        """Unchanged reachability yields identical sample sets."""
        prober = SocketProberStub(outcomes={"db": ProbeOutcome.UNREACHABLE})
        collector = SocketSetCollector(socket_set, prober)

        first = collector.collect_samples()
        second = collector.collect_samples()

        assert first == second

    def test_collect_and_collect_samples_agree(self, socket_set: SocketSet) -> None:
        prober = SocketProberStub(outcomes={"web": ProbeOutcome.UNREACHABLE})
        collector = SocketSetCollector(socket_set, prober)

        samples = {s.labels: s.value for s in collector.collect_samples()}
        (family,) = collector.collect()
        collected = {
            tuple(sample.labels[label] for label in LABEL_NAMES): sample.value
            for sample in family.samples
        }

        assert collected == samples


class TestConcurrentScrapes:
    """Concurrent scrapes are serialized cycle by cycle."""

    def _slow_set(self) -> SocketSet:
        return SocketSet.from_sockets(
            Socket(name=name, host="10.0.0.1", port=port)
            for name, port in (("a", 1), ("b", 2), ("c", 3))
        )

    def test_cycles_never_overlap(self) -> None:
        prober = SocketProberStub(delay_seconds=0.02)
        collector = SocketSetCollector(self._slow_set(), prober)

        threads = [threading.Thread(target=collector.collect) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert prober.max_concurrent == 1
        # Whole cycles follow each other, never interleaved
        assert prober.probed == ["a", "b", "c"] * 4

    def test_each_scrape_is_internally_consistent(self) -> None:
        prober = SocketProberStub(
            outcomes={"b": ProbeOutcome.UNREACHABLE}, delay_seconds=0.01
        )
        collector = SocketSetCollector(self._slow_set(), prober)
        results: list[list[MetricSample]] = []
        results_lock = threading.Lock()

        def scrape() -> None:
            samples = collector.collect_samples()
            with results_lock:
                results.append(samples)

        threads = [threading.Thread(target=scrape) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        expected = [
            MetricSample("a", "10.0.0.1", "1", "tcp", value=1.0),
            MetricSample("b", "10.0.0.1", "2", "tcp", value=0.0),
            MetricSample("c", "10.0.0.1", "3", "tcp", value=1.0),
        ]
        assert results == [expected, expected, expected]
