"""Probe outcome and metric sample models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProbeOutcome(int, Enum):
    """Result of a single connection attempt.

    Values match the gauge value published for the socket.
    """

    UNREACHABLE = 0
    REACHABLE = 1

    @property
    def metric_value(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class MetricSample:
    """Gauge value for one socket in one collection cycle.

    Attributes:
        name: Socket name label.
        host: Socket host label.
        port: Socket port label.
        protocol: Socket protocol label.
        value: 1.0 when reachable, 0.0 otherwise.
    """

    name: str
    host: str
    port: str
    protocol: str
    value: float

    @property
    def labels(self) -> tuple[str, str, str, str]:
        return (self.name, self.host, self.port, self.protocol)
