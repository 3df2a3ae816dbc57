"""Metrics exporter adapter for Prometheus output."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, generate_latest

from connection_status.application.ports.metrics_exporter import MetricsExporterPort

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class PrometheusMetricsExporter(MetricsExporterPort):
    """Render a collector registry in Prometheus exposition format."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return METRICS_CONTENT_TYPE

    def generate_metrics(self) -> bytes:
        return generate_latest(self._registry)
