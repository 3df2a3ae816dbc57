"""Metrics endpoint for Prometheus scraping.

Exposes the socket reachability gauge in Prometheus exposition format.
The handler is synchronous: FastAPI runs it in a worker thread, so the
blocking probes never stall the event loop and concurrent scrapes are
serialized by the collector lock.
"""

from fastapi import Depends, Response

from connection_status.api.dependencies import get_metrics_exporter
from connection_status.application.ports.metrics_exporter import MetricsExporterPort


def get_metrics(
    exporter: MetricsExporterPort = Depends(get_metrics_exporter),
) -> Response:
    """Probe every socket and return the metrics in Prometheus format.

    Returns:
        Response with metrics in Prometheus exposition format.
    """
    metrics_output = exporter.generate_metrics()
    return Response(
        content=metrics_output,
        media_type=exporter.content_type,
    )
