"""FastAPI dependencies resolving objects wired at startup."""

from fastapi import Request

from connection_status.application.ports.metrics_exporter import MetricsExporterPort


def get_metrics_exporter(request: Request) -> MetricsExporterPort:
    """Return the metrics exporter stored on the application state."""
    return request.app.state.metrics_exporter
