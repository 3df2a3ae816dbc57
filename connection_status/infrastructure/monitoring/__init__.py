"""Infrastructure monitoring components.

Prometheus collection of socket reachability and rendering of the
registry for scraping.
"""

from connection_status.infrastructure.monitoring.metrics_exporter import (
    METRICS_CONTENT_TYPE,
    PrometheusMetricsExporter,
)
from connection_status.infrastructure.monitoring.socket_metrics import (
    LABEL_NAMES,
    METRIC_NAME,
    SocketSetCollector,
)

__all__ = [
    "LABEL_NAMES",
    "METRICS_CONTENT_TYPE",
    "METRIC_NAME",
    "PrometheusMetricsExporter",
    "SocketSetCollector",
]
