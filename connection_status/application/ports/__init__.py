"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- SocketProberProtocol: one bounded connection attempt per socket
- MetricsExporterPort: rendering of the metrics registry for scraping
"""

from connection_status.application.ports.metrics_exporter import MetricsExporterPort
from connection_status.application.ports.socket_prober import SocketProberProtocol

__all__: list[str] = ["MetricsExporterPort", "SocketProberProtocol"]
