"""
Connection Status Exporter - socket reachability for Prometheus

Probes a declarative set of network endpoints (host, port, protocol) on
every scrape and publishes a single gauge per endpoint:
1 when a connection could be opened, 0 otherwise.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
