"""HTTP surface of the exporter: metrics and liveness endpoints."""
