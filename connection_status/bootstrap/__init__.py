"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so the API and the
CLI can depend on ports without building adapters themselves.
"""

from connection_status.bootstrap.exporter import ExporterComponents, build_exporter

__all__: list[str] = ["ExporterComponents", "build_exporter"]
