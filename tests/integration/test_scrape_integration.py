"""End-to-end scrape against real loopback sockets.

A YAML configuration names one listening port and one closed port; a
scrape through the HTTP app must report 1 and 0 respectively.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from prometheus_client.parser import text_string_to_metric_families

from connection_status.bootstrap.exporter import build_exporter
from connection_status.config.exporter_config import ExporterSettings

pytestmark = pytest.mark.network


def _values(text: str) -> dict[str, float]:
    for family in text_string_to_metric_families(text):
        if family.name == "connection_status_up":
            return {s.labels["name"]: s.value for s in family.samples}
    return {}


class TestScrapeIntegration:
    def test_scrape_reports_listening_and_closed_ports(
        self, tmp_path: Path, tcp_listener: int, closed_tcp_port: int
    ) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(
            "sockets:\n"
            f"  - {{name: up, host: 127.0.0.1, port: {tcp_listener}}}\n"
            f"  - {{name: down, host: 127.0.0.1, port: {closed_tcp_port}, timeout: 1}}\n",
            encoding="utf-8",
        )
        components = build_exporter(ExporterSettings(config_file=str(config)))
        client = TestClient(components.app)

        first = _values(client.get("/metrics").text)
        second = _values(client.get("/metrics").text)

        assert first == {"up": 1.0, "down": 0.0}
        assert second == first
