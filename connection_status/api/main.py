"""FastAPI application factory for the exporter."""

from fastapi import FastAPI, Response

from connection_status import __version__
from connection_status.api.routes import metrics
from connection_status.api.routes.health import router as health_router
from connection_status.application.ports.metrics_exporter import MetricsExporterPort
from connection_status.config.exporter_config import DEFAULT_METRICS_PATH


def create_app(
    exporter: MetricsExporterPort,
    metrics_path: str = DEFAULT_METRICS_PATH,
) -> FastAPI:
    """Create the exporter application.

    Args:
        exporter: Renders the metrics registry on each scrape.
        metrics_path: Path serving the metrics.

    Returns:
        The FastAPI application.
    """
    app = FastAPI(
        title="Connection Status Exporter",
        description="Reachability of configured sockets as Prometheus metrics",
        version=__version__,
    )
    app.state.metrics_exporter = exporter

    app.add_api_route(
        metrics_path,
        metrics.get_metrics,
        methods=["GET"],
        response_class=Response,
        tags=["metrics"],
        summary="Prometheus metrics endpoint",
        responses={
            200: {
                "description": "Metrics in Prometheus format",
                "content": {"text/plain": {}},
            }
        },
    )
    app.include_router(health_router)
    return app
