"""API response models."""

from connection_status.api.models.health import HealthResponse

__all__: list[str] = ["HealthResponse"]
