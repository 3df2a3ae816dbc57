"""Health check endpoint for the exporter."""

from fastapi import APIRouter

from connection_status.api.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return health status.

    Does not probe any socket; it only tells that the process serves.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(status="healthy")
