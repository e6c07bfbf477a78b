"""Health check endpoints."""

from fastapi import APIRouter

from lira import __version__
from lira.container import get_container

from ..exceptions import ServiceUnavailableError
from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status.

    Returns:
        Health status response
    """
    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Check API readiness.

    Ready once the dispatcher container has been wired at startup.

    Returns:
        Readiness status response

    Raises:
        ServiceUnavailableError: If the container is not initialized
    """
    if not get_container().is_initialized:
        raise ServiceUnavailableError("Dispatcher", detail="Container not initialized")
    return HealthResponse(status="ready", version=__version__)
