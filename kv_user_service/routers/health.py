"""
Health check and metrics router.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from .. import __version__
from ..dependencies import get_user_repository
from ..metrics import metrics_endpoint
from ..models import HealthResponse
from ..repositories.user_repository import UserRepository

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
)
async def health_check(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Health check endpoint.

    Answers 503 when the key-value store does not respond to PING.
    """
    healthy = await repository.gateway.ping()
    body = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        service=request.app.state.settings.SERVICE_NAME,
        version=__version__,
        redis="healthy" if healthy else "unhealthy",
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()
