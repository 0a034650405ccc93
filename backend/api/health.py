"""Health check routes."""

from fastapi import APIRouter

from api.schemas import HealthResponse
from domain.shared.types import utc_now
from infrastructure.config import get_settings

SERVICE_NAME = "Celleret Backend BFF"

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=utc_now(),
        service=SERVICE_NAME,
        version=get_settings().app_version,
    )
