# File: review_api/api/routes_health.py

from datetime import datetime, timezone

from fastapi import APIRouter

from review_api.core.config import settings
from review_api.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
def health():
    return HealthResponse(
        status="OK",
        message=f"{settings.PROJECT_NAME} is running",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
    )
