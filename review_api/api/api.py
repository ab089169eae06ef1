from fastapi import APIRouter

from review_api.api.routes_auth import router as auth_router
from review_api.api.routes_health import router as health_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(health_router, prefix="/api", tags=["health"])
