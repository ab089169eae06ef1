# File: review_api/schemas/health.py

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime
    environment: str
