# File: review_api/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

DEFAULT_JWT_SECRET = "your-secret-key"

# Origins that are always allowed, on top of whatever the environment adds
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "https://localhost:3000",
    "https://movie-site-mu-five.vercel.app",
    "https://movie-review-backend-gg0v.onrender.com",
    "https://accounts.google.com",
]


def normalize_origin(origin: str) -> str:
    return origin.strip().rstrip("/")


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Movie Review API"
    VERSION: str = "0.1.0"

    environment: str = os.getenv("ENVIRONMENT") or os.getenv("NODE_ENV") or "development"
    port: int = int(os.getenv("PORT") or 5000)

    # Database (required, checked at startup)
    database_url: Optional[str] = os.getenv("DATABASE_URL") or None

    # Security / auth
    secret_key: str = os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET
    access_token_expire_minutes: int = 60 * 24  # 24h
    algorithm: str = "HS256"
    password_hash_rounds: int = 10

    google_client_id: Optional[str] = os.getenv("GOOGLE_CLIENT_ID") or None

    # CORS
    frontend_url: Optional[str] = os.getenv("FRONTEND_URL") or None
    render_external_hostname: Optional[str] = os.getenv("RENDER_EXTERNAL_HOSTNAME") or None
    cors_additional_origins: List[str] = Field(
        default=os.getenv("CORS_ADDITIONAL_ORIGINS", ""), validate_default=True
    )

    # Frontend build served in production
    frontend_dist_dir: str = os.getenv(
        "FRONTEND_DIST_DIR",
        os.path.join(os.path.dirname(__file__), "..", "..", "..", "front_end", "dist"),
    )

    @field_validator("cors_additional_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.secret_key == DEFAULT_JWT_SECRET

    @property
    def cors_origins(self) -> List[str]:
        """
        Full CORS allow-list: fixed origins, the configured frontend URL,
        the Render host and any extra origins, without trailing slashes.
        """
        candidates = [
            *DEFAULT_CORS_ORIGINS,
            self.frontend_url,
            f"https://{self.render_external_hostname}" if self.render_external_hostname else None,
            *self.cors_additional_origins,
        ]

        origins: List[str] = []
        for origin in candidates:
            if not origin:
                continue
            origin = normalize_origin(origin)
            if origin and origin not in origins:
                origins.append(origin)
        return origins


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
