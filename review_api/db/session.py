from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from review_api.core.config import settings

SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory SQLite lives on a single connection
        if ":memory:" in database_url or database_url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


@lru_cache
def get_engine() -> Engine:
    """
    Engine for the configured database, created on first use.

    The URL is validated at startup; see `review_api.main.check_startup_config`.
    """
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not set")
    return build_engine(settings.database_url)


