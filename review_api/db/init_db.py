"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from typing import Optional

from sqlalchemy.engine import Engine

from review_api.db.session import get_engine
from review_api.models.base import Base
from review_api.models import user  # noqa: F401


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create all tables (and the unique email index) if they do not exist.
    """
    Base.metadata.create_all(bind=engine or get_engine())
