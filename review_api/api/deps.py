# File: review_api/api/deps.py

import logging
from collections.abc import Generator
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from review_api.core.config import settings
from review_api.core.errors import Unauthenticated
from review_api.core.security import InvalidToken, decode_access_token
from review_api.db.session import SessionLocal, get_engine
from review_api.services.google_identity import GoogleIdentityVerifier

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    Session guard for protected routes.

    Resolves the bearer token to a user id and stores it on
    `request.state.user_id`.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token, authorization denied")

    try:
        user_id = decode_access_token(credentials.credentials)
    except InvalidToken as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise Unauthenticated()

    request.state.user_id = user_id
    return user_id


@lru_cache
def get_identity_verifier() -> GoogleIdentityVerifier:
    return GoogleIdentityVerifier(settings.google_client_id)
