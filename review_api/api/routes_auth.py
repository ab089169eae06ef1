# File: review_api/api/routes_auth.py

"""
Auth API routes: register, login, Google sign-in and current user.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from review_api.api.deps import get_current_user_id, get_db, get_identity_verifier
from review_api.core.errors import AuthError, ServerError
from review_api.schemas.user import (
    AuthUser,
    GoogleLoginRequest,
    GoogleLoginResponse,
    GoogleUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserRead,
)
from review_api.services import auth_service
from review_api.services.google_identity import GoogleIdentityVerifier

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register with email and password",
)
def register(payload: Optional[RegisterRequest] = None, db: Session = Depends(get_db)):
    payload = payload or RegisterRequest()
    try:
        user, token = auth_service.register_user(
            db,
            email=payload.email,
            password=payload.password,
            username=payload.username,
        )
    except AuthError:
        raise
    except Exception:
        logger.exception("Registration error")
        raise ServerError("Server error during registration")

    return TokenResponse(token=token, user=AuthUser.model_validate(user))


@router.post("/login", response_model=TokenResponse, summary="Log in with email and password")
def login(payload: Optional[LoginRequest] = None, db: Session = Depends(get_db)):
    payload = payload or LoginRequest()
    try:
        user, token = auth_service.authenticate_user(
            db,
            email=payload.email,
            password=payload.password,
        )
    except AuthError:
        raise
    except Exception:
        logger.exception("Login error")
        raise ServerError("Server error during login")

    return TokenResponse(token=token, user=AuthUser.model_validate(user))


@router.post("/google", response_model=GoogleLoginResponse, summary="Sign in with a Google ID token")
def google_login(
    payload: Optional[GoogleLoginRequest] = None,
    db: Session = Depends(get_db),
    verifier: GoogleIdentityVerifier = Depends(get_identity_verifier),
):
    """
    Verify a Google ID token, creating the account on first sign-in.

    Every response carries `success`; failures also carry `message` and,
    for rejected tokens or server errors, `error`.
    """
    payload = payload or GoogleLoginRequest()
    try:
        user, token = auth_service.google_login(db, verifier, credential=payload.credential)
    except AuthError as exc:
        content = {"success": False, **exc.to_dict()}
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            content.setdefault("error", type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content=content)
    except Exception as exc:
        logger.exception("Server error during Google auth")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "Server error during authentication",
                "error": type(exc).__name__,
            },
        )

    logger.info("Google sign-in succeeded for user %s", user.id)
    return GoogleLoginResponse(token=token, user=GoogleUser.model_validate(user))


@router.get("/me", response_model=UserRead, summary="Current user")
def read_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        user = auth_service.get_user_by_id(db, user_id)
    except AuthError:
        raise
    except Exception:
        logger.exception("Get user error")
        raise ServerError()

    return UserRead.model_validate(user)
