# File: review_api/core/errors.py

"""
Error taxonomy for the auth flow.

Every error carries the HTTP status it maps to and a user-facing message.
`register_exception_handlers` renders them as `{"message": ...}`.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class AuthError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


# ---------- 400: validation / business rules ----------

class MissingField(AuthError):
    message = "Missing required field"


class DuplicateUser(AuthError):
    message = "User already exists"


class InvalidCredentials(AuthError):
    message = "Invalid credentials"


class MissingCredential(AuthError):
    message = "Missing Google credential"


class EmailNotVerified(AuthError):
    message = "Email not verified by Google"


# ---------- 401: authentication layer ----------

class Unauthenticated(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token is not valid"


class InvalidAssertion(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid Google token"

    def __init__(self, reason: str, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"message": self.message, "error": self.reason}


# ---------- 404 / 500 ----------

class UserNotFound(AuthError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class ServerError(AuthError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"


class IdentityProviderNotConfigured(ServerError):
    message = "Google sign-in is not configured"


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse("Something broke!", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
