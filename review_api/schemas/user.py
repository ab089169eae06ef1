# File: review_api/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ---------- REQUESTS ----------
# Fields are optional here so that absent values surface as a 400
# "Please provide ..." from the auth service instead of a 422.

class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    username: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class GoogleLoginRequest(BaseModel):
    credential: Optional[str] = None


# ---------- RESPONSES ----------
# JSON keys are camelCase. FastAPI dumps response models by alias and then
# re-validates them, so each camelCase field accepts both spellings.

def camel_field(name: str, alias: str, default=None):
    return Field(
        default=default,
        validation_alias=AliasChoices(name, alias),
        serialization_alias=alias,
    )


class UserBase(BaseModel):
    id: str
    email: str
    username: str

    model_config = ConfigDict(from_attributes=True)


class AuthUser(UserBase):
    pass


class GoogleUser(UserBase):
    profile_picture: Optional[str] = camel_field("profile_picture", "profilePicture")


class UserRead(UserBase):
    """Everything about a user except the password hash."""

    profile_picture: Optional[str] = camel_field("profile_picture", "profilePicture")
    is_google_sign_in: bool = camel_field("is_google_sign_in", "isGoogleSignIn", default=False)
    created_at: Optional[datetime] = camel_field("created_at", "createdAt")


class TokenResponse(BaseModel):
    token: str
    user: AuthUser


class GoogleLoginResponse(BaseModel):
    success: bool = True
    token: str
    user: GoogleUser
