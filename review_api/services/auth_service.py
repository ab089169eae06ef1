# File: review_api/services/auth_service.py

"""
Authentication service.

  - Registration with email / password
  - Login with email / password
  - Google sign-in (find-or-create by verified email)
  - Current user lookup

Functions return ORM objects and tokens and raise `AuthError` subclasses;
the routes decide how they are rendered.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from review_api.core.errors import (
    DuplicateUser,
    EmailNotVerified,
    InvalidCredentials,
    MissingCredential,
    MissingField,
    UserNotFound,
)
from review_api.core.security import (
    create_access_token,
    generate_placeholder_password,
    hash_password,
    verify_password,
)
from review_api.models.user import User
from review_api.services.google_identity import GoogleIdentityVerifier

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email)).first()


def get_user_by_id(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        # Token is valid but the account is gone; 401 stays reserved for bad tokens
        raise UserNotFound()
    return user


def _insert_user(db: Session, user: User) -> User:
    """
    Insert and commit a new user. Lets IntegrityError through after
    rolling back so callers can decide what a uniqueness clash means.
    """
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return user


def register_user(
    db: Session,
    *,
    email: Optional[str],
    password: Optional[str],
    username: Optional[str],
) -> Tuple[User, str]:
    if not email or not password or not username:
        raise MissingField("Please provide email, username, and password")

    if get_user_by_email(db, email) is not None:
        raise DuplicateUser()

    user = User(email=email, username=username, password=hash_password(password))
    try:
        _insert_user(db, user)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        raise DuplicateUser()

    logger.info("Registered user %s", user.id)
    return user, create_access_token(user.id)


def authenticate_user(
    db: Session,
    *,
    email: Optional[str],
    password: Optional[str],
) -> Tuple[User, str]:
    """
    Check email / password and issue a token.

    Unknown email and wrong password both raise the same InvalidCredentials.
    """
    if not email or not password:
        raise MissingField("Please provide email and password")

    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login attempt")
        raise InvalidCredentials()

    return user, create_access_token(user.id)


def google_login(
    db: Session,
    verifier: GoogleIdentityVerifier,
    *,
    credential: Optional[str],
) -> Tuple[User, str]:
    if not credential:
        raise MissingCredential()

    identity = verifier.verify(credential)
    if not identity.email_verified:
        raise EmailNotVerified()

    user = get_user_by_email(db, identity.email)
    if user is None:
        user = User(
            email=identity.email,
            username=identity.name or identity.email.split("@")[0],
            password=hash_password(generate_placeholder_password()),
            profile_picture=identity.picture,
            is_google_sign_in=True,
        )
        try:
            _insert_user(db, user)
            logger.info("Created user %s from Google sign-in", user.id)
        except IntegrityError:
            # Another request created this account first; use theirs
            user = get_user_by_email(db, identity.email)
            if user is None:
                raise

    return user, create_access_token(user.id)
