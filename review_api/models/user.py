# File: review_api/models/user.py

"""
User model.

The only entity in the service. Accounts are created by registration or by a
first Google sign-in and are never updated afterwards.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from review_api.models.base import Base


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_user_id)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    # bcrypt digest; Google accounts get the hash of a random placeholder
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    profile_picture: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_google_sign_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
