# File: review_api/services/google_identity.py

"""
Google ID token verification.

Wraps google-auth's `verify_oauth2_token`, which fetches Google's current
signing certs and checks signature, expiry, issuer and audience.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from review_api.core.errors import IdentityProviderNotConfigured, InvalidAssertion

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


@dataclass(frozen=True)
class GoogleIdentity:
    email: str
    name: Optional[str]
    picture: Optional[str]
    email_verified: bool


class GoogleIdentityVerifier:
    def __init__(self, client_id: Optional[str]):
        self.client_id = client_id
        self._request = google_requests.Request()

    def verify(self, assertion: str) -> GoogleIdentity:
        """
        Verify a Google ID token issued for our client id.

        Raises InvalidAssertion with the underlying reason on any failure.
        """
        if not self.client_id:
            raise IdentityProviderNotConfigured()

        try:
            claims = id_token.verify_oauth2_token(assertion, self._request, self.client_id)
        except (ValueError, google_exceptions.GoogleAuthError) as exc:
            logger.warning("Google token verification failed: %s", exc)
            raise InvalidAssertion(str(exc)) from exc

        if claims.get("iss") not in GOOGLE_ISSUERS:
            raise InvalidAssertion(f"Wrong issuer: {claims.get('iss')}")

        email = claims.get("email")
        if not email:
            raise InvalidAssertion("Token has no email claim")

        return GoogleIdentity(
            email=email,
            name=claims.get("name"),
            picture=claims.get("picture"),
            email_verified=_as_bool(claims.get("email_verified", False)),
        )


def _as_bool(value) -> bool:
    # Older tokens carry email_verified as the string "true"
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)
