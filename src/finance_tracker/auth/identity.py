"""Identity bridge: verify Firebase ID tokens and extract the caller's identity.

The Firebase app is created once at startup (see container.py) and handed to
FirebaseTokenVerifier; tests inject any object with verify_id_token().
"""
import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from firebase_admin import exceptions as firebase_exceptions

from finance_tracker.core.exceptions import (ConfigurationError,
                                             MalformedCredential,
                                             MissingCredential, TokenExpired,
                                             TokenRevoked,
                                             UnknownCredentialFailure)

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "finance-tracker"


class IdTokenVerifier(Protocol):
    """Anything that can verify an external ID token and return its decoded claims."""

    def verify_id_token(self, id_token: str) -> dict[str, Any]:
        ...


@dataclass(frozen=True)
class ExternalIdentity:
    """Verified claims of an external identity token."""

    subject_id: str
    email: str | None
    name: str | None
    email_verified: bool
    picture: str
    provider: str | None


def create_firebase_app(service_account_b64: str | None) -> firebase_admin.App:
    """Build the Firebase Admin app from a base64-encoded service account JSON."""
    if not service_account_b64:
        raise ConfigurationError(
            "FIREBASE_SERVICE_ACCOUNT_BASE64 is not defined in environment variables"
        )
    try:
        service_account = json.loads(base64.b64decode(service_account_b64).decode("utf-8"))
    except ValueError as exc:
        raise ConfigurationError("FIREBASE_SERVICE_ACCOUNT_BASE64 is not valid base64 JSON") from exc
    app = firebase_admin.initialize_app(
        credentials.Certificate(service_account), name=FIREBASE_APP_NAME
    )
    logger.info("Firebase Admin SDK initialized")
    return app


class FirebaseTokenVerifier:
    """Verifies ID tokens against a specific Firebase app, including revocation."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    def verify_id_token(self, id_token: str) -> dict[str, Any]:
        return firebase_auth.verify_id_token(id_token, app=self._app, check_revoked=True)


class IdentityBridge:
    """Turns an external ID token into an ExternalIdentity or a typed auth failure."""

    def __init__(self, verifier: IdTokenVerifier) -> None:
        self._verifier = verifier

    def verify(self, external_token: str | None) -> ExternalIdentity:
        """Verify the token with the identity provider.

        Raises:
            MissingCredential: No token given.
            TokenExpired: Token is past its validity.
            TokenRevoked: Token was revoked upstream.
            MalformedCredential: Token is not a well-formed ID token.
            UnknownCredentialFailure: Any other provider-side rejection.
        """
        if not external_token:
            raise MissingCredential("Firebase token is required")
        try:
            decoded = self._verifier.verify_id_token(external_token)
        except firebase_auth.ExpiredIdTokenError as exc:
            raise TokenExpired("Firebase token has expired. Please login again.") from exc
        except firebase_auth.RevokedIdTokenError as exc:
            raise TokenRevoked("Firebase token has been revoked. Please login again.") from exc
        except (firebase_auth.InvalidIdTokenError, ValueError) as exc:
            raise MalformedCredential("Invalid Firebase token format") from exc
        except firebase_exceptions.FirebaseError as exc:
            logger.warning("Firebase token verification failed: %s", exc)
            raise UnknownCredentialFailure("Firebase authentication failed") from exc

        firebase_claims = decoded.get("firebase") or {}
        return ExternalIdentity(
            subject_id=decoded["uid"],
            email=decoded.get("email"),
            name=decoded.get("name") or decoded.get("displayName") or "",
            email_verified=bool(decoded.get("email_verified", False)),
            picture=decoded.get("picture") or "",
            provider=firebase_claims.get("sign_in_provider"),
        )
