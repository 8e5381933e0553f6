"""Session token codec: signed, time-limited bearer tokens (JWT, HS256).

Sessions are stateless; an issued token stays valid until it expires and
logout is purely client-side.
"""
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from finance_tracker.core.exceptions import (ConfigurationError, TokenExpired,
                                             TokenInvalid)

ISSUER = "finance-tracker-v2"
ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried by a session token."""

    user_id: int
    email: str
    subject_id: str


class SessionTokenCodec:
    """Issues and verifies session tokens with a server-held secret."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        *,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        """Initialize the codec.

        Args:
            secret: HMAC signing secret (JWT_SECRET). Required.
            ttl: Validity window of issued tokens.
            clock: Returns the current aware UTC time; injectable for tests.

        Raises:
            ConfigurationError: If no secret is configured.
        """
        if not secret:
            raise ConfigurationError("JWT_SECRET is not defined in environment variables")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    def issue(self, user_id: int, email: str, subject_id: str) -> str:
        """Sign a token for the given user."""
        now = self._clock()
        payload = {
            "sub": str(user_id),
            "email": email,
            "uid": subject_id,
            "iss": ISSUER,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> SessionClaims:
        """Validate signature, issuer and expiry; return the embedded claims.

        Raises:
            TokenExpired: The validity window has elapsed.
            TokenInvalid: Any other problem (signature, issuer, shape).
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                issuer=ISSUER,
                # Expiry is checked below against the injected clock.
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["exp", "iss", "sub"],
                },
            )
            expires_at = int(payload["exp"])
            claims = SessionClaims(
                user_id=int(payload["sub"]),
                email=str(payload.get("email", "")),
                subject_id=str(payload.get("uid", "")),
            )
        except (jwt.InvalidTokenError, TypeError, ValueError) as exc:
            raise TokenInvalid() from exc
        if self._clock().timestamp() >= expires_at:
            raise TokenExpired()
        return claims
