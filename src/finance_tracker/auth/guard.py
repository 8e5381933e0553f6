"""Access guard: resolve an Authorization header to the calling user."""
from dataclasses import dataclass

from finance_tracker.auth.tokens import SessionTokenCodec
from finance_tracker.core.exceptions import (AuthError, MissingCredential,
                                             UserNotFound)
from finance_tracker.services.users import UserDirectory

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class UserContext:
    """The authenticated caller, attached to every private request."""

    user_id: int
    firebase_user_id: str
    email: str
    name: str


class AccessGuard:
    """Validates session tokens and re-resolves the user on every request.

    Re-resolving means a deleted user cannot act on a token issued earlier.
    """

    def __init__(self, token_codec: SessionTokenCodec, users: UserDirectory) -> None:
        self._token_codec = token_codec
        self._users = users

    def authenticate(self, authorization: str | None) -> UserContext:
        """Parse "Bearer <token>", verify it and load the user.

        Raises:
            MissingCredential: Header absent, another scheme, or empty token.
            TokenExpired / TokenInvalid: Token rejected by the codec.
            UserNotFound: Token is valid but the user no longer exists.
        """
        if not authorization:
            raise MissingCredential()
        if not authorization.startswith(BEARER_PREFIX):
            raise MissingCredential("Invalid token format. Use: Bearer <token>")
        token = authorization[len(BEARER_PREFIX):].strip()
        if not token:
            raise MissingCredential()

        claims = self._token_codec.verify(token)
        user = self._users.get(claims.user_id)
        if user is None:
            raise UserNotFound()
        return UserContext(
            user_id=user.id,
            firebase_user_id=user.firebase_user_id,
            email=user.email,
            name=user.name,
        )

    def authenticate_optional(self, authorization: str | None) -> UserContext | None:
        """Like authenticate(), but any authentication failure yields None."""
        try:
            return self.authenticate(authorization)
        except AuthError:
            return None
