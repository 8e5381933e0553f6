"""Login flow: external token -> verified identity -> user -> session token.

Single pass, no state kept between calls:

    ReceivedExternalToken -> Verified -> Resolved -> SessionIssued

Any step may reject by raising; the exception type is the rejection reason.
"""
import logging
from dataclasses import dataclass

from finance_tracker.auth.identity import IdentityBridge
from finance_tracker.auth.tokens import SessionTokenCodec
from finance_tracker.core.exceptions import IncompleteProfile, MissingCredential
from finance_tracker.db import User
from finance_tracker.schemas import UserInfo
from finance_tracker.services.users import UserDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User
    created: bool

    @property
    def message(self) -> str:
        return "User created successfully" if self.created else "Login successful"


def _check_profile(profile: UserInfo | None) -> None:
    if profile is None:
        raise IncompleteProfile(
            "User information is required", errors=["user: User information is required"]
        )
    errors = []
    if not (profile.email or "").strip():
        errors.append("user.email: User email is required")
    if not (profile.name or "").strip():
        errors.append("user.name: User name is required")
    if errors:
        raise IncompleteProfile(errors=errors)


class AuthenticationFlow:
    """Orchestrates IdentityBridge, UserDirectory and SessionTokenCodec for one login."""

    def __init__(
        self,
        identity_bridge: IdentityBridge,
        users: UserDirectory,
        token_codec: SessionTokenCodec,
    ) -> None:
        self._identity_bridge = identity_bridge
        self._users = users
        self._token_codec = token_codec

    def login(self, external_token: str | None, profile: UserInfo | None) -> LoginResult:
        """Exchange an external ID token for a session token.

        The caller-supplied profile wins over token claims for name and email,
        which only fill in when the profile is silent.
        """
        if not external_token:
            raise MissingCredential("Firebase token is required")
        _check_profile(profile)

        identity = self._identity_bridge.verify(external_token)
        logger.debug("External token verified for subject %s", identity.subject_id)

        user, created = self._users.find_or_create(
            subject_id=identity.subject_id,
            email=profile.email or identity.email or "",
            name=profile.name or identity.name or "",
            provider=identity.provider,
        )

        token = self._token_codec.issue(user.id, user.email, user.firebase_user_id)
        return LoginResult(token=token, user=user, created=created)
