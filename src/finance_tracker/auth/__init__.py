"""Authentication: identity bridge, session tokens, login flow and access guard."""
from finance_tracker.auth.flow import AuthenticationFlow, LoginResult
from finance_tracker.auth.guard import AccessGuard, UserContext
from finance_tracker.auth.identity import (ExternalIdentity,
                                           FirebaseTokenVerifier,
                                           IdentityBridge, IdTokenVerifier,
                                           create_firebase_app)
from finance_tracker.auth.tokens import (ISSUER, SessionClaims,
                                         SessionTokenCodec)

__all__ = [
    "ISSUER",
    "AccessGuard",
    "AuthenticationFlow",
    "ExternalIdentity",
    "FirebaseTokenVerifier",
    "IdTokenVerifier",
    "IdentityBridge",
    "LoginResult",
    "SessionClaims",
    "SessionTokenCodec",
    "UserContext",
    "create_firebase_app",
]
