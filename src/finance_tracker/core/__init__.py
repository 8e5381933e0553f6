"""Core error taxonomy and mapping."""
from finance_tracker.core.error_mapper import PERSISTENCE_EXCEPTIONS, ErrorMapper
from finance_tracker.core.exceptions import (AuthError, ConfigurationError,
                                             DuplicateEmail, DuplicateKeyError,
                                             FinanceTrackerError,
                                             IncompleteProfile,
                                             MalformedCredential,
                                             MissingCredential, NotFoundError,
                                             TokenExpired, TokenInvalid,
                                             TokenRevoked,
                                             UnknownCredentialFailure,
                                             UserNotFound, ValidationError)

__all__ = [
    "PERSISTENCE_EXCEPTIONS",
    "AuthError",
    "ConfigurationError",
    "DuplicateEmail",
    "DuplicateKeyError",
    "ErrorMapper",
    "FinanceTrackerError",
    "IncompleteProfile",
    "MalformedCredential",
    "MissingCredential",
    "NotFoundError",
    "TokenExpired",
    "TokenInvalid",
    "TokenRevoked",
    "UnknownCredentialFailure",
    "UserNotFound",
    "ValidationError",
]
