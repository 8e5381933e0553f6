from datetime import timedelta

import jwt
import pytest

from conftest import JWT_SECRET, FakeClock
from finance_tracker.auth import ISSUER, SessionTokenCodec
from finance_tracker.core.exceptions import (ConfigurationError, TokenExpired,
                                             TokenInvalid)


@pytest.fixture
def codec(clock):
    return SessionTokenCodec(JWT_SECRET, clock=clock)


def test_issue_then_verify_returns_claims(codec):
    token = codec.issue(42, "ada@example.com", "firebase-uid-1")

    claims = codec.verify(token)

    assert claims.user_id == 42
    assert claims.email == "ada@example.com"
    assert claims.subject_id == "firebase-uid-1"


def test_token_carries_issuer_and_seven_day_lifetime(codec, clock):
    token = codec.issue(1, "a@b.c", "uid")

    payload = jwt.decode(token, JWT_SECRET, algorithms=["HS256"], options={"verify_exp": False})

    assert payload["iss"] == ISSUER
    assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())
    assert payload["iat"] == int(clock.now.timestamp())


def test_token_valid_until_just_before_expiry(codec, clock):
    token = codec.issue(1, "a@b.c", "uid")

    clock.advance(timedelta(days=7) - timedelta(seconds=1))

    assert codec.verify(token).user_id == 1


def test_token_expires_after_ttl(codec, clock):
    token = codec.issue(1, "a@b.c", "uid")

    clock.advance(timedelta(days=7))

    with pytest.raises(TokenExpired):
        codec.verify(token)


def test_custom_ttl():
    clock = FakeClock()
    codec = SessionTokenCodec(JWT_SECRET, ttl=timedelta(hours=1), clock=clock)
    token = codec.issue(1, "a@b.c", "uid")

    clock.advance(timedelta(hours=1, seconds=1))

    with pytest.raises(TokenExpired):
        codec.verify(token)


def test_foreign_issuer_is_invalid(codec, clock):
    now = int(clock.now.timestamp())
    token = jwt.encode(
        {"sub": "1", "email": "a@b.c", "uid": "uid", "iss": "someone-else", "iat": now, "exp": now + 60},
        JWT_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(TokenInvalid):
        codec.verify(token)


def test_wrong_secret_is_invalid(codec, clock):
    other = SessionTokenCodec("a-completely-different-secret-of-length", clock=clock)
    token = other.issue(1, "a@b.c", "uid")

    with pytest.raises(TokenInvalid):
        codec.verify(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_garbage_is_invalid(codec, token):
    with pytest.raises(TokenInvalid):
        codec.verify(token)


def test_missing_secret_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        SessionTokenCodec("")
