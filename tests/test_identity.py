import base64

import firebase_admin
import pytest
from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions

from conftest import FakeVerifier
from finance_tracker.auth import (FirebaseTokenVerifier, IdentityBridge,
                                  create_firebase_app)
from finance_tracker.core.exceptions import (ConfigurationError,
                                             MalformedCredential,
                                             MissingCredential, TokenExpired,
                                             TokenRevoked,
                                             UnknownCredentialFailure)


@pytest.fixture
def bridge(verifier):
    return IdentityBridge(verifier)


def test_verified_token_yields_identity(bridge, verifier):
    verifier.register("tok", uid="uid-1", email="ada@example.com", name="Ada", provider="facebook.com")

    identity = bridge.verify("tok")

    assert identity.subject_id == "uid-1"
    assert identity.email == "ada@example.com"
    assert identity.name == "Ada"
    assert identity.email_verified is True
    assert identity.provider == "facebook.com"


def test_missing_name_becomes_empty_string(bridge, verifier):
    verifier.register("tok", uid="uid-1", email="ada@example.com")

    assert bridge.verify("tok").name == ""


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(bridge, token):
    with pytest.raises(MissingCredential):
        bridge.verify(token)


@pytest.mark.parametrize(
    "error, expected",
    [
        (firebase_auth.ExpiredIdTokenError("Token expired", cause=None), TokenExpired),
        (firebase_auth.RevokedIdTokenError("Token revoked"), TokenRevoked),
        (ValueError("Illegal ID token"), MalformedCredential),
        (firebase_auth.InvalidIdTokenError("Wrong number of segments in token"), MalformedCredential),
        (firebase_auth.InvalidIdTokenError("Invalid signature"), MalformedCredential),
        (firebase_auth.UserDisabledError("The user record is disabled."), UnknownCredentialFailure),
        (firebase_exceptions.UnavailableError("Certificate fetch failed"), UnknownCredentialFailure),
    ],
)
def test_provider_failures_are_mapped(bridge, verifier, error, expected):
    verifier.fail_with("tok", error)

    with pytest.raises(expected):
        bridge.verify("tok")


def test_malformed_credential_renders_as_bad_request():
    assert MalformedCredential().status_code == 400
    assert UnknownCredentialFailure().status_code == 401


def test_unknown_token_is_malformed():
    with pytest.raises(MalformedCredential):
        IdentityBridge(FakeVerifier()).verify("never-issued")


def test_firebase_app_requires_service_account():
    with pytest.raises(ConfigurationError, match="FIREBASE_SERVICE_ACCOUNT_BASE64"):
        create_firebase_app(None)


def test_firebase_app_rejects_non_json_service_account():
    encoded = base64.b64encode(b"not json").decode("ascii")

    with pytest.raises(ConfigurationError):
        create_firebase_app(encoded)


@pytest.fixture
def firebase_app():
    app = firebase_admin.initialize_app(options={"projectId": "demo-finance"}, name="identity-tests")
    yield app
    firebase_admin.delete_app(app)


def test_sdk_rejects_garbage_token_as_malformed(firebase_app):
    bridge = IdentityBridge(FirebaseTokenVerifier(firebase_app))

    with pytest.raises(MalformedCredential):
        bridge.verify("garbage")
