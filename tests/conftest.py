"""Shared fixtures: an app wired to in-memory SQLite, a fake Firebase verifier and a settable clock."""
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from firebase_admin import auth as firebase_auth

from finance_tracker.auth import SessionTokenCodec
from finance_tracker.config import Settings
from finance_tracker.container import Container
from finance_tracker.main import create_app

JWT_SECRET = "test-secret-that-is-long-enough-for-hs256"


class FakeClock:
    """Callable clock returning an aware UTC time that tests can move forward."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2024, 4, 10, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class FakeVerifier:
    """Stands in for Firebase: known tokens decode to claims, listed tokens raise."""

    def __init__(self) -> None:
        self._claims: dict[str, dict[str, Any]] = {}
        self._errors: dict[str, Exception] = {}

    def register(
        self,
        token: str,
        uid: str,
        email: str | None = None,
        name: str | None = None,
        provider: str = "google.com",
    ) -> None:
        self._claims[token] = {
            "uid": uid,
            "email": email,
            "name": name,
            "email_verified": True,
            "firebase": {"sign_in_provider": provider},
        }

    def fail_with(self, token: str, exc: Exception) -> None:
        self._errors[token] = exc

    def verify_id_token(self, id_token: str) -> dict[str, Any]:
        if id_token in self._errors:
            raise self._errors[id_token]
        if id_token not in self._claims:
            raise firebase_auth.InvalidIdTokenError("Wrong number of segments in token")
        return self._claims[id_token]


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", jwt_secret=JWT_SECRET, app_env="test")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture
def container(settings, clock, verifier) -> Container:
    container = Container()
    container.settings.override(providers.Object(settings))
    container.token_codec.override(
        providers.Object(SessionTokenCodec(JWT_SECRET, clock=clock))
    )
    container.token_verifier.override(providers.Object(verifier))
    return container


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def login(
    client: TestClient,
    verifier: FakeVerifier,
    uid: str = "firebase-uid-1",
    email: str = "ada@example.com",
    name: str = "Ada Lovelace",
    provider: str = "google.com",
) -> dict[str, str]:
    """Log in through the API and return the Authorization header for the session."""
    id_token = f"id-token-{uid}"
    verifier.register(id_token, uid=uid, email=email, name=name, provider=provider)
    response = client.post(
        "/api/auth",
        json={"firebaseToken": id_token, "user": {"name": name, "email": email}},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture
def auth_headers(client, verifier) -> dict[str, str]:
    return login(client, verifier)


@pytest.fixture
def other_headers(client, verifier) -> dict[str, str]:
    return login(client, verifier, uid="firebase-uid-2", email="grace@example.com", name="Grace")


@pytest.fixture
def category_id(client, auth_headers) -> int:
    response = client.post(
        "/api/expense-categories",
        json={"expenseCategoryName": "Groceries", "expenseCategoryIcon": "cart"},
        headers=auth_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["category"]["id"]


@pytest.fixture
def type_id(client, auth_headers) -> int:
    response = client.post(
        "/api/expense-types", json={"expenseTypeName": "Card"}, headers=auth_headers
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["type"]["id"]
