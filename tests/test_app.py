import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from conftest import JWT_SECRET
from finance_tracker.config import Settings
from finance_tracker.exception_handlers import format_location
from finance_tracker.main import create_app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Server is running"}


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def _boom_client(container, app_env):
    container.settings.override(
        providers.Object(Settings(database_url="sqlite://", jwt_secret=JWT_SECRET, app_env=app_env))
    )
    app = create_app(container)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return TestClient(app, raise_server_exceptions=False)


def test_unexpected_error_hides_details_outside_development(container):
    with _boom_client(container, "production") as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Something went wrong!"}


def test_unexpected_error_shows_details_in_development(container):
    with _boom_client(container, "development") as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"] == "kaboom"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("TOKEN_TTL_DAYS", "3")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings.from_env()

    assert settings.jwt_secret == "from-env"
    assert settings.token_ttl_days == 3
    assert settings.is_development
    assert settings.log_level == "DEBUG"
    assert settings.database_url == Settings.database_url


@pytest.mark.parametrize(
    "loc, expected",
    [
        (("body", "expenses", 0, "expenseTypeId"), "expenses[0].expenseTypeId"),
        (("query", "month"), "month"),
        (("body",), "body"),
    ],
)
def test_format_location(loc, expected):
    assert format_location(loc) == expected
