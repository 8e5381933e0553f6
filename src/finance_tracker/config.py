"""Runtime configuration read from the environment (and an optional .env file)."""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Process-wide settings. Build with Settings.from_env() at startup."""

    database_url: str = "sqlite:///./finance_tracker.db"
    sql_echo: bool = False
    jwt_secret: str = ""
    token_ttl_days: int = 7
    firebase_service_account: str | None = None
    app_env: str = "production"
    api_prefix: str = "/api"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def is_development(self) -> bool:
        """Whether raw error messages may be exposed in responses."""
        return self.app_env.lower() == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load .env (if present) then read settings from environment variables."""
        load_dotenv(_PROJECT_ROOT / ".env")
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            sql_echo=os.getenv("SQL_ECHO", "0") == "1",
            jwt_secret=os.getenv("JWT_SECRET", ""),
            token_ttl_days=int(os.getenv("TOKEN_TTL_DAYS", str(cls.token_ttl_days))),
            firebase_service_account=os.getenv("FIREBASE_SERVICE_ACCOUNT_BASE64") or None,
            app_env=os.getenv("APP_ENV", cls.app_env),
            api_prefix=os.getenv("API_PREFIX", cls.api_prefix),
            frontend_url=os.getenv("FRONTEND_URL", cls.frontend_url),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
        )
