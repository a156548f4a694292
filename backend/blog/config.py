from datetime import timezone, tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./blog.db"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Listing & presentation
    articles_per_page: int = 8
    most_discussed_limit: int = 4
    latest_comments_limit: int = 4
    display_timezone: str = "UTC"

    # Categories created on first startup when the table is empty
    default_categories: list[str] = [
        "Programming",
        "Design",
        "Everyday life",
        "Travel",
        "Music",
        "Cinema",
    ]

    # Tokens issued on login
    jwt_access_secret: str = "dev-access-secret"
    jwt_refresh_secret: str = "dev-refresh-secret"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 30

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_api: str = "INFO"              # HTTP endpoints & error handlers
    log_level_services: str = "INFO"         # application services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def presentation_tz(self) -> tzinfo:
        """Time zone used when rendering dates for clients."""
        if self.display_timezone.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.display_timezone)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
