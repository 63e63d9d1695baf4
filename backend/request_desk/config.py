import logging
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_DEV_SESSION_SECRET = "request-desk-dev-secret"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Request Desk"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./request_desk.db"

    # Admin session cookie
    session_secret: str = _DEV_SESSION_SECRET
    session_max_age: int = 86400

    # Seed values for the single admin account (GET /setup)
    admin_username: str = "admin"
    admin_password: str = "admin123"

    # Attachment upload & storage
    upload_dir: str = "public/uploads"
    max_upload_size_mb: int = 10
    attachment_failure_policy: Literal["tolerate", "propagate"] = "tolerate"
    unique_attachment_names: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_workflow: str = "INFO"         # record workflow + session gate

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Warn when a non-development environment runs on the default secret."""
        if self.app_env != "development" and self.session_secret == _DEV_SESSION_SECRET:
            _config_logger.warning(
                "SESSION_SECRET is not configured for env '%s'; using the development secret",
                self.app_env,
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
