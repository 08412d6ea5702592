import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Product Ownership API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Products live in a transient table; the default keeps them in memory
    database_url: str = "sqlite:///:memory:"

    # Server bind address (used by ``python -m product_api.main``)
    host: str = "127.0.0.1"
    port: int = 3000

    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_identity: str = "INFO"         # identity registry + ownership guard
    log_level_products: str = "INFO"         # product service + repository

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    settings = Settings()
    _config_logger.debug("Settings loaded for environment '%s'", settings.app_env)
    return settings
