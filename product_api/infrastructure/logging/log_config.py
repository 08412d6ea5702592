"""Logging setup for the product ownership service.

Issuance and guard rejections log under the identity loggers, product writes
under the product loggers. Each group gets its own level from Settings, so
SQL echo can stay quiet while ownership decisions are still traced.
"""

import logging
import sys

from product_api.config import Settings, get_settings


# Settings field → loggers whose level it controls
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_identity": [
        "product_api.application.services.identity_service",
        "product_api.application.services.ownership_guard",
        "product_api.infrastructure.identity",
    ],
    "log_level_products": [
        "product_api.application.services.product_service",
        "product_api.infrastructure.database",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels. Runs from the app lifespan."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # uvicorn installs its own handlers; tests and `python -m` runs do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s — %(message)s"))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s identity=%s products=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_identity,
        settings.log_level_products,
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names mean INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
