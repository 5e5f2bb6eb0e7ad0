"""
Logging setup - one call at startup configures the root logger.

Modules log through `logging.getLogger(__name__)`.
"""

import logging

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging() -> None:
    """Configure root logging from settings. Safe to call more than once."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
    logging.getLogger().setLevel(level)

    # SQL echo is driven by the engine, keep the sqlalchemy logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.debug else logging.WARNING)
