"""Logging configuration."""

import logging

from user_identity.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger from settings.

    Called once at application startup. Modules log through
    `logging.getLogger(__name__)` and inherit this configuration.

    Args:
        settings: Application settings (log_level, debug)
    """
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    # SQLAlchemy echo has its own switch (db_echo); keep its loggers quiet otherwise
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
