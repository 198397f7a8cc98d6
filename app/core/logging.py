# app/core/logging.py
import logging

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    # no-op when the server (or pytest) already installed handlers
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level)

    if settings.LOG_SQL:
        logging.getLogger("app.core.database").setLevel(logging.DEBUG)
