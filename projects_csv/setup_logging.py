import logging
import sys

from . import settings

LOGGER_NAME = "projects_csv"


def setup_logging(level: str = settings.LOG_LEVEL, name: str = LOGGER_NAME) -> logging.Logger:
    """Attach a stdout handler to the service logger; later calls only update the level."""
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:  # reload or second app import
        return logger
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    logger.addHandler(h)
    return logger
