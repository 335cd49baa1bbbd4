import logging

from qr_tracker import app_config

LOGGER_NAME = "qr_tracker"


def resolve_level(name):
    """Map a level name like "debug" to its logging constant, INFO if unknown."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level=None):
    """Attach a console handler to the application logger.

    Safe to call more than once; handlers are only added the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level or app_config.LOG_LEVEL))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger
