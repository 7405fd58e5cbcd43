import logging
import logging.handlers

from openrouter_dashboard.config.settings import settings

LOGGER_NAME = "openrouter_dashboard"

_configured = False


def setup_logging() -> logging.Logger:
    """Configure the application logger from settings.

    - `LOG_LEVEL`: level for the `openrouter_dashboard` logger tree
    - `LOG_TO_CONSOLE`: stream handler on stderr
    - `LOG_FILE`: if set, a RotatingFileHandler (10 MB x 5)
    - `LOG_FORMAT`: message format

    Safe to call more than once; handlers are only attached the first time.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if _configured:
        return logger

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(settings.LOG_FORMAT)

    if settings.LOG_TO_CONSOLE:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if settings.LOG_FILE:
        file_handler = logging.handlers.RotatingFileHandler(
            settings.LOG_FILE, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # our middleware logs every request; uvicorn's own access log would duplicate it
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)

    _configured = True
    return logger
