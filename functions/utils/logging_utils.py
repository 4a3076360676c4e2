import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name):
    """
    Returns the logger for a trigger module.

    Handlers are attached once per logger, so warm instances that serve many
    invocations do not duplicate lines. The level comes from the LOG_LEVEL
    environment variable and defaults to INFO.

    Args:
        name: The name for the logger, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

        # Cloud Functions forwards stderr to Cloud Logging
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
