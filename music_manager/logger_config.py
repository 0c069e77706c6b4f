import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: int = logging.WARNING):
    """Configures the root logger for the application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # stderr keeps log lines out of the menu on stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    if not logger.handlers:
        logger.addHandler(handler)
