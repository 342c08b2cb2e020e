import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "srm"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Diagnostics go to stderr; stdout stays reserved for the user-facing output."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return logger
