import logging
import os
import sys
from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'


def get_logger(name: str, log_level: str = None):
    """JSON logger on stdout; level defaults to the LOG_LEVEL environment variable."""
    logger = logging.getLogger(name)
    logger.setLevel(log_level or os.getenv("LOG_LEVEL", "INFO"))
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


logger = get_logger("quiz_builder")
