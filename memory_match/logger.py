import logging
import sys

from .config import server

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
LOGGER_NAME = 'memory_match'

def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the service logger, attaching a stream handler on first use"""
    logger = logging.getLogger(name)
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(server.LOG_LEVEL.upper())
    return logger
