import logging
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


def setup_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        level = DEFAULT_LOG_LEVEL
    logger.setLevel(level)
    return logger
