import sys

from loguru import logger


def setup_logging(level="WARNING"):
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=False, diagnose=False)
    logger.enable("svg2vd")
    return logger
