import sys

from loguru import logger


def enable_logging(level="INFO"):
    logger.remove()
    logger.add(sys.stdout, colorize=True, level=level, format="<level>{message}</level>")
