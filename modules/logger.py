import sys

from loguru import logger

import settings

FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

logger.remove()
logger.add(
    sys.stdout,
    format=FORMAT,
    level=settings.LOG_LEVEL,
    filter=lambda record: record["level"].no < logger.level("ERROR").no,
)
logger.add(sys.stderr, format=FORMAT, level="ERROR", backtrace=False)
