import sys
from typing import Any

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{message}</cyan> {extra}"
)


def setup_console_logging(level: str = "INFO", sink: Any = None) -> None:
    # stdout is reserved for result JSON
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=LOG_FORMAT)
