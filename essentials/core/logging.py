import os
import sys
from typing import List

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: str = "logs",
                  file_logging: bool = True) -> List[int]:
    """
    Replace loguru's default sink with the application's sinks.

    Always logs to stderr (DEBUG in debug mode, INFO otherwise). When
    `file_logging` is set, everything from DEBUG up also goes to a rotating
    file under `log_dir`.

    Returns:
        Ids of the added sinks, for `logger.remove()`
    """
    logger.remove()
    sinks = [logger.add(sys.stderr, level="DEBUG" if debug_mode else "INFO", format=CONSOLE_FORMAT)]

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        sinks.append(logger.add(
            os.path.join(log_dir, "essentials_{time}.log"),
            rotation="10 MB", retention="1 week", level="DEBUG",
        ))

    logger.info(f"Logging initialized ({len(sinks)} sink(s)).")
    return sinks
