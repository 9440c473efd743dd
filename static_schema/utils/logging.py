"""
Logging configuration.

Every module logs through ``logging.getLogger(__name__)``; this module attaches
handlers to the package logger. Console output goes through Rich so log lines
match the CLI's styling.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

PACKAGE_LOGGER = "static_schema"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Logging level name or number (default: INFO)
        log_file: Optional file to also write log records to

    Returns:
        logging.Logger: The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
