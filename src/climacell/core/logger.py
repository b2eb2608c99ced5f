"""
Logging setup for applications built on the ClimaCell client.

The library itself only logs through ``logging.getLogger(__name__)`` and never
configures handlers; ``setup_logger`` is for scripts such as the bundled CLI.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional


CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s [%(filename)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a second call replaces only those
_HANDLER_TAG = "_climacell_handler"


def _tagged(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logger(
    name: str = "climacell",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a console handler, and optionally a file handler, to a logger.

    Nothing is written to disk unless a log file is requested, either with
    `log_file` or the LOG_FILE environment variable. Calling this again
    swaps the handlers it installed before and leaves any others alone.

    Args:
        name: Logger name; "climacell" covers every module of the client
        log_level: Level name for the logger and console (DEBUG, INFO, ...)
        log_file: Path of a log file that receives DEBUG and above

    Returns:
        The configured logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_tagged(logging.StreamHandler(), level, CONSOLE_FORMAT))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        logger.addHandler(_tagged(file_handler, logging.DEBUG, FILE_FORMAT))

    logger.propagate = False
    return logger


class LoggerContext:
    """Logs the start, outcome and duration of one operation."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self._started: Optional[float] = None

    @property
    def elapsed(self) -> float:
        """Seconds since the operation started."""
        if self._started is None:
            return 0.0
        return time.monotonic() - self._started

    def __enter__(self) -> "LoggerContext":
        self._started = time.monotonic()
        self.logger.info("%s: started", self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.logger.info("%s: done in %.2fs", self.operation, self.elapsed)
        else:
            self.logger.error(
                "%s: failed after %.2fs: %s", self.operation, self.elapsed, exc_val
            )
        return False
