"""
Core utilities for the ClimaCell client.

Provides configuration management, logging, constants and date handling.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils, ZERO_TIME

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "ZERO_TIME",
]
