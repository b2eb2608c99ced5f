"""
API layer for the ClimaCell weather API.

Provides the HTTP client and one operation per endpoint family.
"""

import logging
from typing import Optional

import requests  # type: ignore

from ..core import constants
from .client import APIClient
from .weather import WeatherAPI
from .timelines import TimelinesAPI
from . import helpers


class ClimaCellAPI(APIClient, WeatherAPI, TimelinesAPI):
    """
    Unified API client for ClimaCell.

    Combines the v3 weather operations and the v4 timelines operation.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = constants.DEFAULT_BASE_URL,
        timelines_url: str = constants.DEFAULT_TIMELINES_URL,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            api_key: ClimaCell API key
            base_url: Base URL of the v3 weather endpoints
            timelines_url: Base URL of the v4 timelines endpoint
            timeout: Request timeout in seconds
            max_retries: Transport-level retry attempts (0 disables retries)
            session: Pre-configured session to use instead of creating one
            logger: Logger instance
        """
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            timelines_url=timelines_url,
            timeout=timeout,
            max_retries=max_retries,
            session=session,
            logger=logger
        )


__all__ = [
    "APIClient",
    "WeatherAPI",
    "TimelinesAPI",
    "ClimaCellAPI",
    "helpers",
]
