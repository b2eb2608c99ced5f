"""
Timeline operations for the ClimaCell v4 API.
"""

import logging
from typing import Any, Dict, Optional

from ..core import constants
from ..exceptions import DecodeError
from ..models.timeline import TimelineList, TimelineListOptions


class TimelinesAPI:
    """Mixin for /timelines API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger
    timelines_url: str

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        base_url: Optional[str] = None
    ) -> Any:
        """Method provided by APIClient base class."""
        ...

    def timelines(self, options: TimelineListOptions) -> TimelineList:
        """
        Get weather data grouped into timelines, one per requested timestep.

        Args:
            options: Location geometry, fields, time range and timesteps

        Returns:
            Decoded timelines
        """
        self.logger.info(f"Fetching timelines for timesteps {', '.join(options.timesteps) or 'default'}")
        endpoint = constants.TIMELINES_PATH
        body = self.get(endpoint, params=options.query_params(), base_url=self.timelines_url)

        try:
            return TimelineList.from_json(body)
        except DecodeError as e:
            self.logger.error(f"Failed to decode response from {endpoint}: {e}")
            raise e.with_endpoint(endpoint)
