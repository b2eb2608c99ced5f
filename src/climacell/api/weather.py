"""
Weather data operations for the ClimaCell v3 API.

Handles the realtime, nowcast, hourly forecast and historical endpoints.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..core import constants
from ..exceptions import DecodeError
from ..models.forecast_args import ForecastArgs
from ..models.weather import (
    StationSample,
    WeatherSample,
    decode_samples,
    decode_station_samples,
)

T = TypeVar("T")


class WeatherAPI:
    """Mixin for /weather/* API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        base_url: Optional[str] = None
    ) -> Any:
        """Method provided by APIClient base class."""
        ...

    def _fetch(self, endpoint: str, args: ForecastArgs, decode: Callable[[Any], T]) -> T:
        body = self.get(endpoint, params=args.query_params())
        try:
            return decode(body)
        except DecodeError as e:
            self.logger.error(f"Failed to decode response from {endpoint}: {e}")
            raise e.with_endpoint(endpoint)

    def realtime(self, args: ForecastArgs) -> WeatherSample:
        """
        Get current conditions for a location.

        Args:
            args: Location, fields and unit system to request

        Returns:
            Weather sample for the current time
        """
        self.logger.info("Fetching realtime weather")
        return self._fetch(constants.REALTIME_PATH, args, WeatherSample.from_json)

    def nowcast(self, args: ForecastArgs) -> List[WeatherSample]:
        """
        Get a minute-by-minute forecast for the next hours.

        Args:
            args: Request options; timestep sets the minutes between samples

        Returns:
            Forecast samples in chronological order
        """
        self.logger.info("Fetching nowcast forecast")
        return self._fetch(constants.NOWCAST_PATH, args, decode_samples)

    def hourly_forecast(self, args: ForecastArgs) -> List[WeatherSample]:
        """
        Get an hourly forecast.

        Args:
            args: Request options (timestep is not accepted by this endpoint)

        Returns:
            One sample per hour
        """
        self.logger.info("Fetching hourly forecast")
        return self._fetch(constants.HOURLY_FORECAST_PATH, args, decode_samples)

    def historical_climacell(self, args: ForecastArgs) -> List[WeatherSample]:
        """Get historical data from ClimaCell's own weather model."""
        self.logger.info("Fetching ClimaCell historical weather")
        return self._fetch(constants.HISTORICAL_CLIMACELL_PATH, args, decode_samples)

    def historical_station(self, args: ForecastArgs) -> List[StationSample]:
        """Get historical data measured by weather stations near the location."""
        self.logger.info("Fetching station historical weather")
        return self._fetch(constants.HISTORICAL_STATION_PATH, args, decode_station_samples)
