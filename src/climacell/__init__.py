"""
ClimaCell Weather API Client

This package builds requests for the ClimaCell weather API and decodes its
responses into typed weather, air quality, fire index and road risk samples.
"""

import logging

__version__ = "0.1.0"
__description__ = "Client library for the ClimaCell weather API"

from .api import ClimaCellAPI
from .exceptions import ClimaCellError, DecodeError, RemoteError
from .models import (
    ForecastArgs,
    LatLon,
    LocationID,
    Geometry,
    TimelineListOptions,
    WeatherSample,
    StationSample,
    decode_sample,
    decode_samples,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClimaCellAPI",
    "ClimaCellError",
    "DecodeError",
    "RemoteError",
    "ForecastArgs",
    "LatLon",
    "LocationID",
    "Geometry",
    "TimelineListOptions",
    "WeatherSample",
    "StationSample",
    "decode_sample",
    "decode_samples",
]
