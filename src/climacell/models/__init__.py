"""
Data models for the ClimaCell client.

Contains request options, optional value wrappers, weather samples and
timelines.
"""

from .values import (
    OptionalValue,
    StringValue,
    FloatValue,
    IntValue,
    TimeValue,
    DateValue,
    get_value,
)
from .location import LatLon, LocationID, Location
from .forecast_args import ForecastArgs
from .weather import (
    WeatherFields,
    AirQualityFields,
    FireIndexFields,
    RoadRiskFields,
    StationSample,
    WeatherSample,
    RealTime,
    NowcastForecast,
    HourlyForecast,
    HistoricalClimaCell,
    HistoricalStation,
    decode_sample,
    decode_samples,
    decode_station_samples,
)
from .timeline import (
    Geometry,
    TimelineListOptions,
    FieldStatistics,
    Interval,
    Timeline,
    TimelineList,
    decode_timelines,
    point_options,
)

__all__ = [
    "OptionalValue",
    "StringValue",
    "FloatValue",
    "IntValue",
    "TimeValue",
    "DateValue",
    "get_value",
    "LatLon",
    "LocationID",
    "Location",
    "ForecastArgs",
    "WeatherFields",
    "AirQualityFields",
    "FireIndexFields",
    "RoadRiskFields",
    "StationSample",
    "WeatherSample",
    "RealTime",
    "NowcastForecast",
    "HourlyForecast",
    "HistoricalClimaCell",
    "HistoricalStation",
    "decode_sample",
    "decode_samples",
    "decode_station_samples",
    "Geometry",
    "TimelineListOptions",
    "FieldStatistics",
    "Interval",
    "Timeline",
    "TimelineList",
    "decode_timelines",
    "point_options",
]
