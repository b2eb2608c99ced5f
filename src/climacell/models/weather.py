"""
Weather sample models and their JSON decoding.

A sample returned by the /weather/* endpoints is one flat JSON object. Its
fields are grouped here into weather, air quality, road risk and fire index
sections, each of which is always present on a sample: fields that were not
requested, or that the API returned as null, are absent values.
"""

import json
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from ..exceptions import DecodeError
from .location import LatLon, Location, LocationID
from .values import DateValue, FloatValue, IntValue, StringValue, TimeValue


JSONInput = Union[bytes, str, Dict[str, Any], List[Any]]

G = TypeVar("G")


def _wire(name: str, wrapper: type):
    """Declare a group field decoded from the JSON key `name`."""
    return field(default_factory=wrapper, metadata={"json": name, "wrapper": wrapper})


def _decode_group(cls: Type[G], data: Dict[str, Any]) -> G:
    values = {}
    for f in fields(cls):
        name = f.metadata["json"]
        values[f.name] = f.metadata["wrapper"].from_json(name, data.get(name))
    return cls(**values)


@dataclass(frozen=True)
class WeatherFields:
    """Core weather conditions of a sample."""

    # The temperature for this weather sample.
    temp: FloatValue = _wire("temperature", FloatValue)
    # The temperature it feels like, based on wind chill and heat index.
    feels_like: FloatValue = _wire("temperatureApparent", FloatValue)
    dew_point: FloatValue = _wire("dewPoint", FloatValue)
    # Percent relative humidity.
    humidity: FloatValue = _wire("humidity", FloatValue)
    wind_speed: FloatValue = _wire("windSpeed", FloatValue)
    # Direction the wind comes from in degrees, 0 being exactly north.
    wind_direction: FloatValue = _wire("windDirection", FloatValue)
    wind_gust: FloatValue = _wire("windGust", FloatValue)
    # Air pressure at surface level.
    baro_surface_pressure: FloatValue = _wire("pressureSurfaceLevel", FloatValue)
    # Air pressure at mean sea level.
    baro_sea_pressure: FloatValue = _wire("pressureSeaLevel", FloatValue)
    precipitation: FloatValue = _wire("precipitationIntensity", FloatValue)
    precipitation_type: StringValue = _wire("precipitationType", StringValue)
    # Percent probability of precipitation, for forecast samples.
    precipitation_probability: FloatValue = _wire("precipitationProbability", FloatValue)
    sunrise: TimeValue = _wire("sunriseTime", TimeValue)
    sunset: TimeValue = _wire("sunsetTime", TimeValue)
    # Shortwave radiation received by a surface horizontal to the ground.
    surface_shortwave_radiation: FloatValue = _wire("solarGHI", FloatValue)
    visibility: FloatValue = _wire("visibility", FloatValue)
    # Percent of the sky obscured by clouds.
    cloud_cover: FloatValue = _wire("cloudCover", FloatValue)
    cloud_base: FloatValue = _wire("cloudBase", FloatValue)
    cloud_ceiling: FloatValue = _wire("cloudCeiling", FloatValue)
    # See constants.MOON_PHASES.
    moon_phase: StringValue = _wire("moonPhase", StringValue)
    # See constants.WEATHER_CODES.
    weather_code: StringValue = _wire("weatherCode", StringValue)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "WeatherFields":
        return _decode_group(cls, data)


@dataclass(frozen=True)
class AirQualityFields:
    """Pollutant concentrations and air quality indices of a sample."""

    pm25: FloatValue = _wire("pm25", FloatValue)
    pm10: FloatValue = _wire("pm10", FloatValue)
    o3: FloatValue = _wire("o3", FloatValue)
    no2: FloatValue = _wire("no2", FloatValue)
    co: FloatValue = _wire("co", FloatValue)
    so2: FloatValue = _wire("so2", FloatValue)
    # United States Environmental Protection Agency standard
    epa_aqi: IntValue = _wire("epa_aqi", IntValue)
    epa_primary_pollutant: StringValue = _wire("epa_primary_pollutant", StringValue)
    epa_health_concern: StringValue = _wire("epa_health_concern", StringValue)
    # China Ministry of Ecology and Environment standard
    china_aqi: IntValue = _wire("china_aqi", IntValue)
    china_primary_pollutant: StringValue = _wire("china_primary_pollutant", StringValue)
    china_health_concern: StringValue = _wire("china_health_concern", StringValue)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "AirQualityFields":
        return _decode_group(cls, data)


@dataclass(frozen=True)
class FireIndexFields:
    # Fire risk on a scale of 1-100.
    fire_index: FloatValue = _wire("fire_index", FloatValue)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "FireIndexFields":
        return _decode_group(cls, data)


@dataclass(frozen=True)
class RoadRiskFields:
    """Road conditions, only available for EU and US locations."""

    # One of constants.ROAD_RISK_LEVELS.
    road_risk: StringValue = _wire("road_risk", StringValue)
    road_risk_score: StringValue = _wire("road_risk_score", StringValue)
    # Confidence of the road risk prediction, 1-100.
    road_risk_confidence: IntValue = _wire("road_risk_confidence", IntValue)
    # Main weather conditions impacting the road risk score.
    road_risk_conditions: StringValue = _wire("road_risk_conditions", StringValue)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RoadRiskFields":
        return _decode_group(cls, data)


def _decode_coordinate(data: Dict[str, Any], name: str) -> Optional[float]:
    raw = data.get(name)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"expected a number, got {raw!r}", field=name, value=raw)
    return float(raw)


def _decode_location_id(data: Dict[str, Any]) -> Optional[str]:
    raw = data.get("location_id")
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DecodeError(f"expected a string, got {raw!r}", field="location_id", value=raw)
    return raw


def _decode_anchor(data: Dict[str, Any]) -> DateValue:
    if "observation_time" not in data:
        return DateValue()
    return DateValue.from_json("observation_time", data["observation_time"])


def _echoed_location(
    lat: Optional[float], lon: Optional[float], location_id: Optional[str]
) -> Optional[Location]:
    if location_id is not None:
        return LocationID(location_id)
    if lat is not None and lon is not None:
        return LatLon(lat, lon)
    return None


@dataclass(frozen=True)
class StationSample:
    """
    A weather sample measured by a weather station.

    Returned by /weather/historical/station, which has no air quality, road
    risk or fire index data.
    """

    lat: Optional[float] = None
    lon: Optional[float] = None
    location_id: Optional[str] = None
    # The time this sample is from.
    observation_time: DateValue = field(default_factory=DateValue)
    weather: WeatherFields = field(default_factory=WeatherFields)

    @property
    def location(self) -> Optional[Location]:
        """The location this sample was requested for, if the API echoed it."""
        return _echoed_location(self.lat, self.lon, self.location_id)

    @classmethod
    def from_json(cls, data: Any) -> "StationSample":
        data = _require_object(data)
        return cls(
            lat=_decode_coordinate(data, "lat"),
            lon=_decode_coordinate(data, "lon"),
            location_id=_decode_location_id(data),
            observation_time=_decode_anchor(data),
            weather=WeatherFields.from_json(data),
        )


@dataclass(frozen=True)
class WeatherSample:
    """
    A weather, air quality, road risk and fire index sample for one location
    and time, as returned by the realtime, nowcast, hourly forecast and
    historical ClimaCell endpoints.

    Station samples carry only the `weather` group and are a separate type.
    """

    lat: Optional[float] = None
    lon: Optional[float] = None
    location_id: Optional[str] = None
    observation_time: DateValue = field(default_factory=DateValue)
    weather: WeatherFields = field(default_factory=WeatherFields)
    air_quality: AirQualityFields = field(default_factory=AirQualityFields)
    road_risk: RoadRiskFields = field(default_factory=RoadRiskFields)
    fire_index: FireIndexFields = field(default_factory=FireIndexFields)

    @property
    def location(self) -> Optional[Location]:
        """The location this sample was requested for, if the API echoed it."""
        return _echoed_location(self.lat, self.lon, self.location_id)

    @classmethod
    def from_json(cls, data: Any) -> "WeatherSample":
        data = _require_object(data)
        return cls(
            lat=_decode_coordinate(data, "lat"),
            lon=_decode_coordinate(data, "lon"),
            location_id=_decode_location_id(data),
            observation_time=_decode_anchor(data),
            weather=WeatherFields.from_json(data),
            air_quality=AirQualityFields.from_json(data),
            road_risk=RoadRiskFields.from_json(data),
            fire_index=FireIndexFields.from_json(data),
        )


# Endpoint-specific names; all share the full sample shape.
RealTime = WeatherSample
NowcastForecast = WeatherSample
HourlyForecast = WeatherSample
HistoricalClimaCell = WeatherSample
HistoricalStation = StationSample


def load_json(payload: JSONInput) -> Any:
    """
    Parse raw response bytes or text; already-decoded JSON passes through.

    Raises:
        DecodeError: If the payload is not valid JSON
    """
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            return json.loads(payload)
        except ValueError as e:
            raise DecodeError(f"invalid JSON: {e}")
    return payload


def _require_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"expected a sample object, got {type(data).__name__}", value=data)
    return data


def _require_list(data: Any) -> List[Any]:
    if not isinstance(data, list):
        raise DecodeError(f"expected a list of samples, got {type(data).__name__}", value=data)
    return data


def decode_sample(payload: JSONInput) -> WeatherSample:
    """Decode a single weather sample."""
    return WeatherSample.from_json(load_json(payload))


def decode_samples(payload: JSONInput) -> List[WeatherSample]:
    """Decode a list of weather samples, keeping their order."""
    return [WeatherSample.from_json(item) for item in _require_list(load_json(payload))]


def decode_station_samples(payload: JSONInput) -> List[StationSample]:
    """Decode a list of weather station samples, keeping their order."""
    return [StationSample.from_json(item) for item in _require_list(load_json(payload))]
