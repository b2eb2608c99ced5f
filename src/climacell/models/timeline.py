"""
Timeline request options and response models for the v4 /timelines endpoint.

A timeline response groups data into one timeline per requested timestep
(e.g. "1h", "1d"); each timeline holds an ordered list of intervals with a
start time and the values of the requested fields.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..core.constants import AGGREGATE_FIELDS
from ..core.date_utils import DateUtils, ZERO_TIME
from ..exceptions import DecodeError
from .location import format_coordinate
from .values import FloatValue, TimeValue
from .weather import JSONInput, load_json


@dataclass(frozen=True)
class Geometry:
    """GeoJSON geometry. Point coordinates are in [lon, lat] order."""

    type: str
    coordinates: Any

    @classmethod
    def point(cls, lat: float, lon: float) -> "Geometry":
        return cls(type="Point", coordinates=(lon, lat))

    def to_query(self) -> str:
        """Encode as a 'lat,lon' string for points, compact GeoJSON otherwise."""
        if self.type == "Point" and len(self.coordinates) == 2:
            lon, lat = self.coordinates
            return f"{_coordinate_text(lat)},{_coordinate_text(lon)}"
        return json.dumps(
            {"type": self.type, "coordinates": self.coordinates},
            separators=(",", ":"),
        )


def _coordinate_text(value: Union[str, float]) -> str:
    if isinstance(value, str):
        return value
    return format_coordinate(value)


def _time_text(value: Union[str, datetime]) -> str:
    if isinstance(value, datetime):
        return DateUtils.format_rfc3339(value)
    return value


def _names(value: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    # A lone name is one entry, not a sequence of characters
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class TimelineListOptions:
    """Options for a /timelines request."""

    location: Geometry
    fields: Tuple[str, ...] = ()
    start_time: Optional[Union[str, datetime]] = None
    end_time: Optional[Union[str, datetime]] = None
    timesteps: Tuple[str, ...] = ()
    # "metric" or "imperial"; empty leaves the service default (metric)
    units: str = ""

    def __post_init__(self):
        object.__setattr__(self, "fields", _names(self.fields))
        object.__setattr__(self, "timesteps", _names(self.timesteps))

    def query_params(self) -> Dict[str, str]:
        params = {"location": self.location.to_query()}
        if self.fields:
            params["fields"] = ",".join(self.fields)
        if self.start_time:
            params["startTime"] = _time_text(self.start_time)
        if self.end_time:
            params["endTime"] = _time_text(self.end_time)
        if self.timesteps:
            params["timesteps"] = ",".join(self.timesteps)
        if self.units:
            params["units"] = self.units
        return params


@dataclass(frozen=True)
class FieldStatistics:
    """Daily aggregate of one field: extremes, average and when extremes occurred."""

    max: FloatValue = field(default_factory=FloatValue)
    min: FloatValue = field(default_factory=FloatValue)
    avg: FloatValue = field(default_factory=FloatValue)
    max_time: TimeValue = field(default_factory=TimeValue)
    min_time: TimeValue = field(default_factory=TimeValue)

    @classmethod
    def from_values(cls, name: str, values: Mapping[str, Any]) -> "FieldStatistics":
        def number(suffix: str) -> FloatValue:
            key = name + suffix
            raw = values.get(key)
            if raw is None:
                return FloatValue()
            return FloatValue(value=FloatValue.decode_scalar(key, raw))

        def moment(suffix: str) -> TimeValue:
            key = name + suffix
            raw = values.get(key)
            if raw is None:
                return TimeValue()
            return TimeValue(value=TimeValue.decode_scalar(key, raw))

        return cls(
            max=number("Max"),
            min=number("Min"),
            avg=number("Avg"),
            max_time=moment("MaxTime"),
            min_time=moment("MinTime"),
        )


def _decode_time(data: Dict[str, Any], name: str) -> datetime:
    raw = data.get(name)
    if raw is None:
        return ZERO_TIME
    if not isinstance(raw, str):
        raise DecodeError(f"expected a timestamp string, got {raw!r}", field=name, value=raw)
    try:
        return DateUtils.parse_time_or_date(raw)
    except ValueError as e:
        raise DecodeError(str(e), field=name, value=raw)


def _require(data: Any, kind: type, what: str, name: Optional[str] = None) -> Any:
    if not isinstance(data, kind):
        raise DecodeError(f"expected {what}, got {type(data).__name__}", field=name, value=data)
    return data


@dataclass(frozen=True)
class Interval:
    start_time: datetime
    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def get_value(self, name: str) -> Tuple[Any, bool]:
        """Return the raw value of a field and whether it was present."""
        value = self.values.get(name)
        return value, value is not None

    def statistics(self, name: str) -> FieldStatistics:
        """
        Aggregates for `name` (e.g. 'temperature' reads temperatureMax, ...).

        Raises:
            ValueError: If the API reports no aggregates for `name`
        """
        if name not in AGGREGATE_FIELDS:
            raise ValueError(f"No daily aggregates for field {name!r}")
        return FieldStatistics.from_values(name, self.values)

    @classmethod
    def from_json(cls, data: Any) -> "Interval":
        data = _require(data, dict, "an interval object")
        values = _require(data.get("values") or {}, dict, "an object", "values")
        return cls(
            start_time=_decode_time(data, "startTime"),
            values=MappingProxyType(dict(values)),
        )


@dataclass(frozen=True)
class Timeline:
    timestep: str
    start_time: datetime
    end_time: datetime
    intervals: Tuple[Interval, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "Timeline":
        data = _require(data, dict, "a timeline object")
        timestep = data.get("timestep") or ""
        _require(timestep, str, "a string", "timestep")
        intervals = _require(data.get("intervals") or [], list, "a list", "intervals")
        return cls(
            timestep=timestep,
            start_time=_decode_time(data, "startTime"),
            end_time=_decode_time(data, "endTime"),
            intervals=tuple(Interval.from_json(item) for item in intervals),
        )


@dataclass(frozen=True)
class TimelineList:
    timelines: Tuple[Timeline, ...] = ()

    def by_timestep(self, timestep: str) -> Optional[Timeline]:
        for timeline in self.timelines:
            if timeline.timestep == timestep:
                return timeline
        return None

    @classmethod
    def from_json(cls, data: Any) -> "TimelineList":
        """
        Decode a timelines response.

        Accepts both {"data": {"timelines": [...]}} and {"data": [...]}.
        """
        data = _require(data, dict, "a response object")
        body = data.get("data") or []
        if isinstance(body, dict):
            body = body.get("timelines") or []
        items: Sequence[Any] = _require(body, list, "a list of timelines", "data")
        return cls(timelines=tuple(Timeline.from_json(item) for item in items))


def decode_timelines(payload: JSONInput) -> TimelineList:
    """Decode a /timelines response body."""
    return TimelineList.from_json(load_json(payload))


def point_options(
    lat: float,
    lon: float,
    fields: Sequence[str],
    timesteps: Sequence[str],
    start_time: Optional[Union[str, datetime]] = None,
    end_time: Optional[Union[str, datetime]] = None,
    units: str = "",
) -> TimelineListOptions:
    """Build timeline options for a single point."""
    return TimelineListOptions(
        location=Geometry.point(lat, lon),
        fields=fields,
        start_time=start_time,
        end_time=end_time,
        timesteps=timesteps,
        units=units,
    )


__all__ = [
    "Geometry",
    "TimelineListOptions",
    "FieldStatistics",
    "Interval",
    "Timeline",
    "TimelineList",
    "decode_timelines",
    "point_options",
]
