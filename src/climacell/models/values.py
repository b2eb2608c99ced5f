"""
Optional value wrappers for fields of ClimaCell weather samples.

Every field on a sample is an object shaped ``{"value": ..., "units": ...}``.
A field is absent when it was not requested, or when the API had no data for
it and returned null. The wrappers keep that distinction explicit:

    temp, ok = sample.weather.temp.get_value()
    if not ok:
        ...  # handle a missing temperature
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Optional, Tuple

from ..core.date_utils import DateUtils, ZERO_TIME
from ..exceptions import DecodeError


@dataclass(frozen=True)
class OptionalValue:
    """Base for a field that may or may not hold a value."""

    value: Optional[Any] = None
    # Units, if present, indicates the unit of measure for this value.
    units: Optional[str] = None

    zero: ClassVar[Any] = None
    kind: ClassVar[str] = "value"

    @property
    def is_present(self) -> bool:
        return self.value is not None

    def get_value(self) -> Tuple[Any, bool]:
        """
        Return this field's value and True if present, or the zero value of
        its kind and False if absent.
        """
        if self.value is None:
            return self.zero, False
        return self.value, True

    @classmethod
    def decode_scalar(cls, field: str, raw: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def from_json(cls, field: str, raw: Any) -> "OptionalValue":
        """
        Decode a field from its JSON object.

        Args:
            field: Wire name of the field, used in error messages
            raw: Decoded JSON for the field (None if missing or null)

        Returns:
            Wrapper instance, absent if raw or its "value" is null

        Raises:
            DecodeError: If the JSON has the wrong shape or scalar kind
        """
        if raw is None:
            return cls()

        if not isinstance(raw, dict):
            raise DecodeError(
                f"expected an object with a 'value' key, got {raw!r}",
                field=field,
                value=raw,
            )

        units = raw.get("units")
        if units is not None and not isinstance(units, str):
            raise DecodeError(f"expected string units, got {units!r}", field=field, value=units)

        value = raw.get("value")
        if value is None:
            return cls(units=units)

        return cls(value=cls.decode_scalar(field, value), units=units)


@dataclass(frozen=True)
class StringValue(OptionalValue):
    """A string field, such as a precipitation type or a pollutant name."""

    value: Optional[str] = None

    zero: ClassVar[str] = ""
    kind: ClassVar[str] = "string"

    @classmethod
    def decode_scalar(cls, field: str, raw: Any) -> str:
        if not isinstance(raw, str):
            raise DecodeError(f"expected a string, got {raw!r}", field=field, value=raw)
        return raw


@dataclass(frozen=True)
class FloatValue(OptionalValue):
    """A floating-point field, such as a temperature."""

    value: Optional[float] = None

    zero: ClassVar[float] = 0.0
    kind: ClassVar[str] = "float"

    @classmethod
    def decode_scalar(cls, field: str, raw: Any) -> float:
        # bool is an int subclass but never a valid number on the wire
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise DecodeError(f"expected a number, got {raw!r}", field=field, value=raw)
        return float(raw)


@dataclass(frozen=True)
class IntValue(OptionalValue):
    """An integer field, such as an air quality index."""

    value: Optional[int] = None

    zero: ClassVar[int] = 0
    kind: ClassVar[str] = "integer"

    @classmethod
    def decode_scalar(cls, field: str, raw: Any) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise DecodeError(f"expected an integer, got {raw!r}", field=field, value=raw)
        return raw


@dataclass(frozen=True)
class TimeValue(OptionalValue):
    """A timestamp field, such as the sunrise time."""

    value: Optional[datetime] = None

    zero: ClassVar[datetime] = ZERO_TIME
    kind: ClassVar[str] = "timestamp"

    @classmethod
    def decode_scalar(cls, field: str, raw: Any) -> datetime:
        if not isinstance(raw, str):
            raise DecodeError(f"expected a timestamp string, got {raw!r}", field=field, value=raw)
        try:
            return DateUtils.parse_time_or_date(raw)
        except ValueError as e:
            raise DecodeError(str(e), field=field, value=raw)


@dataclass(frozen=True)
class DateValue:
    """
    Anchor timestamp of a sample, in RFC3339 or YYYY-MM-DD layout.

    Unlike TimeValue this should always hold a real point in time. The API is
    allowed to send null for it, in which case decoding still succeeds: value
    stays at ZERO_TIME and was_null is set so callers can detect it.
    """

    value: datetime = ZERO_TIME
    was_null: bool = False

    @property
    def is_zero(self) -> bool:
        return self.value == ZERO_TIME

    @classmethod
    def from_json(cls, field: str, raw: Any) -> "DateValue":
        if raw is None:
            return cls(was_null=True)

        if not isinstance(raw, dict):
            raise DecodeError(
                f"expected an object with a 'value' key, got {raw!r}",
                field=field,
                value=raw,
            )

        inner = raw.get("value")
        if inner is None:
            return cls(was_null=True)

        if not isinstance(inner, str):
            raise DecodeError(f"expected a date string, got {inner!r}", field=field, value=inner)

        try:
            return cls(value=DateUtils.parse_time_or_date(inner))
        except ValueError as e:
            raise DecodeError(str(e), field=field, value=inner)


def get_value(wrapper: Optional[OptionalValue]) -> Tuple[Any, bool]:
    """
    Read a wrapper that may itself be missing.

    A None wrapper has no kind, so its zero value is None.
    """
    if wrapper is None:
        return None, False
    return wrapper.get_value()
