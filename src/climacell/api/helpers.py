"""
Helper functions for reading enumerated sample values.

Weather codes and moon phases arrive as strings holding numeric codes; these
functions map them to the labels the API documents. Road risk arrives as a
label and is ranked by severity.
"""

from typing import Optional

from ..core.constants import MOON_PHASES, ROAD_RISK_LEVELS, WEATHER_CODES
from ..models.values import StringValue


def _code(value: StringValue) -> Optional[int]:
    raw, ok = value.get_value()
    if not ok:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def describe_weather_code(value: StringValue) -> Optional[str]:
    """
    Label for a sample's weather code (e.g. '1001' -> 'Cloudy').

    Returns:
        Label, or None if the code is absent or unknown
    """
    code = _code(value)
    if code is None:
        return None
    return WEATHER_CODES.get(code)


def describe_moon_phase(value: StringValue) -> Optional[str]:
    """
    Label for a sample's moon phase (e.g. '4' -> 'Full').

    Returns:
        Label, or None if the phase is absent or unknown
    """
    code = _code(value)
    if code is None:
        return None
    return MOON_PHASES.get(code)


def road_risk_rank(value: StringValue) -> Optional[int]:
    """
    Severity of a road risk label, from 0 ('low_risk') to 4 ('extreme_risk').

    Returns:
        Rank, or None if the label is absent or unknown
    """
    label, ok = value.get_value()
    if not ok or label not in ROAD_RISK_LEVELS:
        return None
    return ROAD_RISK_LEVELS.index(label)
