"""
Location models.

A weather request targets exactly one location, given either as a
latitude/longitude pair or as the ID of a location saved in the ClimaCell
account. Each form knows how to encode itself as query parameters.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Union


def format_coordinate(value: float) -> str:
    """
    Format a coordinate with the fewest digits that round-trip.

    Never uses exponent notation and drops trailing zeros
    (35.0 -> '35', 1e-07 -> '0.0000001').
    """
    return format(Decimal(repr(float(value))).normalize(), "f")


@dataclass(frozen=True)
class LatLon:
    """Location given as latitude and longitude coordinates."""

    lat: float
    lon: float

    def query_params(self) -> Dict[str, str]:
        return {
            "lat": format_coordinate(self.lat),
            "lon": format_coordinate(self.lon),
        }


@dataclass(frozen=True)
class LocationID:
    """Location given as an opaque location ID."""

    location_id: str

    def query_params(self) -> Dict[str, str]:
        return {"location_id": self.location_id}

    def __str__(self) -> str:
        return self.location_id


Location = Union[LatLon, LocationID]
