"""
Query parameters for weather data requests.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Tuple

from ..core.date_utils import DateUtils
from .location import Location


@dataclass(frozen=True)
class ForecastArgs:
    """
    Options for the /weather/* endpoints, converted to query parameters.

    Attributes:
        location: Location to request weather data for. It is the one option
            the API requires; it is not checked here, so a request without it
            fails remotely with a 400.
        start: If set, the start of the requested time range ("start_time").
        end: If set, the end of the requested time range ("end_time").
        timestep: If positive, the timestep in minutes between samples
            ("timestep"). Only accepted by the nowcast and historical
            ClimaCell endpoints.
        unit_system: "si" or "us" ("unit_system"). The API defaults to SI.
        fields: Names of the fields to return on each sample ("fields").
    """

    location: Optional[Location] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    timestep: int = 0
    unit_system: str = ""
    fields: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if isinstance(self.fields, str):
            object.__setattr__(self, "fields", (self.fields,))
        elif not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    def query_params(self) -> Dict[str, str]:
        """
        Build the query parameters for a request, in a fixed order.

        Returns:
            Mapping of parameter name to value; unset options are left out
        """
        params: Dict[str, str] = {}
        if self.location is not None:
            params.update(self.location.query_params())

        if self.start is not None:
            params["start_time"] = DateUtils.format_rfc3339(self.start)
        if self.end is not None:
            params["end_time"] = DateUtils.format_rfc3339(self.end)
        if self.timestep > 0:
            params["timestep"] = str(self.timestep)
        if self.unit_system:
            params["unit_system"] = self.unit_system
        if self.fields:
            params["fields"] = ",".join(self.fields)

        return params

