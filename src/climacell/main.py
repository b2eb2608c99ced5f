"""
Command-line demo for the ClimaCell client.

Requests a timeline for a point and prints its intervals.
"""

import sys
from datetime import datetime, timedelta
from typing import List, Optional

import pytz
import requests  # type: ignore

from .core import Config, setup_logger, LoggerContext, constants
from .api import ClimaCellAPI
from .exceptions import ClimaCellError
from .models import TimelineList, point_options


def format_timelines(timelines: TimelineList) -> List[str]:
    """Render timelines as one line per interval."""
    lines = []
    for timeline in timelines.timelines:
        lines.append(f"[{timeline.timestep}] {len(timeline.intervals)} intervals")
        for interval in timeline.intervals:
            values = ", ".join(f"{k}={v}" for k, v in sorted(interval.values.items()))
            lines.append(f"  {interval.start_time.isoformat()}  {values}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Fetch a ClimaCell weather timeline for a location"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to configuration file")
    parser.add_argument("--lat", type=float, default=35.816735, help="Latitude")
    parser.add_argument("--lon", type=float, default=-78.613375, help="Longitude")
    parser.add_argument(
        "--fields",
        type=str,
        default="temperature",
        help="Comma-separated field names"
    )
    parser.add_argument("--timestep", type=str, default="1d", help="Timeline timestep")
    parser.add_argument("--hours", type=int, default=48, help="Length of the time range")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")

    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
        config.validate()
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}")
        return 1

    logger = setup_logger(log_level=args.log_level)

    start = datetime.now(pytz.UTC)
    end = start + timedelta(hours=args.hours)
    options = point_options(
        lat=args.lat,
        lon=args.lon,
        fields=[f.strip() for f in args.fields.split(",") if f.strip()],
        timesteps=[args.timestep],
        start_time=start,
        end_time=end,
        units=constants.TIMELINE_UNITS[config.unit_system],
    )

    try:
        with ClimaCellAPI(
            api_key=config.api_key,
            base_url=config.base_url,
            timelines_url=config.timelines_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            logger=logger
        ) as api:
            with LoggerContext(logger, "timeline request"):
                timelines = api.timelines(options)
    except (ClimaCellError, requests.exceptions.RequestException) as e:
        print(f"Request failed: {e}")
        return 1

    for line in format_timelines(timelines):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
