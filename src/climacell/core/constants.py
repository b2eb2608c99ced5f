"""
Application-wide constants for the ClimaCell client.

This module defines endpoint locations, request defaults and the code tables
the API uses for enumerated weather values.
"""

# API locations
DEFAULT_BASE_URL = "https://api.climacell.co/v3"
DEFAULT_TIMELINES_URL = "https://data.climacell.co/v4"

# Endpoint paths (relative to the base URL)
REALTIME_PATH = "/weather/realtime"
NOWCAST_PATH = "/weather/nowcast"
HOURLY_FORECAST_PATH = "/weather/forecast/hourly"
HISTORICAL_CLIMACELL_PATH = "/weather/historical/climacell"
HISTORICAL_STATION_PATH = "/weather/historical/station"
TIMELINES_PATH = "/timelines"

# Authentication
API_KEY_HEADER = "apikey"
API_KEY_ENV = "CLIMACELL_API_KEY"

# Transport defaults
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MAX_RETRIES = 0  # no retries unless the caller opts in

# Unit systems
UNIT_SYSTEM_SI = "si"
UNIT_SYSTEM_US = "us"
UNIT_SYSTEMS = (UNIT_SYSTEM_SI, UNIT_SYSTEM_US)

# The v4 timelines endpoint names the same unit systems differently
TIMELINE_UNITS = {
    UNIT_SYSTEM_SI: "metric",
    UNIT_SYSTEM_US: "imperial",
}

# Wire formats
DATE_FORMAT = "%Y-%m-%d"

# Moon phase codes
MOON_PHASES = {
    0: "New",
    1: "Waxing Crescent",
    2: "First Quarter",
    3: "Waxing Gibbous",
    4: "Full",
    5: "Waning Gibbous",
    6: "Third Quarter",
    7: "Waning Crescent",
}

# Weather condition codes
WEATHER_CODES = {
    0: "Unknown",
    1000: "Clear",
    1001: "Cloudy",
    1100: "Mostly Clear",
    1101: "Partly Cloudy",
    1102: "Mostly Cloudy",
    2000: "Fog",
    2100: "Light Fog",
    3000: "Light Wind",
    3001: "Wind",
    3002: "Strong Wind",
    4000: "Drizzle",
    4001: "Rain",
    4200: "Light Rain",
    4201: "Heavy Rain",
    5000: "Snow",
    5001: "Flurries",
    5100: "Light Snow",
    5101: "Heavy Snow",
    6000: "Freezing Drizzle",
    6001: "Freezing Rain",
    6200: "Light Freezing Rain",
    6201: "Heavy Freezing Rain",
    7000: "Ice Pellets",
    7101: "Heavy Ice Pellets",
    7102: "Light Ice Pellets",
    8000: "Thunderstorm",
}

# Road risk labels, lowest to highest
ROAD_RISK_LEVELS = (
    "low_risk",
    "moderate_risk",
    "mod_hi_risk",
    "high_risk",
    "extreme_risk",
)

# Fields that timeline intervals can report as daily aggregates
# (<field>Max, <field>Min, <field>Avg, <field>MaxTime, <field>MinTime)
AGGREGATE_FIELDS = (
    "temperature",
    "temperatureApparent",
    "dewPoint",
    "humidity",
    "windSpeed",
    "windDirection",
    "windGust",
    "pressureSurfaceLevel",
    "pressureSeaLevel",
    "precipitationIntensity",
    "precipitationProbability",
    "precipitationType",
    "solarGHI",
    "visibility",
    "cloudCover",
    "cloudBase",
    "cloudCeiling",
)
