"""
Tests for the HTTP client and the endpoint operations.

The requests session is replaced with a mock, so no network access is needed.
"""

import json
import unittest
from unittest.mock import Mock

import requests  # type: ignore

from src.climacell.api import ClimaCellAPI
from src.climacell.exceptions import DecodeError, RemoteError
from src.climacell.models import ForecastArgs, LatLon, StationSample, point_options


def make_response(body, status_code=200, reason="OK"):
    """Build a mock response with a JSON (or raw) body."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(body, (bytes, str)):
        content = body.encode() if isinstance(body, str) else body
    else:
        content = json.dumps(body).encode()
    response.content = content
    response.text = content.decode()
    return response


class TestWeatherEndpoints(unittest.TestCase):
    """Test the /weather/* operations."""

    def setUp(self):
        """Set up test fixtures."""
        self.session = Mock()
        self.api = ClimaCellAPI(
            api_key="secret",
            base_url="https://api.example.com/v3/",
            session=self.session,
            logger=Mock()
        )
        self.args = ForecastArgs(
            location=LatLon(35.816735, -78.613375),
            fields=["temperature", "humidity"],
            unit_system="us",
        )

    def test_realtime_request(self):
        self.session.request.return_value = make_response({
            "temperature": {"value": 72.5, "units": "F"},
            "humidity": None,
        })

        sample = self.api.realtime(self.args)

        self.session.request.assert_called_once()
        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "GET")
        self.assertEqual(kwargs["url"], "https://api.example.com/v3/weather/realtime")
        self.assertEqual(kwargs["params"], {
            "lat": "35.816735",
            "lon": "-78.613375",
            "fields": "temperature,humidity",
            "unit_system": "us",
        })
        self.assertEqual(kwargs["headers"]["apikey"], "secret")
        self.assertEqual(kwargs["timeout"], 30)

        self.assertEqual(sample.weather.temp.get_value(), (72.5, True))
        self.assertEqual(sample.weather.humidity.get_value(), (0.0, False))

    def test_list_endpoints(self):
        body = [
            {"temperature": {"value": 1.0}, "observation_time": {"value": "2020-03-02T14:00:00Z"}},
            {"temperature": {"value": 2.0}, "observation_time": {"value": "2020-03-02T15:00:00Z"}},
        ]
        cases = [
            (self.api.nowcast, "/weather/nowcast"),
            (self.api.hourly_forecast, "/weather/forecast/hourly"),
            (self.api.historical_climacell, "/weather/historical/climacell"),
        ]

        for operation, path in cases:
            with self.subTest(path=path):
                self.session.request.return_value = make_response(body)

                samples = operation(self.args)

                self.assertEqual(
                    self.session.request.call_args.kwargs["url"],
                    "https://api.example.com/v3" + path
                )
                self.assertEqual([s.weather.temp.get_value()[0] for s in samples], [1.0, 2.0])

    def test_historical_station(self):
        self.session.request.return_value = make_response([{"temperature": {"value": 4.0}}])

        samples = self.api.historical_station(self.args)

        self.assertEqual(
            self.session.request.call_args.kwargs["url"],
            "https://api.example.com/v3/weather/historical/station"
        )
        self.assertIsInstance(samples[0], StationSample)

    def test_remote_error_v3_payload(self):
        self.session.request.return_value = make_response(
            {"statusCode": 400, "errorCode": "BadRequest", "message": "lat is required"},
            status_code=400,
            reason="Bad Request"
        )

        with self.assertRaises(RemoteError) as ctx:
            self.api.realtime(ForecastArgs(fields=["temperature"]))

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.error_code, "BadRequest")
        self.assertEqual(ctx.exception.message, "lat is required")

    def test_remote_error_unparseable_body(self):
        self.session.request.return_value = make_response(
            "<html>Bad Gateway</html>", status_code=502, reason="Bad Gateway"
        )

        with self.assertRaises(RemoteError) as ctx:
            self.api.nowcast(self.args)

        self.assertEqual(ctx.exception.status_code, 502)
        self.assertEqual(ctx.exception.message, "Bad Gateway")
        self.assertIsNone(ctx.exception.error_code)

    def test_remote_error_is_not_retried(self):
        self.session.request.return_value = make_response({}, status_code=503, reason="Unavailable")

        with self.assertRaises(RemoteError):
            self.api.hourly_forecast(self.args)

        self.assertEqual(self.session.request.call_count, 1)

    def test_transport_error_surfaces_unchanged(self):
        error = requests.exceptions.ConnectionError("connection refused")
        self.session.request.side_effect = error

        with self.assertRaises(requests.exceptions.ConnectionError) as ctx:
            self.api.realtime(self.args)

        self.assertIs(ctx.exception, error)

    def test_decode_error_names_endpoint(self):
        self.session.request.return_value = make_response(
            {"temperature": {"value": "hot"}}
        )

        with self.assertRaises(DecodeError) as ctx:
            self.api.realtime(self.args)

        self.assertEqual(ctx.exception.field, "temperature")
        self.assertEqual(ctx.exception.endpoint, "/weather/realtime")
        self.assertIn("/weather/realtime", str(ctx.exception))

    def test_invalid_json_body(self):
        self.session.request.return_value = make_response(b"not json")

        with self.assertRaises(DecodeError) as ctx:
            self.api.nowcast(self.args)

        self.assertEqual(ctx.exception.endpoint, "/weather/nowcast")

    def test_context_manager_closes_session(self):
        with self.api as api:
            self.assertIs(api, self.api)

        self.session.close.assert_called_once()


class TestTimelinesEndpoint(unittest.TestCase):
    """Test the v4 /timelines operation."""

    def setUp(self):
        """Set up test fixtures."""
        self.session = Mock()
        self.api = ClimaCellAPI(
            api_key="secret",
            timelines_url="https://data.example.com/v4",
            session=self.session,
            logger=Mock()
        )

    def test_timelines(self):
        self.session.request.return_value = make_response({
            "data": {"timelines": [{
                "timestep": "1d",
                "startTime": "2021-03-01T11:00:00Z",
                "endTime": "2021-03-02T11:00:00Z",
                "intervals": [{"startTime": "2021-03-01T11:00:00Z", "values": {"temperature": 18.5}}],
            }]}
        })

        result = self.api.timelines(point_options(35.5, -78.5, ["temperature"], ["1d"]))

        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(kwargs["url"], "https://data.example.com/v4/timelines")
        self.assertEqual(kwargs["params"], {
            "location": "35.5,-78.5",
            "fields": "temperature",
            "timesteps": "1d",
        })
        self.assertEqual(result.timelines[0].intervals[0].get_value("temperature"), (18.5, True))

    def test_timelines_decode_error(self):
        self.session.request.return_value = make_response({
            "data": {"timelines": [{"timestep": "1d", "startTime": "tomorrow"}]}
        })

        with self.assertRaises(DecodeError) as ctx:
            self.api.timelines(point_options(35.5, -78.5, ["temperature"], ["1d"]))

        self.assertEqual(ctx.exception.endpoint, "/timelines")
        self.assertEqual(ctx.exception.field, "startTime")

    def test_v4_error_payload(self):
        self.session.request.return_value = make_response(
            {"code": 401001, "type": "Invalid Auth", "message": "The method requires authentication"},
            status_code=401,
            reason="Unauthorized"
        )

        with self.assertRaises(RemoteError) as ctx:
            self.api.timelines(point_options(35.5, -78.5, ["temperature"], ["1d"]))

        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.error_code, "Invalid Auth")
        self.assertEqual(ctx.exception.message, "The method requires authentication")


class TestSessionSetup(unittest.TestCase):
    """Test the default session."""

    def test_default_session_has_no_retries(self):
        api = ClimaCellAPI(api_key="secret")
        try:
            adapter = api.session.get_adapter("https://api.climacell.co/v3")
            self.assertEqual(adapter.max_retries.total, 0)
        finally:
            api.close()

    def test_retries_are_opt_in(self):
        api = ClimaCellAPI(api_key="secret", max_retries=2)
        try:
            adapter = api.session.get_adapter("https://api.climacell.co/v3")
            self.assertEqual(adapter.max_retries.total, 2)
        finally:
            api.close()


if __name__ == "__main__":
    unittest.main()
