"""
Tests for the command-line demo.
"""

from datetime import datetime
from types import MappingProxyType
from unittest.mock import MagicMock, patch

import pytest  # type: ignore
import pytz

from src.climacell import main as cli
from src.climacell.exceptions import RemoteError
from src.climacell.models import Interval, Timeline, TimelineList


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Run the CLI in a temporary directory with an API key set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    monkeypatch.delenv("CLIMACELL_UNIT_SYSTEM", raising=False)
    monkeypatch.setenv("CLIMACELL_API_KEY", "secret")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
    return monkeypatch


def make_timelines():
    start = datetime(2021, 3, 1, 11, tzinfo=pytz.UTC)
    interval = Interval(start_time=start, values=MappingProxyType({"temperature": 18.5}))
    return TimelineList(timelines=(Timeline("1d", start, start, (interval,)),))


class TestMain:
    """Test main()."""

    def test_prints_intervals(self, cli_env, capsys):
        api = MagicMock()
        api.__enter__.return_value = api
        api.__exit__.return_value = False
        api.timelines.return_value = make_timelines()

        with patch.object(cli, "ClimaCellAPI", return_value=api) as api_class:
            code = cli.main(["--lat", "35.5", "--lon", "-78.5", "--fields", "temperature"])

        assert code == 0
        assert api_class.call_args.kwargs["api_key"] == "secret"
        options = api.timelines.call_args.args[0]
        assert options.query_params()["location"] == "35.5,-78.5"
        assert options.timesteps == ("1d",)
        assert options.units == "metric"

        out = capsys.readouterr().out
        assert "[1d] 1 intervals" in out
        assert "temperature=18.5" in out

    def test_unit_system_from_environment(self, cli_env):
        cli_env.setenv("CLIMACELL_UNIT_SYSTEM", "us")
        api = MagicMock()
        api.__enter__.return_value = api
        api.__exit__.return_value = False
        api.timelines.return_value = make_timelines()

        with patch.object(cli, "ClimaCellAPI", return_value=api):
            assert cli.main([]) == 0

        assert api.timelines.call_args.args[0].query_params()["units"] == "imperial"

    def test_missing_api_key(self, cli_env, capsys):
        cli_env.delenv("CLIMACELL_API_KEY")

        assert cli.main([]) == 1
        assert "API key" in capsys.readouterr().out

    def test_remote_error(self, cli_env, capsys):
        api = MagicMock()
        api.__enter__.return_value = api
        api.__exit__.return_value = False
        api.timelines.side_effect = RemoteError(401, "unauthorized")

        with patch.object(cli, "ClimaCellAPI", return_value=api):
            assert cli.main([]) == 1

        assert "401" in capsys.readouterr().out

    def test_format_timelines(self):
        lines = cli.format_timelines(make_timelines())

        assert lines[0] == "[1d] 1 intervals"
        assert lines[1] == "  2021-03-01T11:00:00+00:00  temperature=18.5"
