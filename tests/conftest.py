"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def realtime_bytes(fixtures_dir):
    """Raw body of a realtime response."""
    return (fixtures_dir / "realtime.json").read_bytes()


@pytest.fixture(scope="session")
def hourly_bytes(fixtures_dir):
    """Raw body of an hourly forecast response."""
    return (fixtures_dir / "hourly.json").read_bytes()


@pytest.fixture(scope="session")
def timelines_data(fixtures_dir):
    """Decoded body of a timelines response."""
    with open(fixtures_dir / "timelines.json") as f:
        return json.load(f)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
