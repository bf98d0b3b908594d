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


@pytest.fixture
def position_response(fixtures_dir):
    """Point query response spanning a UTC midnight."""
    with open(fixtures_dir / "position_response.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def collections_response(fixtures_dir):
    """Collection listing response."""
    with open(fixtures_dir / "collections_response.json", encoding="utf-8") as f:
        return json.load(f)


def make_area_response(n_x=5, n_y=4, n_t=2, parameter="Temperature"):
    """
    Area response whose value at (t, y, x) is t*100 + y*10 + x.

    x axis: 20, 21, ... ; y axis: 60, 61, ...
    """
    return {
        "type": "Coverage",
        "domain": {
            "type": "Domain",
            "axes": {
                "x": {"values": [20.0 + i for i in range(n_x)]},
                "y": {"values": [60.0 + j for j in range(n_y)]},
                "t": {"values": [f"2025-01-01T{h:02d}:00:00Z" for h in range(n_t)]},
            },
        },
        "parameters": {parameter: {"unit": {"symbol": "°C"}}},
        "ranges": {
            parameter: {
                "values": [
                    float(t * 100 + y * 10 + x)
                    for t in range(n_t)
                    for y in range(n_y)
                    for x in range(n_x)
                ]
            }
        },
    }


@pytest.fixture
def area_response():
    """5 x 4 grid over 2 time steps."""
    return make_area_response()


@pytest.fixture
def area_factory():
    """Factory for area responses of other shapes."""
    return make_area_response


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
