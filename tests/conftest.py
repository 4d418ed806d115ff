"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- en_config: Bundled English holiday configuration
- resolver: HolidayResolver built from en_config
- make_config: Factory for configurations with custom names
- test_client: FastAPI TestClient for API integration tests
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from colholidays.core.models import HolidayConfig
from colholidays.core.resolver import HolidayResolver, clear_resolver_cache
from colholidays.core.storage import load_holiday_config
from colholidays.main import app


@pytest.fixture(scope="session")
def en_config():
    """The bundled English configuration (date format %d/%m/%Y)."""
    return load_holiday_config("en")


@pytest.fixture
def resolver(en_config):
    """Resolver for the 20 Colombian rules with English names."""
    return HolidayResolver(en_config)


@pytest.fixture
def make_config():
    """
    Build a ready HolidayConfig from a list of names.

    Returns:
        Callable taking names and an optional date format
    """

    def _make(names, date_format="%d/%m/%Y"):
        return HolidayConfig(date_format=date_format, holiday_names=list(names))

    return _make


@pytest.fixture(scope="function")
def test_client():
    """
    Create FastAPI TestClient with a fresh resolver cache.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    clear_resolver_cache()
    with TestClient(app) as client:
        yield client

    clear_resolver_cache()
