"""Pytest fixtures for action provider tests."""

import pytest

from agent_actions.providers.dexscreener import DexScreenerActionProvider
from agent_actions.providers.weather import WeatherActionProvider
from tests.fixtures.stub_api import StubApi

SETTINGS_ENV_VARS = [
    "LOG_LEVEL",
    "LOG_JSON",
    "HTTP_TIMEOUT",
    "DEXSCREENER_BASE_URL",
    "WEATHER_BASE_URL",
    "WEATHER_API_KEY",
    "NETWORK_ID",
    "NETWORK_PROTOCOL_FAMILY",
    "NETWORK_CHAIN_ID",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def stub_api():
    """In-process HTTP stub shared by a test's providers."""
    return StubApi()


@pytest.fixture
def dexscreener(stub_api):
    """DexScreener provider talking to the stub."""
    return DexScreenerActionProvider(transport=stub_api.transport)


@pytest.fixture
def weather(stub_api):
    """Weather provider talking to the stub."""
    return WeatherActionProvider(api_key="test-weather-key", transport=stub_api.transport)
