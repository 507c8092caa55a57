"""Tests for settings, logging setup and agent sessions."""

import json
import logging
from contextlib import contextmanager

import pytest

from agent_actions.config import Settings
from agent_actions.errors import ConfigurationError
from agent_actions.logging_config import (
    ActionInvocationLogger,
    ActionJsonFormatter,
    setup_logging,
)
from agent_actions.network import Network
from agent_actions.session import AgentSession, build_providers
from tests.fixtures.dexscreener_responses import TOP_BOOST_SINGLE
from tests.fixtures.weather_responses import CURRENT_WEATHER


@contextmanager
def preserved_root_logger():
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield root
    finally:
        root.handlers = handlers
        root.setLevel(level)


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        """Test defaults apply without any environment."""
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.http_timeout == 30.0
        assert settings.dexscreener_base_url == "https://api.dexscreener.com"
        assert settings.weather_base_url == "https://api.weatherapi.com/v1"
        assert settings.weather_api_key is None
        assert settings.network() is None

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("HTTP_TIMEOUT", "5")
        monkeypatch.setenv("WEATHER_API_KEY", "env-key")
        monkeypatch.setenv("NETWORK_ID", "base-sepolia")
        monkeypatch.setenv("NETWORK_PROTOCOL_FAMILY", "evm")

        settings = Settings(_env_file=None)

        assert settings.http_timeout == 5.0
        assert settings.weather_api_key == "env-key"
        assert settings.network() == Network(protocol_family="evm", network_id="base-sepolia")

    def test_invalid_timeout(self):
        """Test non-positive timeouts are rejected."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, http_timeout=0)

    def test_safe_dict_masks_key(self):
        """Test secrets are masked for display."""
        settings = Settings(_env_file=None, weather_api_key="secret-key")

        safe = settings.get_safe_dict()

        assert safe["weather_api_key"] == "***MASKED***"
        assert "secret-key" not in json.dumps(safe)

    def test_safe_dict_without_key(self):
        """Test an unset key stays None."""
        assert Settings(_env_file=None).get_safe_dict()["weather_api_key"] is None


class TestNetwork:
    """Tests for Network."""

    def test_str(self):
        """Test the most specific identifier is shown."""
        assert str(Network(protocol_family="evm", network_id="base-mainnet")) == "base-mainnet"
        assert str(Network(protocol_family="evm", chain_id="1")) == "1"
        assert str(Network(protocol_family="evm")) == "evm"
        assert str(Network()) == "unspecified"

    def test_frozen(self):
        """Test networks are immutable values."""
        network = Network(network_id="a")

        with pytest.raises(ValueError):
            network.network_id = "b"


class TestBuildProviders:
    """Tests for provider construction from settings."""

    def test_without_weather_key(self):
        """Test only DexScreener is built without a weather key."""
        providers = build_providers(Settings(_env_file=None))

        assert [p.name for p in providers] == ["dexscreener"]

    def test_with_weather_key(self):
        """Test the weather provider joins when a key is set."""
        settings = Settings(_env_file=None, weather_api_key="k", http_timeout=3)

        providers = build_providers(settings)

        assert [p.name for p in providers] == ["dexscreener", "weather"]
        assert all(p.timeout == 3 for p in providers)

    def test_custom_base_url(self):
        """Test configured base URLs are used."""
        settings = Settings(_env_file=None, dexscreener_base_url="https://dex.test/")

        providers = build_providers(settings)

        assert providers[0].base_url == "https://dex.test"


class TestAgentSession:
    """Tests for AgentSession."""

    def test_from_settings(self):
        """Test a session exposes every configured action."""
        session = AgentSession.from_settings(Settings(_env_file=None, weather_api_key="k"))

        names = [a.name for a in session.available_actions()]
        assert "get_current_weather" in names
        assert "get_pair_details" in names
        assert len(session.function_definitions()) == 6

    def test_network_from_settings(self):
        """Test the session network comes from settings unless overridden."""
        settings = Settings(_env_file=None, network_id="base-sepolia")

        assert AgentSession.from_settings(settings).network == Network(network_id="base-sepolia")

        override = Network(network_id="solana-devnet")
        assert AgentSession.from_settings(settings, network=override).network is override

    def test_blank_weather_key_is_configuration_error(self):
        """Test a whitespace key is rejected rather than silently ignored."""
        with pytest.raises(ConfigurationError):
            AgentSession.from_settings(Settings(_env_file=None, weather_api_key="  "))

    @pytest.mark.asyncio
    async def test_invoke_and_run(self, stub_api):
        """Test the session routes calls to the shared transport."""
        stub_api.add("/token-boosts/top/v1", TOP_BOOST_SINGLE)
        stub_api.add("/v1/current.json", CURRENT_WEATHER)
        session = AgentSession.from_settings(
            Settings(_env_file=None, weather_api_key="k"),
            transport=stub_api.transport,
        )

        boosts = await session.invoke("get_top_token_boosts")
        weather = await session.run("get_current_weather", {"location": "London"})

        assert json.loads(boosts)[0]["amount"] == 5
        assert weather.success is True
        assert json.loads(weather.output)["location"]["name"] == "London"

    @pytest.mark.asyncio
    async def test_run_unknown(self):
        """Test running a missing action is a flattened failure."""
        session = AgentSession.from_settings(Settings(_env_file=None))

        result = await session.run("get_current_weather", {"location": "London"})

        assert result.success is False
        assert "not found" in result.error


class TestLogging:
    """Tests for logging setup and the invocation logger."""

    def test_setup_logging_json(self):
        """Test JSON formatting and quiet HTTP loggers."""
        with preserved_root_logger() as root:
            setup_logging("DEBUG", json_format=True)

            assert root.level == logging.DEBUG
            assert isinstance(root.handlers[0].formatter, ActionJsonFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_setup_logging_plain(self):
        """Test plain text formatting."""
        with preserved_root_logger() as root:
            setup_logging("warning", json_format=False)

            assert root.level == logging.WARNING
            assert not isinstance(root.handlers[0].formatter, ActionJsonFormatter)

    def test_json_record_fields(self):
        """Test JSON records carry standard fields."""
        formatter = ActionJsonFormatter(fmt="%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord(
            "agent_actions.test", logging.INFO, __file__, 10, "hello", None, None
        )

        data = json.loads(formatter.format(record))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "agent_actions.test"
        assert data["source"]["line"] == 10

    def test_sensitive_context_dropped(self, caplog):
        """Test context keys that may hold secrets are not logged."""
        invocation_logger = ActionInvocationLogger(logging.getLogger("agent_actions.test"))

        with caplog.at_level(logging.INFO, logger="agent_actions"):
            invocation_logger.start("x", provider="p", api_key="secret")
            invocation_logger.success(output="large body", size=10)

        start, success = caplog.records
        assert start.provider == "p"
        assert not hasattr(start, "api_key")
        assert not hasattr(success, "output")
        assert success.size == 10
