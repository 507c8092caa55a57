"""Weather action provider backed by WeatherAPI.com."""

from typing import Optional

import httpx

from ...actions.descriptor import create_action
from ...config import DEFAULT_WEATHER_BASE_URL
from ...errors import ConfigurationError
from ...network import Network
from ..base import DEFAULT_TIMEOUT, ActionProvider, RemoteRequest
from .schemas import GetCurrentWeatherInput, WeatherReport


class WeatherActionProvider(ActionProvider):
    """Current weather conditions for a location.

    The API key travels as a query parameter; it is never logged and never
    appears in error messages.
    """

    default_base_url = DEFAULT_WEATHER_BASE_URL
    api_label = "Weather API"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigurationError("Weather provider requires an API key")
        self._api_key = api_key.strip()
        super().__init__(
            "weather",
            [],
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    def supports_network(self, network: Network) -> bool:
        """Weather API is network-independent."""
        return True

    @create_action(
        name="get_current_weather",
        description="""
Get the current weather for a specific location.

Required parameters:
- location: The location to get weather for (city name, coordinates, etc.)

A successful response will return the location and current conditions (temperature, feels-like, wind, humidity, visibility).
A failure response will return an error message with the reason for failure.""",
        input_schema=GetCurrentWeatherInput,
        output_schema=WeatherReport,
        purpose="get current weather",
    )
    def get_current_weather(self, params: GetCurrentWeatherInput) -> RemoteRequest:
        return RemoteRequest(
            "/current.json",
            params={"key": self._api_key, "q": params.location, "aqi": "no"},
        )

    def error_detail(self, response: httpx.Response) -> Optional[str]:
        """WeatherAPI reports failures as {"error": {"code": ..., "message": ...}}."""
        try:
            body = response.json()
        except ValueError:
            return None
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        return None


def weather_action_provider(
    api_key: str,
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> WeatherActionProvider:
    """Create a new WeatherActionProvider instance."""
    return WeatherActionProvider(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        transport=transport,
    )
