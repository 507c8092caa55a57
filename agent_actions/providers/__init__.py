"""Action providers.

Supports:
- DexScreener (token profiles, boosts, orders, pair details)
- WeatherAPI.com (current weather)
"""

from .base import ActionProvider, RemoteRequest, path_segment
from .dexscreener import DexScreenerActionProvider, dexscreener_action_provider
from .weather import WeatherActionProvider, weather_action_provider

__all__ = [
    "ActionProvider",
    "RemoteRequest",
    "path_segment",
    "DexScreenerActionProvider",
    "dexscreener_action_provider",
    "WeatherActionProvider",
    "weather_action_provider",
]
