"""Weather actions.

- get_current_weather
"""

from .provider import WeatherActionProvider, weather_action_provider
from .schemas import GetCurrentWeatherInput, WeatherReport

__all__ = [
    "WeatherActionProvider",
    "weather_action_provider",
    "GetCurrentWeatherInput",
    "WeatherReport",
]
