"""Pydantic schemas for the weather action."""

from pydantic import Field

from ...schema import ActionInput, Number, RemoteModel


class GetCurrentWeatherInput(ActionInput):
    location: str = Field(
        min_length=1,
        description="The location to get weather for (city name, coordinates, etc.)"
    )


class WeatherLocation(RemoteModel):
    name: str
    region: str
    country: str
    localtime: str


class WeatherCondition(RemoteModel):
    text: str
    icon: str


class WeatherCurrent(RemoteModel):
    temp_c: Number
    temp_f: Number
    condition: WeatherCondition
    wind_kph: Number
    wind_dir: str
    humidity: Number
    feelslike_c: Number
    feelslike_f: Number
    vis_km: Number


class WeatherReport(RemoteModel):
    """Response of /current.json, reduced to the fields the action vouches for."""

    location: WeatherLocation
    current: WeatherCurrent
