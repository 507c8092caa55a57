"""Configuration management for action providers.

Loads configuration from environment variables and an optional ``.env``
file. Settings are read once by the caller and passed down explicitly;
provider instances copy what they need at construction time.
Secrets are never logged or exposed in responses.
"""

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .network import Network


DEFAULT_DEXSCREENER_BASE_URL = "https://api.dexscreener.com"
DEFAULT_WEATHER_BASE_URL = "https://api.weatherapi.com/v1"


class Settings(BaseSettings):
    """Action provider settings.

    All settings can be overridden via environment variables.
    Prefix: None (uses exact variable names).
    """

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # HTTP
    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for remote API requests in seconds"
    )

    # DexScreener
    dexscreener_base_url: str = Field(
        default=DEFAULT_DEXSCREENER_BASE_URL,
        description="DexScreener API base URL"
    )

    # WeatherAPI.com
    weather_base_url: str = Field(
        default=DEFAULT_WEATHER_BASE_URL,
        description="Weather API base URL"
    )
    weather_api_key: Optional[str] = Field(
        default=None,
        description="Weather API key (never logged); weather actions are disabled without it"
    )

    # Execution context
    network_id: Optional[str] = Field(
        default=None,
        description="Network the agent operates on (e.g., 'base-sepolia')"
    )
    network_protocol_family: Optional[str] = Field(
        default=None,
        description="Protocol family of the network (e.g., 'evm')"
    )
    network_chain_id: Optional[str] = Field(
        default=None,
        description="Chain ID of the network"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def network(self) -> Optional[Network]:
        """Build the configured Network, or None when nothing is set."""
        if not (self.network_id or self.network_protocol_family or self.network_chain_id):
            return None
        return Network(
            protocol_family=self.network_protocol_family,
            network_id=self.network_id,
            chain_id=self.network_chain_id,
        )

    def get_safe_dict(self) -> Dict[str, Any]:
        """Return config as dict with secrets masked.

        Use this for logging or debugging - never exposes secrets.
        """
        data = self.model_dump()
        if data.get("weather_api_key"):
            data["weather_api_key"] = "***MASKED***"
        return data
