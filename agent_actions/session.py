"""Agent session: the explicitly constructed bundle of settings, registry
and network that callers pass down instead of relying on globals.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from .actions.descriptor import ActionDescriptor, ActionResult
from .actions.registry import ActionRegistry
from .config import Settings
from .logging_config import get_logger
from .network import Network
from .providers.base import ActionProvider
from .providers.dexscreener import dexscreener_action_provider
from .providers.weather import weather_action_provider

logger = get_logger(__name__)


def build_providers(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ActionProvider]:
    """Construct the configured providers.

    DexScreener needs no credentials and is always included. The weather
    provider is included only when an API key is configured.
    """
    providers: List[ActionProvider] = [
        dexscreener_action_provider(
            base_url=settings.dexscreener_base_url,
            timeout=settings.http_timeout,
            transport=transport,
        ),
    ]

    if settings.weather_api_key:
        providers.append(weather_action_provider(
            api_key=settings.weather_api_key,
            base_url=settings.weather_base_url,
            timeout=settings.http_timeout,
            transport=transport,
        ))
    else:
        logger.info("Weather provider disabled: WEATHER_API_KEY is not set")

    return providers


@dataclass(frozen=True)
class AgentSession:
    """Everything an agent needs to discover and call actions.

    Attributes:
        settings: Settings the session was built from
        registry: Registry of all configured actions
        network: Network the agent operates on (None: no filtering)
    """
    settings: Settings
    registry: ActionRegistry
    network: Optional[Network] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        network: Optional[Network] = None,
    ) -> "AgentSession":
        """Build a session. Configuration errors propagate to the caller.

        Args:
            settings: Loaded settings
            transport: Optional httpx transport shared by all providers
            network: Overrides the network derived from settings
        """
        registry = ActionRegistry(build_providers(settings, transport=transport))
        session = cls(
            settings=settings,
            registry=registry,
            network=network if network is not None else settings.network(),
        )
        logger.info(
            "Agent session ready",
            extra={
                "network": str(session.network) if session.network else None,
                "actions": [a.name for a in session.available_actions()],
            }
        )
        return session

    def available_actions(self) -> List[ActionDescriptor]:
        return self.registry.get_actions(self.network)

    def function_definitions(self) -> List[Dict[str, Any]]:
        return self.registry.get_function_definitions(self.network)

    async def invoke(self, name: str, raw_input: Any = None) -> str:
        return await self.registry.invoke(name, raw_input, self.network)

    async def run(self, name: str, raw_input: Any = None) -> ActionResult:
        return await self.registry.run(name, raw_input, self.network)
