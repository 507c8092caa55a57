"""Schema-validated action providers for autonomous agents.

Exposes external data sources (DexScreener market data, weather) as
uniformly typed actions an agent can call as tools:
- Providers declare actions with input/output schemas
- A registry composes providers and filters them by network
- Every invocation runs the same validate -> call -> decode -> validate
  pipeline and fails with a labelled, structured error
"""

from .actions import (
    ActionDescriptor,
    ActionRegistry,
    ActionResult,
    Invocation,
    InvocationState,
    create_action,
)
from .config import Settings
from .errors import (
    ActionError,
    ActionProviderError,
    ConfigurationError,
    DecodeError,
    DuplicateActionError,
    ErrorKind,
    InputValidationError,
    OutputValidationError,
    StatusError,
    TransportError,
    UnknownActionError,
    UnresolvedDependencyError,
)
from .network import Network
from .providers import (
    ActionProvider,
    DexScreenerActionProvider,
    RemoteRequest,
    WeatherActionProvider,
    dexscreener_action_provider,
    weather_action_provider,
)
from .session import AgentSession

__version__ = "0.1.0"

__all__ = [
    "ActionDescriptor",
    "ActionRegistry",
    "ActionResult",
    "Invocation",
    "InvocationState",
    "create_action",
    "Settings",
    "ActionError",
    "ActionProviderError",
    "ConfigurationError",
    "DecodeError",
    "DuplicateActionError",
    "ErrorKind",
    "InputValidationError",
    "OutputValidationError",
    "StatusError",
    "TransportError",
    "UnknownActionError",
    "UnresolvedDependencyError",
    "Network",
    "ActionProvider",
    "DexScreenerActionProvider",
    "RemoteRequest",
    "WeatherActionProvider",
    "dexscreener_action_provider",
    "weather_action_provider",
    "AgentSession",
]
