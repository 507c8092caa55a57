"""Action registry assembled from action providers.

Manages provider ordering, action discovery per network, and execution
routing.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..errors import (
    ActionError,
    CircularDependencyError,
    DuplicateActionError,
    DuplicateProviderError,
    UnknownActionError,
    UnresolvedDependencyError,
)
from ..logging_config import get_logger
from ..network import Network
from .descriptor import ActionDescriptor, ActionResult

if TYPE_CHECKING:
    from ..providers.base import ActionProvider

logger = get_logger(__name__)


def resolve_provider_order(providers: Sequence["ActionProvider"]) -> List["ActionProvider"]:
    """Order providers so each comes after the providers it depends on.

    The given order is kept wherever dependencies allow it.

    Raises:
        DuplicateProviderError: If two providers share a name
        UnresolvedDependencyError: If a dependency is not in the set
        CircularDependencyError: If dependencies form a cycle
    """
    names = set()
    for provider in providers:
        if provider.name in names:
            raise DuplicateProviderError(provider.name)
        names.add(provider.name)

    for provider in providers:
        for dependency in provider.dependencies:
            if dependency not in names:
                raise UnresolvedDependencyError(provider.name, dependency)

    ordered: List["ActionProvider"] = []
    placed = set()
    remaining = list(providers)
    while remaining:
        ready = [p for p in remaining if all(dep in placed for dep in p.dependencies)]
        if not ready:
            raise CircularDependencyError([p.name for p in remaining])
        for provider in ready:
            ordered.append(provider)
            placed.add(provider.name)
            remaining.remove(provider)
    return ordered


class ActionRegistry:
    """Central registry for the actions of a set of providers.

    Built once; never modified afterwards. Safe for concurrent invocations.
    """

    def __init__(self, providers: Sequence["ActionProvider"] = ()):
        """Register every action of the given providers.

        Args:
            providers: Already-constructed providers

        Raises:
            ConfigurationError: On unresolved/circular dependencies or
                duplicate provider/action names
        """
        self._providers = tuple(resolve_provider_order(providers))
        self._actions: Dict[str, ActionDescriptor] = {}

        for provider in self._providers:
            for action in provider.get_actions():
                existing = self._actions.get(action.name)
                if existing is not None:
                    raise DuplicateActionError(action.name, existing.provider_name)
                self._actions[action.name] = action
                logger.debug("Registered action: %s (%s)", action.name, provider.name)

        logger.info(
            "Action registry ready",
            extra={
                "providers": [p.name for p in self._providers],
                "action_count": len(self._actions),
            }
        )

    @property
    def providers(self) -> tuple:
        """Providers in registration order."""
        return self._providers

    def get(self, name: str) -> Optional[ActionDescriptor]:
        """Get an action by name, regardless of network."""
        return self._actions.get(name)

    def list_actions(self) -> List[ActionDescriptor]:
        """Get all registered actions."""
        return list(self._actions.values())

    def get_actions(self, network: Optional[Network] = None) -> List[ActionDescriptor]:
        """Get the actions whose provider supports the network.

        Args:
            network: Execution context; None means no filtering
        """
        if network is None:
            return self.list_actions()
        supported = {p.name for p in self._providers if p.supports_network(network)}
        return [a for a in self._actions.values() if a.provider_name in supported]

    def resolve(self, name: str, network: Optional[Network] = None) -> ActionDescriptor:
        """Look up an action available on the network.

        Raises:
            UnknownActionError: If the action is unknown or unsupported there
        """
        action = self._actions.get(name)
        if action is None:
            raise UnknownActionError(name)
        if network is not None and not action.provider.supports_network(network):
            raise UnknownActionError(name, network_id=str(network))
        return action

    def get_function_definitions(self, network: Optional[Network] = None) -> List[Dict[str, Any]]:
        """Get agent tool definitions for the available actions."""
        return [action.to_function_definition() for action in self.get_actions(network)]

    def get_manifest(self, network: Optional[Network] = None) -> List[Dict[str, Any]]:
        """Get the action manifest for listings."""
        return [action.to_manifest_dict() for action in self.get_actions(network)]

    async def invoke(
        self,
        name: str,
        raw_input: Any = None,
        network: Optional[Network] = None,
    ) -> str:
        """Invoke an action and return its canonical output.

        Raises:
            UnknownActionError: If the action is not available
            ActionError: If the invocation fails
        """
        return await self.resolve(name, network).invoke(raw_input)

    async def run(
        self,
        name: str,
        raw_input: Any = None,
        network: Optional[Network] = None,
    ) -> ActionResult:
        """Invoke an action and flatten the outcome for the agent.

        Invocation failures are returned, not raised.
        """
        try:
            output = await self.invoke(name, raw_input, network)
        except (UnknownActionError, ActionError) as e:
            return ActionResult.from_error(name, e)
        return ActionResult.from_output(name, output)
