"""Base class for action providers.

A provider owns its identity, its immutable connection settings and the
actions declared on it with ``create_action``. It performs the HTTP
exchange for its actions but holds no per-call state, so invocations can
run concurrently.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote

import httpx

from ..actions.descriptor import ACTION_META_ATTR, ActionDescriptor, ActionMeta
from ..errors import (
    ConfigurationError,
    DecodeError,
    DuplicateActionError,
    StatusError,
    TransportError,
)
from ..logging_config import get_logger
from ..network import Network

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class RemoteRequest:
    """HTTP request built from validated input.

    Attributes:
        path: Path relative to the provider's base URL, already encoded
        method: HTTP method
        params: Query parameters
    """
    path: str
    method: str = "GET"
    params: Mapping[str, str] = field(default_factory=dict)


def path_segment(value: str, safe: str = "") -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe=safe)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class ActionProvider(ABC):
    """Abstract base class for action providers.

    Subclasses set ``default_base_url`` and ``api_label``, implement
    ``supports_network`` and declare actions with ``create_action``.
    """

    default_base_url: str = ""
    api_label: str = "Remote API"

    def __init__(
        self,
        name: str,
        dependencies: Sequence[str] = (),
        *,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the provider.

        Args:
            name: Stable provider identifier
            dependencies: Names of providers that must be registered first
            base_url: API base URL (defaults to ``default_base_url``)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)

        Raises:
            ConfigurationError: If the name or base URL is empty
        """
        if not name:
            raise ConfigurationError("Provider name must not be empty")

        resolved_url = (base_url or self.default_base_url).rstrip("/")
        if not resolved_url:
            raise ConfigurationError(f"Provider '{name}' has no base URL configured")

        self._name = name
        self._dependencies: Tuple[str, ...] = tuple(dependencies)
        self._base_url = resolved_url
        self._timeout = timeout
        self._transport = transport
        self._actions = self._bind_actions()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, base_url={self._base_url!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def dependencies(self) -> Tuple[str, ...]:
        return self._dependencies

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @abstractmethod
    def supports_network(self, network: Network) -> bool:
        """Whether this provider's actions apply on the given network.

        Must be pure: same answer for the same network, no side effects.
        """
        pass

    def get_actions(self) -> Tuple[ActionDescriptor, ...]:
        """Actions contributed by this provider, in declaration order."""
        return self._actions

    def _bind_actions(self) -> Tuple[ActionDescriptor, ...]:
        # The member resolved on the class decides. An undecorated override
        # is not an action.
        candidates: List[str] = []
        for klass in reversed(type(self).__mro__):
            for attr_name, member in vars(klass).items():
                if hasattr(member, ACTION_META_ATTR) and attr_name not in candidates:
                    candidates.append(attr_name)

        declared: Dict[str, ActionMeta] = {}
        for attr_name in candidates:
            meta = getattr(getattr(type(self), attr_name), ACTION_META_ATTR, None)
            if meta is not None:
                declared[attr_name] = meta

        descriptors = []
        seen = set()
        for attr_name, meta in declared.items():
            if meta.name in seen:
                raise DuplicateActionError(meta.name, self._name)
            seen.add(meta.name)
            descriptors.append(ActionDescriptor.bind(meta, getattr(self, attr_name), self))
        return tuple(descriptors)

    # -------------------------------------------------------------------------
    # HTTP exchange
    # -------------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def send(self, request: RemoteRequest) -> httpx.Response:
        """Perform one request. No retries.

        Raises:
            TransportError: If the host cannot be reached or times out
            StatusError: If the response status is not 2xx
        """
        logger.debug("%s %s %s", self.api_label, request.method, request.path)

        try:
            async with self._client() as client:
                response = await client.request(
                    request.method,
                    request.path,
                    params=dict(request.params) or None,
                )
        except httpx.TimeoutException as e:
            raise TransportError(f"{self.api_label} request timed out: {_describe(e)}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{self.api_label} request failed: {_describe(e)}") from e

        if not response.is_success:
            message = (
                f"{self.api_label} request failed: "
                f"{response.status_code} {response.reason_phrase}"
            )
            detail = self.error_detail(response)
            if detail:
                message += f" ({detail})"
            raise StatusError(
                message,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        return response

    def decode(self, response: httpx.Response) -> Any:
        """Parse the response body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON
        """
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"{self.api_label} returned a malformed payload: {e}") from e

    def error_detail(self, response: httpx.Response) -> Optional[str]:
        """Extract a remote error message from a failed response, if any."""
        return None
