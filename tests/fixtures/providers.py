"""Small providers used to exercise the registry and pipeline."""

from typing import Optional, Sequence

import httpx
from pydantic import Field

from agent_actions.actions.descriptor import create_action
from agent_actions.network import Network
from agent_actions.providers.base import ActionProvider, RemoteRequest
from agent_actions.schema import ActionInput, EmptyInput


class EchoInput(ActionInput):
    text: str = Field(description="Text to echo")


class BareProvider(ActionProvider):
    """Provider without actions, for dependency ordering tests."""

    default_base_url = "https://bare.example"

    def __init__(self, name: str, dependencies: Sequence[str] = ()):
        super().__init__(name, dependencies)

    def supports_network(self, network: Network) -> bool:
        return True


class EvmOnlyProvider(ActionProvider):
    """Provider limited to EVM networks, with one action."""

    default_base_url = "https://evm.example"
    api_label = "EVM API"

    def __init__(
        self,
        name: str = "evm_only",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(name, transport=transport)

    def supports_network(self, network: Network) -> bool:
        return network.protocol_family == "evm"

    @create_action(
        name="evm_echo",
        description="Echo text through the EVM API.",
        input_schema=EchoInput,
        purpose="echo text",
    )
    def evm_echo(self, params: EchoInput) -> RemoteRequest:
        return RemoteRequest("/echo", params={"text": params.text})


class RawProvider(ActionProvider):
    """Provider whose action has no output schema."""

    default_base_url = "https://raw.example"
    api_label = "Raw API"

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__("raw", transport=transport)

    def supports_network(self, network: Network) -> bool:
        return True

    @create_action(
        name="raw_status",
        description="Return the raw status document.",
        input_schema=EmptyInput,
        purpose="get raw status",
    )
    def raw_status(self, params: EmptyInput) -> RemoteRequest:
        return RemoteRequest("/status")
