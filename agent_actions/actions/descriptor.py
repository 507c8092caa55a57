"""Action descriptors and the decorator that declares them.

Provides:
- ``create_action`` to mark provider methods as actions
- ``ActionDescriptor`` binding an action's metadata to its handler
- ``ActionResult`` for the flattened, agent-facing outcome
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Type

from pydantic import BaseModel

from ..errors import ActionError, ActionProviderError, ErrorKind

if TYPE_CHECKING:
    from ..providers.base import ActionProvider, RemoteRequest


ACTION_META_ATTR = "__action_meta__"


@dataclass(frozen=True)
class ActionMeta:
    """Metadata attached to a provider method by ``create_action``."""
    name: str
    description: str
    input_schema: Type[BaseModel]
    output_schema: Optional[Type[BaseModel]]
    purpose: str


def create_action(
    name: str,
    description: str,
    input_schema: Type[BaseModel],
    output_schema: Optional[Type[BaseModel]] = None,
    purpose: Optional[str] = None,
) -> Callable:
    """Decorator to declare a provider method as an action.

    The decorated method receives the validated input model and returns the
    ``RemoteRequest`` to perform. Nothing is registered globally; providers
    bind their actions when they are constructed.

    Args:
        name: Unique action identifier
        description: Agent-readable description (parameters, rate limits)
        input_schema: Pydantic model for input validation
        output_schema: Pydantic model the remote response must satisfy
        purpose: Phrase used in failure messages ("Failed to <purpose>: ...")

    Example:
        @create_action(
            name="get_pair_details",
            description="Get pair details by chain and pair address",
            input_schema=GetPairDetailsInput,
            output_schema=GetPairDetailsOutput,
            purpose="get pair details",
        )
        def get_pair_details(self, params: GetPairDetailsInput) -> RemoteRequest:
            ...
    """
    if not name:
        raise ValueError("Action name must not be empty")

    meta = ActionMeta(
        name=name,
        description=description.strip(),
        input_schema=input_schema,
        output_schema=output_schema,
        purpose=purpose or name.replace("_", " "),
    )

    def decorator(func: Callable) -> Callable:
        setattr(func, ACTION_META_ATTR, meta)
        return func
    return decorator


@dataclass(frozen=True)
class ActionDescriptor:
    """One invocable action, bound to the provider that owns it.

    Attributes:
        name: Unique action identifier
        description: Agent-readable description
        purpose: Phrase used to prefix failure messages
        input_schema: Pydantic model for input validation
        output_schema: Pydantic model for output validation (optional)
        handler: Bound provider method building the remote request
        provider: Owning provider
    """
    name: str
    description: str
    purpose: str
    input_schema: Type[BaseModel]
    output_schema: Optional[Type[BaseModel]]
    handler: Callable[[BaseModel], "RemoteRequest"]
    provider: "ActionProvider"

    @classmethod
    def bind(cls, meta: ActionMeta, handler: Callable, provider: "ActionProvider") -> "ActionDescriptor":
        return cls(
            name=meta.name,
            description=meta.description,
            purpose=meta.purpose,
            input_schema=meta.input_schema,
            output_schema=meta.output_schema,
            handler=handler,
            provider=provider,
        )

    @property
    def provider_name(self) -> str:
        return self.provider.name

    async def invoke(self, raw_input: Any = None) -> str:
        """Run the action and return its canonical output.

        Raises:
            ActionError: If any stage of the invocation fails
        """
        from .pipeline import Invocation

        return await Invocation(self).run(raw_input)

    def to_function_definition(self) -> Dict[str, Any]:
        """Convert to OpenAI function calling format."""
        json_schema = self.input_schema.model_json_schema()
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {
                "type": "object",
                "properties": json_schema.get("properties", {}),
                "required": json_schema.get("required", []),
            },
        }

    def to_manifest_dict(self) -> Dict[str, Any]:
        """Convert to manifest dictionary for listings."""
        definition = self.to_function_definition()
        return {
            "name": self.name,
            "provider": self.provider_name,
            "description": self.description,
            "parameters": definition["parameters"],
            "validates_output": self.output_schema is not None,
        }


@dataclass
class ActionResult:
    """Flattened outcome of an action for agent consumption.

    Attributes:
        action: Action name
        success: Whether the action succeeded
        output: Canonical serialized output on success
        error: Descriptive failure message on failure
        kind: Failure category, when known
        status_code: HTTP status for status failures
    """
    action: str
    success: bool
    output: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def from_output(cls, action: str, output: str) -> "ActionResult":
        return cls(action=action, success=True, output=output)

    @classmethod
    def from_error(cls, action: str, error: ActionProviderError) -> "ActionResult":
        result = cls(action=action, success=False, error=str(error))
        if isinstance(error, ActionError):
            result.kind = error.kind
            result.status_code = error.status_code
        return result

    @property
    def text(self) -> str:
        """The single string handed to the agent."""
        if self.success:
            return self.output or ""
        return self.error or "Action failed"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: Dict[str, Any] = {
            "action": self.action,
            "success": self.success,
        }
        if self.success:
            result["output"] = self.output
        else:
            result["error"] = self.error
            if self.kind is not None:
                result["kind"] = self.kind.value
            if self.status_code is not None:
                result["status_code"] = self.status_code
        return result
