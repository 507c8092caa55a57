"""Invocation pipeline shared by every action.

validate input -> build and send request -> decode body -> validate output
-> serialize. Any stage failure ends in ``FAILED`` and is re-raised as an
``ActionError`` carrying the action's purpose and the original cause.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, List, Optional

from ..errors import (
    ActionError,
    InputValidationError,
    InvocationError,
    OutputValidationError,
)
from ..logging_config import ActionInvocationLogger, get_logger
from ..schema import serialize, validate_input, validate_output

if TYPE_CHECKING:
    from .descriptor import ActionDescriptor

logger = get_logger(__name__)


class InvocationState(str, Enum):
    """Lifecycle of one invocation."""
    PENDING = "pending"
    VALIDATING = "validating"
    CALLING = "calling"
    DECODING = "decoding"
    OUTPUT_VALIDATING = "output_validating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


TERMINAL_STATES: FrozenSet[InvocationState] = frozenset({
    InvocationState.SUCCEEDED,
    InvocationState.FAILED,
})

_NEXT_STATE: Dict[InvocationState, InvocationState] = {
    InvocationState.PENDING: InvocationState.VALIDATING,
    InvocationState.VALIDATING: InvocationState.CALLING,
    InvocationState.CALLING: InvocationState.DECODING,
    InvocationState.DECODING: InvocationState.OUTPUT_VALIDATING,
    InvocationState.OUTPUT_VALIDATING: InvocationState.SUCCEEDED,
}


class Invocation:
    """A single run of an action. Not reusable.

    Attributes:
        action: Descriptor being invoked
        state: Current state
        history: Every state entered, in order
        error: Boundary error once failed
        output: Canonical output once succeeded
    """

    def __init__(self, action: "ActionDescriptor"):
        self.action = action
        self.state = InvocationState.PENDING
        self.history: List[InvocationState] = [InvocationState.PENDING]
        self.error: Optional[ActionError] = None
        self.output: Optional[str] = None

    def _advance(self, state: InvocationState) -> None:
        if _NEXT_STATE.get(self.state) is not state:
            raise RuntimeError(
                f"Illegal invocation transition {self.state.value} -> {state.value}"
            )
        self._enter(state)

    def _fail(self, cause: InvocationError) -> ActionError:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Invocation already {self.state.value}")
        self.error = ActionError(self.action.name, self.action.purpose, cause)
        self._enter(InvocationState.FAILED)
        return self.error

    def _enter(self, state: InvocationState) -> None:
        logger.debug(
            "Invocation %s: %s -> %s", self.action.name, self.state.value, state.value
        )
        self.state = state
        self.history.append(state)

    async def run(self, raw_input: Any = None) -> str:
        """Execute the pipeline once.

        Args:
            raw_input: Unvalidated input mapping (None means no input)

        Returns:
            Canonical serialization of the validated output

        Raises:
            ActionError: If any stage fails
        """
        if self.state is not InvocationState.PENDING:
            raise RuntimeError("Invocation has already been run")

        action = self.action
        provider = action.provider
        invocation_logger = ActionInvocationLogger(logger)
        invocation_logger.start(action.name, provider=provider.name)

        try:
            self._advance(InvocationState.VALIDATING)
            checked = validate_input(action.input_schema, raw_input)
            if not checked.is_valid:
                raise InputValidationError(
                    f"Invalid input: {checked.get_error_message()}",
                    issues=checked.issues,
                )

            self._advance(InvocationState.CALLING)
            request = action.handler(checked.value)
            response = await provider.send(request)

            self._advance(InvocationState.DECODING)
            payload = provider.decode(response)

            self._advance(InvocationState.OUTPUT_VALIDATING)
            value = payload
            if action.output_schema is not None:
                parsed = validate_output(action.output_schema, payload)
                if not parsed.is_valid:
                    raise OutputValidationError(
                        f"{provider.api_label} response did not match the expected schema: "
                        f"{parsed.get_error_message()}",
                        issues=parsed.issues,
                    )
                value = parsed.value
            output = serialize(value)

        except InvocationError as exc:
            error = self._fail(exc)
            invocation_logger.failure(
                str(error), kind=exc.kind.value, status_code=exc.status_code
            )
            raise error from exc

        self.output = output
        self._advance(InvocationState.SUCCEEDED)
        invocation_logger.success(size=len(output))
        return output
