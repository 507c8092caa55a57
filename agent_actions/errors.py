"""Error taxonomy for action providers.

Failures are kept as typed exceptions inside the framework so callers and
tests can branch on ``kind``. They are only flattened to plain text at the
outermost boundary (see ``ActionResult``).
"""

from enum import Enum
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import ValidationIssue


class ErrorKind(str, Enum):
    """Categories of failure."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class ActionProviderError(Exception):
    """Base class for all errors raised by this package."""
    pass


# ---------------------------------------------------------------------------
# Setup-time errors
# ---------------------------------------------------------------------------

class ConfigurationError(ActionProviderError):
    """Providers or registry were configured inconsistently."""

    kind = ErrorKind.CONFIGURATION


class UnresolvedDependencyError(ConfigurationError):
    """A provider depends on a provider that is not being registered."""

    def __init__(self, provider: str, dependency: str):
        super().__init__(
            f"Unresolved dependency: provider '{provider}' requires '{dependency}'"
        )
        self.provider = provider
        self.dependency = dependency


class CircularDependencyError(ConfigurationError):
    """Provider dependencies form a cycle."""

    def __init__(self, providers: Sequence[str]):
        super().__init__(
            "Circular provider dependency between: " + ", ".join(providers)
        )
        self.providers = list(providers)


class DuplicateProviderError(ConfigurationError):
    """Two providers share the same name."""

    def __init__(self, name: str):
        super().__init__(f"Provider '{name}' is already registered")
        self.name = name


class DuplicateActionError(ConfigurationError):
    """Two actions share the same name."""

    def __init__(self, name: str, provider: Optional[str] = None):
        message = f"Action '{name}' is already registered"
        if provider:
            message += f" (by provider '{provider}')"
        super().__init__(message)
        self.name = name
        self.provider = provider


class UnknownActionError(ActionProviderError):
    """No action with the requested name is available."""

    def __init__(self, name: str, network_id: Optional[str] = None):
        message = f"Action '{name}' not found"
        if network_id:
            message = f"Action '{name}' is not available on network '{network_id}'"
        super().__init__(message)
        self.name = name
        self.network_id = network_id


# ---------------------------------------------------------------------------
# Invocation-time errors
# ---------------------------------------------------------------------------

class InvocationError(ActionProviderError):
    """A single invocation failed at one stage of the pipeline.

    Attributes:
        kind: Which stage failed
        status_code: HTTP status for status failures
        issues: Schema violations for validation/decode failures
    """

    kind: ErrorKind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        issues: Sequence["ValidationIssue"] = (),
    ):
        super().__init__(message)
        self.status_code = status_code
        self.issues = list(issues)


class InputValidationError(InvocationError):
    """Caller input does not satisfy the action's input schema."""

    kind = ErrorKind.VALIDATION


class TransportError(InvocationError):
    """The remote host could not be reached (DNS, connect, timeout)."""

    kind = ErrorKind.TRANSPORT


class StatusError(InvocationError):
    """The remote host answered with a non-success status."""

    kind = ErrorKind.STATUS

    def __init__(self, message: str, status_code: int, reason: str = ""):
        super().__init__(message, status_code=status_code)
        self.reason = reason


class DecodeError(InvocationError):
    """The response body could not be parsed."""

    kind = ErrorKind.DECODE


class OutputValidationError(DecodeError):
    """The response parsed but violates the action's output schema."""
    pass


class ActionError(ActionProviderError):
    """Boundary failure of an action, prefixed with the action's purpose.

    Wraps the stage error so the original cause text is preserved while the
    structured details stay reachable.
    """

    def __init__(self, action_name: str, purpose: str, cause: InvocationError):
        super().__init__(f"Failed to {purpose}: {cause}")
        self.action_name = action_name
        self.purpose = purpose
        self.cause = cause

    @property
    def kind(self) -> ErrorKind:
        return self.cause.kind

    @property
    def status_code(self) -> Optional[int]:
        return self.cause.status_code

    @property
    def issues(self) -> list:
        return self.cause.issues
