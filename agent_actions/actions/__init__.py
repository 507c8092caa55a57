"""Action descriptors, invocation pipeline and registry.

Provides:
- create_action for declaring actions on providers
- ActionDescriptor / ActionResult
- Invocation and its state machine
- ActionRegistry for composing providers
"""

from .descriptor import (
    ActionDescriptor,
    ActionResult,
    ActionMeta,
    create_action,
)
from .pipeline import Invocation, InvocationState
from .registry import ActionRegistry, resolve_provider_order

__all__ = [
    "ActionDescriptor",
    "ActionResult",
    "ActionMeta",
    "create_action",
    "Invocation",
    "InvocationState",
    "ActionRegistry",
    "resolve_provider_order",
]
