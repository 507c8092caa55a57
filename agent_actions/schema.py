"""Schema contracts for action inputs and remote outputs.

Provides:
- Base models with explicit unknown-field policies
- Field types that keep the source's numeric precision
- ``validate`` helpers returning a ``ValidationResult`` with per-field issues
- Canonical serialization of validated values
"""

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    PlainValidator,
    SerializerFunctionWrapHandler,
    StrictStr,
    ValidationError,
    model_serializer,
)
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------

def _check_number(value: Any) -> Union[int, float]:
    """Accept finite JSON numbers only; bools, numeric strings and NaN are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return value


def _check_http_url(value: str) -> str:
    """Validate URL format without normalising the original text."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https"):
        raise ValueError("URL must use http or https scheme")
    if not parsed.netloc:
        raise ValueError("URL must have a valid host")
    return value


# int and float are kept apart so counts serialize back as integers
Number = Annotated[Union[int, float], PlainValidator(_check_number)]

# Exact decimal quotes as sent by the source; never converted to float
DecimalString = StrictStr

HttpUrlString = Annotated[str, AfterValidator(_check_http_url)]


# ---------------------------------------------------------------------------
# Base models
# ---------------------------------------------------------------------------

class ActionInput(BaseModel):
    """Base for action inputs. Unknown fields are rejected to catch typos."""

    model_config = ConfigDict(extra="forbid")


class EmptyInput(BaseModel):
    """Base for actions without parameters. Extra fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class RemoteModel(BaseModel):
    """Base for objects returned by a remote API.

    Unknown fields are dropped. Optional fields that were absent in the
    payload are left out on serialization, explicit nulls are kept.
    """

    model_config = ConfigDict(extra="ignore")

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                data.pop(name, None)
        return data


class PassthroughModel(RemoteModel):
    """Remote object whose unknown fields are preserved in ``model_extra``."""

    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# Validation results
# ---------------------------------------------------------------------------

class IssueCategory(str, Enum):
    """Shape category of a schema violation."""
    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    WRONG_SHAPE = "wrong_shape"
    UNEXPECTED = "unexpected"
    INVALID = "invalid"


_SHAPE_ERROR_TYPES = {
    "model_type",
    "model_attributes_type",
    "dict_type",
    "list_type",
    "tuple_type",
    "set_type",
    "mapping_type",
}

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


@dataclass(frozen=True)
class ValidationIssue:
    """One violated constraint.

    Attributes:
        path: Dotted location within the value, ``(root)`` for the top level
        category: Shape category of the violation
        message: Description of the expected shape
        actual: JSON type name of the offending value, if there was one
    """
    path: str
    category: IssueCategory
    message: str
    actual: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.path}: {self.message}"
        if self.actual and self.category in (IssueCategory.WRONG_TYPE, IssueCategory.WRONG_SHAPE):
            text += f" (got {self.actual})"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "category": self.category.value,
            "message": self.message,
            "actual": self.actual,
        }


@dataclass
class ValidationResult:
    """Either a fully validated value or the list of issues. Never both."""
    value: Any = None
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def get_error_message(self) -> str:
        """Generate a human-readable error message."""
        if self.is_valid:
            return "Validation passed"
        return "; ".join(str(issue) for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "issues": [issue.to_dict() for issue in self.issues],
        }


def _categorize(error_type: str) -> IssueCategory:
    if error_type == "missing":
        return IssueCategory.MISSING
    if error_type == "extra_forbidden":
        return IssueCategory.UNEXPECTED
    if error_type in _SHAPE_ERROR_TYPES:
        return IssueCategory.WRONG_SHAPE
    if error_type.endswith("_type"):
        return IssueCategory.WRONG_TYPE
    return IssueCategory.INVALID


def issues_from_error(exc: ValidationError) -> List[ValidationIssue]:
    """Convert a pydantic ValidationError into ValidationIssues."""
    issues = []
    for error in exc.errors(include_url=False):
        category = _categorize(error["type"])
        path = ".".join(str(part) for part in error["loc"]) or "(root)"
        actual = None
        if category is not IssueCategory.MISSING and "input" in error:
            actual = _JSON_TYPE_NAMES.get(type(error["input"]), type(error["input"]).__name__)
        issues.append(ValidationIssue(
            path=path,
            category=category,
            message=error["msg"],
            actual=actual,
        ))
    return issues


def validate(schema: Type[BaseModel], raw: Any) -> ValidationResult:
    """Validate a raw value against a schema model."""
    try:
        value = schema.model_validate(raw)
    except ValidationError as exc:
        return ValidationResult(issues=issues_from_error(exc))
    return ValidationResult(value=value)


def validate_input(schema: Type[BaseModel], raw: Any) -> ValidationResult:
    """Validate caller input. A missing input is treated as an empty object."""
    return validate(schema, {} if raw is None else raw)


def validate_output(schema: Type[BaseModel], payload: Any) -> ValidationResult:
    """Validate a decoded remote payload."""
    return validate(schema, payload)


def serialize(value: Any) -> str:
    """Canonical compact JSON text of a validated value."""
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
