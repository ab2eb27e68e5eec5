"""Validation models — error codes, field descriptors, directives, findings.

Everything here is transient: built and discarded inside a single validate() call.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


# Fixed messages for the non-rule findings
MSG_INVALID_SYNTAX = "invalid validator syntax"
MSG_UNEXPORTED_FIELD = "validation for unexported field is not allowed"
MSG_NOT_A_RECORD = "wrong argument given, should be a dataclass or pydantic model instance"


class ErrorCode(str, Enum):
    """Machine-readable code for every finding.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    UNEXPORTED_FIELD = "UNEXPORTED_FIELD"
    INVALID_SYNTAX = "INVALID_SYNTAX"

    # Rule failures, one per directive kind
    RULE_LEN = "RULE_LEN"
    RULE_IN = "RULE_IN"
    RULE_MIN = "RULE_MIN"
    RULE_MAX = "RULE_MAX"


class FieldError(BaseModel):
    """A single violation found on one field."""

    field: str
    message: str
    code: ErrorCode

    model_config = {"use_enum_values": True, "frozen": True}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class FieldDescriptor(BaseModel):
    """What the inspector learned about one declared field."""

    name: str
    exported: bool = True
    metadata: str = ""   # Raw directive string, "" when the field has none
    value: Any = None

    @property
    def has_rules(self) -> bool:
        return self.metadata != ""


class Directive(BaseModel):
    """One parsed `kind:argument` unit."""

    kind: str
    argument: str = Field(description="Unparsed text after the first ':'")
    raw: Optional[str] = None

    model_config = {"frozen": True}
