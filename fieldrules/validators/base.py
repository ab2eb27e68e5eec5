"""Base rule — abstract class implementing the Strategy Pattern.

Each rule handles one directive kind and is independently testable.
New kinds are registered on the engine without modifying it.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from fieldrules.validators.models import FieldError, ErrorCode


class ValueKind(str, Enum):
    """Runtime value categories a rule can dispatch on."""

    STRING = "string"
    INTEGER = "integer"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    """Classify a field value. bool is checked before int on purpose."""
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def string_length(value: str) -> int:
    """Length of a string in UTF-8 bytes, as len/min/max measure it."""
    return len(value.encode("utf-8", errors="surrogatepass"))


class BaseRule(ABC):
    """Abstract base for all directive rules.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a list of FieldError (empty = passed)
        - check() raises InvalidSyntaxError for a malformed argument
        - values of an unsupported kind pass silently
    """

    #: Code attached to findings produced by this rule
    code: ErrorCode = ErrorCode.INVALID_SYNTAX

    @property
    @abstractmethod
    def kind(self) -> str:
        """Directive kind this rule answers to, e.g. 'len'."""
        ...

    @abstractmethod
    def check(self, field: str, value: Any, argument: str) -> list[FieldError]:
        """Evaluate one directive against a field value.

        Args:
            field: Field name, used to label findings
            value: Runtime value of the field
            argument: Unparsed text after 'kind:'

        Returns:
            List of FieldError findings (empty if the value passes)
        """
        ...

    def _error(self, field: str, message: str) -> FieldError:
        """Convenience method to create a FieldError with this rule's code."""
        return FieldError(field=field, message=message, code=self.code)
