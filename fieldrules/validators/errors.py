"""Exceptions raised or returned by the validator."""

from collections import Counter
from typing import Iterable

from fieldrules.validators.models import FieldError, MSG_INVALID_SYNTAX, MSG_NOT_A_RECORD


class NotARecordError(TypeError):
    """The value handed to validate() has no declared fields to inspect."""

    def __init__(self, value: object = None):
        self.type_name = type(value).__name__
        super().__init__(MSG_NOT_A_RECORD)


class InvalidSyntaxError(ValueError):
    """A directive or its argument could not be parsed.

    Raised by rules and the directive parser, caught by the engine and turned
    into a single INVALID_SYNTAX finding.
    """

    def __init__(self, directive: str = ""):
        self.directive = directive
        super().__init__(MSG_INVALID_SYNTAX)


class ValidationErrors(Exception):
    """Every violation found in one record, in field-then-directive order."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors: list[FieldError] = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        if len(self.errors) == 1:
            return self.errors[0].message
        return "\n".join(str(err) for err in self.errors)

    def __str__(self) -> str:
        return self._render()

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    @property
    def fields(self) -> list[str]:
        """Names of offending fields, first-seen order, no duplicates."""
        return list(dict.fromkeys(err.field for err in self.errors))

    @property
    def summary(self) -> dict[str, int]:
        """Count of findings by error code."""
        return dict(Counter(err.code for err in self.errors))

    def to_dict(self) -> dict:
        return {
            "message": self._render(),
            "summary": self.summary,
            "errors": [err.model_dump() for err in self.errors],
        }
