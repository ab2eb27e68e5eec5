"""Bound rules — `min:N` and `max:N` on string length or integer value."""

import operator
from typing import Any, Callable

from fieldrules.validators.base import BaseRule, ValueKind, string_length, value_kind
from fieldrules.validators.models import FieldError, ErrorCode
from fieldrules.validators.syntax import parse_int


class _BoundRule(BaseRule):
    """Shared min/max logic; subclasses pick the comparison and wording."""

    # Returns True when the measured value is within the bound
    within: Callable[[int, int], bool]
    wording: str

    def check(self, field: str, value: Any, argument: str) -> list[FieldError]:
        bound = parse_int(argument)

        kind = value_kind(value)
        if kind is ValueKind.STRING:
            if not self.within(string_length(value), bound):
                return [self._error(field, f"should have length {self.wording} {bound}")]
        elif kind is ValueKind.INTEGER:
            if not self.within(int(value), bound):
                return [self._error(field, f"should be {self.wording} {bound}")]
        return []


class MinRule(_BoundRule):
    """String length or integer value must be >= N."""

    code = ErrorCode.RULE_MIN
    within = operator.ge
    wording = "at least"

    @property
    def kind(self) -> str:
        return "min"


class MaxRule(_BoundRule):
    """String length or integer value must be <= N."""

    code = ErrorCode.RULE_MAX
    within = operator.le
    wording = "at most"

    @property
    def kind(self) -> str:
        return "max"
