"""Membership rule — `in:a,b,c`."""

from typing import Any

from fieldrules.validators.base import BaseRule, ValueKind, value_kind
from fieldrules.validators.models import FieldError, ErrorCode
from fieldrules.validators.syntax import parse_literals


class InRule(BaseRule):
    """Value must equal one of the listed literals.

    Strings compare as text; integers compare through their decimal form,
    so `in:1,2` matches the int 2 but never the str "02".
    """

    code = ErrorCode.RULE_IN

    @property
    def kind(self) -> str:
        return "in"

    def check(self, field: str, value: Any, argument: str) -> list[FieldError]:
        literals = parse_literals(argument)

        kind = value_kind(value)
        if kind is ValueKind.STRING:
            text = value
        elif kind is ValueKind.INTEGER:
            text = str(int(value))  # IntEnum members render as their name otherwise
        else:
            return []

        if text not in literals:
            return [self._error(field, f"should be one of {argument}")]
        return []
