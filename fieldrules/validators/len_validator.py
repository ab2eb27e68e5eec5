"""Length rule — `len:N`, exact string length."""

from typing import Any

from fieldrules.validators.base import BaseRule, ValueKind, string_length, value_kind
from fieldrules.validators.models import FieldError, ErrorCode
from fieldrules.validators.syntax import parse_int


class LenRule(BaseRule):
    """String length in UTF-8 bytes must equal N. Other value kinds pass."""

    code = ErrorCode.RULE_LEN

    @property
    def kind(self) -> str:
        return "len"

    def check(self, field: str, value: Any, argument: str) -> list[FieldError]:
        expected = parse_int(argument)

        if value_kind(value) is ValueKind.STRING and string_length(value) != expected:
            return [self._error(field, f"should have length {expected}")]
        return []
