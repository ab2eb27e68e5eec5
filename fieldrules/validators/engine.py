"""Rule Engine — parses a field's directive string and runs each directive.

Usage:
    engine = RuleEngine()
    errors = engine.evaluate("Age", "min:18;max:65", 10)
"""

from typing import Any, Optional

from fieldrules.logging_config import get_logger
from fieldrules.validators.base import BaseRule
from fieldrules.validators.errors import InvalidSyntaxError
from fieldrules.validators.models import FieldError, ErrorCode, MSG_INVALID_SYNTAX
from fieldrules.validators.syntax import split_directives, parse_directive

from fieldrules.validators.len_validator import LenRule
from fieldrules.validators.in_validator import InRule
from fieldrules.validators.bounds_validator import MinRule, MaxRule

logger = get_logger(__name__)


class RuleEngine:
    """Maps directive kinds to rules and evaluates directive strings.

    A malformed directive costs exactly one finding; the remaining
    directives of the same field are still evaluated.
    """

    def __init__(self, rules: Optional[list[BaseRule]] = None):
        """Initialize with the default rules or a custom list.

        Args:
            rules: Optional list of rules. If None, uses len/in/min/max.
        """
        self.rules: dict[str, BaseRule] = {}
        for rule in rules if rules is not None else self._default_rules():
            self.add_rule(rule)

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        return [LenRule(), InRule(), MinRule(), MaxRule()]

    @property
    def kinds(self) -> list[str]:
        return list(self.rules)

    def add_rule(self, rule: BaseRule) -> None:
        """Register a rule, replacing any rule with the same kind."""
        self.rules[rule.kind] = rule

    def remove_rule(self, kind: str) -> None:
        """Unregister a rule by kind; unknown kinds are ignored."""
        self.rules.pop(kind, None)

    def evaluate(self, field: str, metadata: str, value: Any) -> list[FieldError]:
        """Run every directive of `metadata` against `value`.

        Args:
            field: Field name used to label findings
            metadata: Raw directive string, e.g. "min:2;max:4"
            value: Runtime value of the field

        Returns:
            Findings in directive order (empty if all directives pass)
        """
        errors: list[FieldError] = []

        for raw in split_directives(metadata):
            try:
                directive = parse_directive(raw)
                rule = self.rules.get(directive.kind)
                if rule is None:
                    raise InvalidSyntaxError(raw)
                errors.extend(rule.check(field, value, directive.argument))
            except InvalidSyntaxError:
                logger.debug("invalid_validator_syntax", field=field, directive=raw)
                errors.append(FieldError(
                    field=field,
                    message=MSG_INVALID_SYNTAX,
                    code=ErrorCode.INVALID_SYNTAX,
                ))

        return errors
