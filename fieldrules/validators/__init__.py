"""Field validators — directive parsing, rule evaluation and record inspection."""

from fieldrules.validators.base import BaseRule, ValueKind, value_kind
from fieldrules.validators.engine import RuleEngine
from fieldrules.validators.errors import InvalidSyntaxError, NotARecordError, ValidationErrors
from fieldrules.validators.inspector import RecordInspector, is_record
from fieldrules.validators.models import Directive, ErrorCode, FieldDescriptor, FieldError
from fieldrules.validators.validator import Validator

__all__ = [
    "BaseRule",
    "ValueKind",
    "value_kind",
    "RuleEngine",
    "InvalidSyntaxError",
    "NotARecordError",
    "ValidationErrors",
    "RecordInspector",
    "is_record",
    "Directive",
    "ErrorCode",
    "FieldDescriptor",
    "FieldError",
    "Validator",
]
