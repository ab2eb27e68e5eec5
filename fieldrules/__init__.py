"""fieldrules — declarative per-field validation for dataclasses and pydantic models.

Usage:
    from dataclasses import dataclass, field
    from fieldrules import validate

    @dataclass
    class Account:
        code: str = field(metadata={"validate": "len:4"})
        age: int = field(metadata={"validate": "min:18;max:65"})

    err = validate(Account(code="abc", age=10))
    if err is not None:
        print(err)   # code: should have length 4\nage: should be at least 18
"""

from functools import lru_cache
from typing import Any, Optional

from fieldrules.config import get_settings
from fieldrules.validators import (
    ErrorCode,
    FieldError,
    NotARecordError,
    RuleEngine,
    ValidationErrors,
    Validator,
)

__version__ = "0.1.0"


@lru_cache
def get_validator() -> Validator:
    """Shared validator using the configured TAG_KEY."""
    return Validator(tag_key=get_settings().TAG_KEY)


def validate(record: Any) -> Optional[Exception]:
    """Validate with the shared validator; see Validator.validate()."""
    return get_validator().validate(record)


def ensure_valid(record: Any) -> None:
    """Validate with the shared validator and raise on any finding."""
    get_validator().ensure_valid(record)


__all__ = [
    "validate",
    "ensure_valid",
    "get_validator",
    "Validator",
    "RuleEngine",
    "ErrorCode",
    "FieldError",
    "NotARecordError",
    "ValidationErrors",
]
