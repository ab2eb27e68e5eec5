"""Validator — the public entry point tying the inspector and the rule engine.

Usage:
    from fieldrules import validate

    err = validate(record)
    if err is not None:
        # err is a NotARecordError or a ValidationErrors
"""

import time
from typing import Any, Optional

from fieldrules.logging_config import get_logger
from fieldrules.validators.engine import RuleEngine
from fieldrules.validators.errors import NotARecordError, ValidationErrors
from fieldrules.validators.inspector import RecordInspector, DEFAULT_TAG_KEY
from fieldrules.validators.models import FieldDescriptor, FieldError, ErrorCode, MSG_UNEXPORTED_FIELD

logger = get_logger(__name__)


class Validator:
    """Validates every tagged field of a record in one pass.

    Design principles:
        - Deterministic: same record → same findings, same order
        - Complete: every violation is reported, nothing fails fast
        - Read-only: the record is never mutated
    """

    def __init__(self, tag_key: Optional[str] = None, engine: Optional[RuleEngine] = None):
        """
        Args:
            tag_key: Metadata key holding directive strings (default "validate")
            engine: Optional custom RuleEngine. If None, uses len/in/min/max.
        """
        self.inspector = RecordInspector(tag_key or DEFAULT_TAG_KEY)
        self.engine = engine or RuleEngine()

    @property
    def tag_key(self) -> str:
        return self.inspector.tag_key

    def collect(self, record: Any) -> list[FieldError]:
        """Return every finding for `record`, in field-then-directive order.

        Raises:
            NotARecordError: if `record` is not a dataclass or pydantic model instance
        """
        return self._evaluate(self.inspector.inspect(record))

    def _evaluate(self, descriptors: list[FieldDescriptor]) -> list[FieldError]:
        errors: list[FieldError] = []

        for descriptor in descriptors:
            if not descriptor.has_rules:
                continue

            if not descriptor.exported:
                errors.append(FieldError(
                    field=descriptor.name,
                    message=MSG_UNEXPORTED_FIELD,
                    code=ErrorCode.UNEXPORTED_FIELD,
                ))
                continue

            errors.extend(self.engine.evaluate(descriptor.name, descriptor.metadata, descriptor.value))

        return errors

    def validate(self, record: Any) -> Optional[Exception]:
        """Validate `record` and return the outcome as a value.

        Returns:
            None on success, NotARecordError for a non-record input,
            ValidationErrors wrapping every finding otherwise
        """
        start_time = time.perf_counter()

        try:
            descriptors = self.inspector.inspect(record)
        except NotARecordError as e:
            logger.debug("record_rejected", type=e.type_name)
            return e

        errors = self._evaluate(descriptors)

        logger.debug(
            "validation_complete",
            record=type(record).__name__,
            fields=len(descriptors),
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        if errors:
            return ValidationErrors(errors)
        return None

    def ensure_valid(self, record: Any) -> None:
        """Like validate(), but raise the error instead of returning it."""
        error = self.validate(record)
        if error is not None:
            raise error
