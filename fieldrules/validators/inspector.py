"""Record Inspector — enumerates the declared fields of a record.

Records are dataclass instances and pydantic model instances. Directive
strings are read from:

    @dataclass
    class User:
        name: str = field(metadata={"validate": "min:2;max:32"})

    class User(BaseModel):
        name: str = Field(json_schema_extra={"validate": "min:2;max:32"})
"""

import dataclasses
from typing import Any

from pydantic import BaseModel

from fieldrules.validators.errors import NotARecordError
from fieldrules.validators.models import FieldDescriptor

DEFAULT_TAG_KEY = "validate"


def is_record(value: Any) -> bool:
    """True for dataclass and pydantic model instances, False for their classes."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def is_exported(name: str) -> bool:
    """Underscore-prefixed names are private to the declaring class."""
    return not name.startswith("_")


class RecordInspector:
    """Reads field descriptors off a record without mutating it."""

    def __init__(self, tag_key: str = DEFAULT_TAG_KEY):
        self.tag_key = tag_key

    def inspect(self, record: Any) -> list[FieldDescriptor]:
        """List every declared field of `record` in declaration order.

        Raises:
            NotARecordError: if `record` is not a dataclass or pydantic model instance
        """
        if not is_record(record):
            raise NotARecordError(record)

        if isinstance(record, BaseModel):
            return self._inspect_model(record)
        return self._inspect_dataclass(record)

    def _inspect_dataclass(self, record: Any) -> list[FieldDescriptor]:
        return [
            self._describe(record, f.name, f.metadata)
            for f in dataclasses.fields(record)
        ]

    def _inspect_model(self, record: BaseModel) -> list[FieldDescriptor]:
        descriptors = []
        for name, info in type(record).model_fields.items():
            extra = info.json_schema_extra
            # json_schema_extra may also be a callable schema hook
            descriptors.append(self._describe(record, name, extra if isinstance(extra, dict) else {}))
        return descriptors

    def _describe(self, record: Any, name: str, metadata: Any) -> FieldDescriptor:
        raw = metadata.get(self.tag_key) if metadata else None
        return FieldDescriptor(
            name=name,
            exported=is_exported(name),
            metadata="" if raw is None else str(raw),
            value=getattr(record, name, None),
        )
