"""End-to-end tests for Validator and the package-level helpers."""

from dataclasses import dataclass, field

import pytest
import structlog.testing

import fieldrules
from conftest import Account, Plain, Profile, rules
from fieldrules import NotARecordError, ValidationErrors, Validator
from fieldrules.validators.models import ErrorCode


@dataclass
class Code:
    Code: str = field(metadata=rules("len:4"))


@dataclass
class Status:
    Status: str = field(metadata=rules("in:active,inactive"))


@dataclass
class Age:
    Age: int = field(metadata=rules("min:18;max:65"))


@dataclass
class Name:
    Name: str = field(metadata=rules("min:2;max:4"))


@dataclass
class Tag:
    Tag: str = field(metadata=rules("in:,a,b"))


@dataclass
class Private:
    _token: str = field(default="", metadata=rules("this is not even a directive"))
    public: str = field(default="abc", metadata=rules("len:3"))


@dataclass
class Flags:
    enabled: bool = field(default=True, metadata=rules("len:2;in:yes,no;min:3;max:0"))
    ratio: float = field(default=0.5, metadata=rules("min:1"))


class TestScenarios:

    def test_len_passes(self, validator):
        assert validator.validate(Code("abcd")) is None

    @pytest.mark.parametrize("record,rendered", [
        (Code("abc"), "Code: should have length 4"),
        (Status("paused"), "Status: should be one of active,inactive"),
        (Age(10), "Age: should be at least 18"),
        (Name("abcdef"), "Name: should have length at most 4"),
        (Tag("a"), "Tag: invalid validator syntax"),
    ])
    def test_single_violation(self, validator, record, rendered):
        err = validator.validate(record)
        assert isinstance(err, ValidationErrors)
        assert len(err.errors) == 1
        assert str(err.errors[0]) == rendered
        # A lone finding renders as just its message
        assert str(err) == rendered.split(": ", 1)[1]

    def test_age_within_range(self, validator):
        assert validator.validate(Age(30)) is None


class TestValidate:

    @pytest.mark.parametrize("value", [None, 1, "abc", {"Code": "abc"}, [Code("abc")], Code, object()])
    def test_not_a_record(self, validator, value):
        err = validator.validate(value)
        assert isinstance(err, NotARecordError)
        assert not isinstance(err, ValidationErrors)

    def test_no_metadata_anywhere(self, validator):
        assert validator.validate(Plain(title="", count=-1)) is None

    def test_valid_record(self, validator, account):
        assert validator.validate(account) is None

    def test_unexported_field_single_violation(self, validator):
        err = validator.validate(Private())
        assert [(e.field, e.message, e.code) for e in err.errors] == [
            ("_token", "validation for unexported field is not allowed", ErrorCode.UNEXPORTED_FIELD),
        ]

    def test_unsupported_types_pass(self, validator):
        assert validator.validate(Flags()) is None

    def test_two_invalid_fields_rendered_in_order(self, validator):
        err = validator.validate(Account(code="abc", age=70))
        assert str(err) == "code: should have length 4\nage: should be at most 65"
        assert err.fields == ["code", "age"]

    def test_field_then_directive_order(self, validator):
        err = validator.validate(Account(code="a", status="gone", age=10, name="abcdefg"))
        assert [str(e) for e in err.errors] == [
            "code: should have length 4",
            "status: should be one of active,inactive",
            "age: should be at least 18",
            "name: should have length at most 4",
        ]

    def test_syntax_error_continues_with_siblings(self, validator):
        @dataclass
        class Mixed:
            Name: str = field(default="abcdef", metadata=rules("nocolon;max:4"))
            Code: str = field(default="abc", metadata=rules("len:4"))

        err = validator.validate(Mixed())
        assert [str(e) for e in err.errors] == [
            "Name: invalid validator syntax",
            "Name: should have length at most 4",
            "Code: should have length 4",
        ]

    def test_idempotent(self, validator):
        record = Account(code="x", status="?", age=1, name="")
        first = validator.validate(record)
        second = validator.validate(record)
        assert first.errors == second.errors
        assert str(first) == str(second)

    def test_pydantic_record(self, validator):
        err = validator.validate(Profile(handle="al", level=7))
        assert str(err) == "handle: should have length at least 3\nlevel: should be one of 1,2,3"

    def test_custom_tag_key(self):
        @dataclass
        class Tagged:
            code: str = field(default="abc", metadata={"check": "len:4"})

        assert Validator().validate(Tagged()) is None
        err = Validator(tag_key="check").validate(Tagged())
        assert str(err) == "should have length 4"


class TestEnsureValid:

    def test_passes_silently(self, validator, account):
        validator.ensure_valid(account)

    def test_raises_aggregate(self, validator):
        with pytest.raises(ValidationErrors) as exc_info:
            validator.ensure_valid(Code("abc"))
        assert len(exc_info.value) == 1

    def test_raises_not_a_record(self, validator):
        with pytest.raises(NotARecordError):
            validator.ensure_valid({"Code": "abc"})


class TestPackageHelpers:

    def test_validate(self):
        assert fieldrules.validate(Code("abcd")) is None
        assert str(fieldrules.validate(Code("abc"))) == "should have length 4"

    def test_ensure_valid(self):
        with pytest.raises(ValidationErrors):
            fieldrules.ensure_valid(Age(99))

    def test_shared_validator_is_cached(self):
        assert fieldrules.get_validator() is fieldrules.get_validator()
        assert fieldrules.get_validator().tag_key == "validate"


class TestLogging:

    def test_events(self, validator):
        with structlog.testing.capture_logs() as logs:
            validator.validate(Name("abcdef"))
            validator.validate(Tag("a"))
            validator.validate("not a record")

        events = [entry["event"] for entry in logs]
        assert events == [
            "validation_complete",
            "invalid_validator_syntax",
            "validation_complete",
            "record_rejected",
        ]
        assert logs[0]["record"] == "Name"
        assert logs[0]["total_errors"] == 1
        assert logs[0]["fields"] == 1
        assert logs[1]["directive"] == "in:,a,b"
        assert logs[3]["type"] == "str"
