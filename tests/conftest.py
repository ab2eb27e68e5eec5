"""Shared fixtures and sample records for fieldrules tests."""

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from fieldrules import Validator
from fieldrules.validators import RuleEngine


def rules(directives: str) -> dict:
    """Dataclass field metadata carrying a directive string."""
    return {"validate": directives}


@dataclass
class Account:
    code: str = field(default="abcd", metadata=rules("len:4"))
    status: str = field(default="active", metadata=rules("in:active,inactive"))
    age: int = field(default=30, metadata=rules("min:18;max:65"))
    name: str = field(default="abc", metadata=rules("min:2;max:4"))
    note: str = "anything goes"


@dataclass
class Plain:
    title: str = ""
    count: int = 0


class Profile(BaseModel):
    handle: str = Field(default="bob", json_schema_extra={"validate": "min:3;max:8"})
    level: int = Field(default=1, json_schema_extra={"validate": "in:1,2,3"})
    bio: str = ""


@pytest.fixture
def validator():
    """Validator with the default tag key and rules."""
    return Validator()


@pytest.fixture
def engine():
    return RuleEngine()


@pytest.fixture
def account():
    """An Account that passes every directive."""
    return Account()
