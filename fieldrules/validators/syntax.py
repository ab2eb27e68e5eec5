"""Directive grammar.

    metadata  := directive (";" directive)*
    directive := kind ":" argument

Whitespace before a directive is ignored. Everything after the kind is kept
verbatim, so "len:4 " has the argument "4 ".
"""

import re

from fieldrules.validators.errors import InvalidSyntaxError
from fieldrules.validators.models import Directive

DIRECTIVE_SEPARATOR = ";"
KIND_SEPARATOR = ":"
LIST_SEPARATOR = ","

# Optional sign followed by ASCII digits only: no spaces, no underscores
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def split_directives(metadata: str) -> list[str]:
    """Split a metadata string into raw directive strings, order preserved."""
    return [part.lstrip() for part in metadata.split(DIRECTIVE_SEPARATOR)]


def parse_directive(raw: str) -> Directive:
    """Split one directive on its first ':'.

    Raises:
        InvalidSyntaxError: if there is no ':' at all
    """
    kind, sep, argument = raw.partition(KIND_SEPARATOR)
    if not sep:
        raise InvalidSyntaxError(raw)
    return Directive(kind=kind, argument=argument, raw=raw)


def parse_int(argument: str) -> int:
    """Parse a decimal integer argument such as '4', '-1' or '+18'."""
    if not _INT_PATTERN.fullmatch(argument):
        raise InvalidSyntaxError(argument)
    return int(argument)


def parse_literals(argument: str) -> list[str]:
    """Split an `in` argument into literals; any empty literal is malformed."""
    literals = argument.split(LIST_SEPARATOR)
    if any(literal == "" for literal in literals):
        raise InvalidSyntaxError(argument)
    return literals
