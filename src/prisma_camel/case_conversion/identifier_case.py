"""snake_case detection and camelCase/PascalCase rendering."""

from __future__ import annotations

import re

_SNAKE_CASE_PATTERN = re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)+")
_UNDERSCORE_LETTER_PATTERN = re.compile(r"_([a-z])")


def is_snake_case(value: str) -> bool:
    """Return True when ``value`` is a multi-word lowercase snake_case identifier."""
    return _SNAKE_CASE_PATTERN.fullmatch(value) is not None


def to_camel_case(value: str) -> str:
    """Drop every underscore that precedes a lowercase letter and uppercase the letter.

    An underscore followed by a digit or an uppercase letter is kept as-is, so the
    function is safe to call on text that is not snake_case at all.
    """
    return _UNDERSCORE_LETTER_PATTERN.sub(lambda match: match.group(1).upper(), value)


def to_pascal_case(value: str) -> str:
    """Return ``to_camel_case(value)`` with its first character uppercased."""
    camel = to_camel_case(value)
    return camel[:1].upper() + camel[1:]
