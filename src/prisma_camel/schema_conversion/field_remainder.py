"""Tokenizer-driven rewrite of the text that follows a field name.

A field declaration line is ``<indent><name><remainder>``. The remainder carries
the field type, its attributes and an optional trailing comment, e.g.::

    " user_profile? @relation(fields: [author_id], references: [id]) // owner"

The helpers below scan the remainder once into tokens so that string literals,
comments and ``@map(...)`` arguments are never rewritten, while the type
reference and the remaining identifiers are.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from prisma_camel.case_conversion import is_snake_case, to_camel_case, to_pascal_case

SCALAR_TYPE_NAMES = frozenset(
    {
        "String",
        "Boolean",
        "Int",
        "BigInt",
        "Float",
        "Decimal",
        "DateTime",
        "Json",
        "Bytes",
        "Unsupported",
    }
)

_MAP_ATTRIBUTE = "map"

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<comment>//.*)
    |(?P<string>"(?:[^"\\]|\\.)*"?)
    |(?P<identifier>[A-Za-z_][A-Za-z0-9_]*)
    |(?P<whitespace>\s+)
    |(?P<symbol>.)
    """,
    re.VERBOSE | re.DOTALL,
)
_FIELD_TYPE_PATTERN = re.compile(r"\s+([A-Za-z_][A-Za-z0-9_]*)(?:\?|\[\])?")


class TokenKind(str, Enum):
    """Lexical classes of a field remainder."""

    COMMENT = "comment"
    STRING = "string"
    IDENTIFIER = "identifier"
    WHITESPACE = "whitespace"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class RemainderToken:
    """One lexical unit of a field remainder."""

    kind: TokenKind
    text: str
    attribute: str | None = None
    in_attribute_name: bool = False


def tokenize_remainder(remainder: str) -> Iterator[RemainderToken]:
    """Yield tokens annotated with the attribute that owns them.

    ``attribute`` is the name of the attribute whose parenthesized argument list
    encloses the token (``"relation"`` for ``@relation(...)``, ``"db.VarChar"``
    for ``@db.VarChar(...)``); ``in_attribute_name`` marks the tokens spelling
    an attribute name itself.
    """
    owners: list[str | None] = []
    reading_attribute: str | None = None
    for match in _TOKEN_PATTERN.finditer(remainder):
        kind = TokenKind(match.lastgroup)
        text = match.group()
        if reading_attribute is not None:
            if kind is TokenKind.IDENTIFIER or text in {".", "@"}:
                reading_attribute += "" if text == "@" else text
                yield RemainderToken(kind, text, _current_owner(owners), in_attribute_name=True)
                continue
            if text == "(":
                owners.append(reading_attribute)
                reading_attribute = None
                yield RemainderToken(kind, text, _current_owner(owners))
                continue
            reading_attribute = None

        if kind is TokenKind.SYMBOL and text == "@":
            reading_attribute = ""
            yield RemainderToken(kind, text, _current_owner(owners), in_attribute_name=True)
            continue
        if kind is TokenKind.SYMBOL and text == "(":
            owners.append(_current_owner(owners))
        token = RemainderToken(kind, text, _current_owner(owners))
        if kind is TokenKind.SYMBOL and text == ")" and owners:
            owners.pop()
        yield token


def _current_owner(owners: list[str | None]) -> str | None:
    return owners[-1] if owners else None


def convert_field_remainder(remainder: str) -> str:
    """Rename snake_case identifiers in a field remainder.

    The first identifier is the type position and is rendered in PascalCase,
    later ones (relation field lists, attribute arguments) in camelCase.
    ``@map(...)`` arguments, string literals (including a relation's ``map:``
    argument) and comments are copied verbatim. Running the function on its own
    output returns that output unchanged.
    """
    parts: list[str] = []
    expecting_type = True
    for token in tokenize_remainder(remainder):
        if token.kind is not TokenKind.IDENTIFIER or token.in_attribute_name:
            parts.append(token.text)
            continue
        if token.attribute == _MAP_ATTRIBUTE:
            parts.append(token.text)
            continue
        if expecting_type:
            expecting_type = False
            parts.append(to_pascal_case(token.text) if is_snake_case(token.text) else token.text)
            continue
        parts.append(to_camel_case(token.text) if is_snake_case(token.text) else token.text)
    return "".join(parts)


def field_attribute_names(remainder: str) -> tuple[str, ...]:
    """Return the names of the attributes declared in a field remainder."""
    names: list[str] = []
    current: list[str] | None = None
    for token in tokenize_remainder(remainder):
        if token.in_attribute_name:
            if token.text == "@":
                if current:
                    names.append("".join(current))
                current = []
            elif current is not None:
                current.append(token.text)
            continue
        if current is not None:
            if current:
                names.append("".join(current))
            current = None
    if current:
        names.append("".join(current))
    return tuple(names)


def has_field_map_annotation(remainder: str) -> bool:
    """True when the remainder already carries a field-level ``@map``."""
    return _MAP_ATTRIBUTE in field_attribute_names(remainder)


def split_trailing_comment(remainder: str) -> tuple[str, str]:
    """Split a remainder into ``(body, comment)``; ``comment`` keeps its ``//``."""
    offset = 0
    for token in tokenize_remainder(remainder):
        if token.kind is TokenKind.COMMENT:
            return remainder[:offset], token.text
        offset += len(token.text)
    return remainder, ""


def field_type_name(remainder: str) -> str | None:
    """Return the type token that directly follows the field name."""
    match = _FIELD_TYPE_PATTERN.match(remainder)
    if match is None:
        return None
    return match.group(1)


def is_relation_type(type_name: str | None) -> bool:
    """True when ``type_name`` names a declared model/type rather than a scalar."""
    return type_name is not None and type_name not in SCALAR_TYPE_NAMES
