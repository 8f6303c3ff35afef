"""Identifier case conversion exports."""

from .identifier_case import is_snake_case, to_camel_case, to_pascal_case

__all__ = [
    "is_snake_case",
    "to_camel_case",
    "to_pascal_case",
]
