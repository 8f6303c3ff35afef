"""Convert Prisma schemas from snake_case to camelCase while keeping database names."""

import logging

from .case_conversion import is_snake_case, to_camel_case, to_pascal_case
from .schema_conversion import convert_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "convert_schema",
    "is_snake_case",
    "to_camel_case",
    "to_pascal_case",
]
