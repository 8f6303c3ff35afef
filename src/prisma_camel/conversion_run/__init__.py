"""Conversion run domain exports."""

from .conversion_run_use_case import (
    ConversionRunError,
    execute_schema_conversion,
    request_from_configuration,
)
from .run_contracts import ConversionOutcome, ConversionRequest

__all__ = [
    "ConversionRequest",
    "ConversionOutcome",
    "ConversionRunError",
    "execute_schema_conversion",
    "request_from_configuration",
]
