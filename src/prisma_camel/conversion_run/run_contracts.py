"""Conversion run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prisma_camel.configuration.runtime_settings import DEFAULT_ENCODING


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for converting one schema file."""

    schema_path: str
    output_path: str | None = None
    encoding: str = DEFAULT_ENCODING
    dry_run: bool = False


@dataclass(frozen=True)
class ConversionOutcome:
    """Output contract for one completed conversion."""

    input_path: Path
    output_path: Path
    converted_text: str
    changed: bool
    written: bool
