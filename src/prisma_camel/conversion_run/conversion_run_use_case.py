"""Schema conversion use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from prisma_camel.configuration.runtime_settings import Configuration
from prisma_camel.schema_conversion import convert_schema

from .run_contracts import ConversionOutcome, ConversionRequest

_LOGGER = logging.getLogger(__name__)


class ConversionRunError(Exception):
    """Raised when a schema file cannot be converted."""


def request_from_configuration(
    configuration: Configuration, *, dry_run: bool = False
) -> ConversionRequest:
    """Build a conversion request from a loaded configuration file."""
    return ConversionRequest(
        schema_path=str(configuration.schema.path),
        output_path=str(configuration.schema.resolved_output),
        encoding=configuration.schema.encoding,
        dry_run=dry_run,
    )


def execute_schema_conversion(request: ConversionRequest) -> ConversionOutcome:
    """Read, convert and (unless dry-running) write one schema file."""
    input_path = Path(request.schema_path)
    output_path = Path(request.output_path) if request.output_path else input_path

    schema_text = _read_schema(input_path, request.encoding)
    converted_text = convert_schema(schema_text)
    changed = converted_text != schema_text
    _LOGGER.debug("Converted %s (changed=%s)", input_path, changed)

    if request.dry_run:
        return ConversionOutcome(
            input_path=input_path.resolve(),
            output_path=output_path.resolve(),
            converted_text=converted_text,
            changed=changed,
            written=False,
        )

    _write_schema(output_path, converted_text, request.encoding)
    return ConversionOutcome(
        input_path=input_path.resolve(),
        output_path=output_path.resolve(),
        converted_text=converted_text,
        changed=changed,
        written=True,
    )


def _read_schema(path: Path, encoding: str) -> str:
    if not path.exists():
        raise ConversionRunError(f"File not found: {path}")
    if not path.is_file():
        raise ConversionRunError(f"Not a file: {path}")
    try:
        # newline="" keeps CRLF line endings intact for the converter
        with path.open(encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ConversionRunError(f"Failed to read schema file {path}: {exc}") from exc


def _write_schema(path: Path, text: str, encoding: str) -> None:
    _LOGGER.debug("Writing converted schema to %s", path)
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(text)
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        raise ConversionRunError(f"Failed to write schema file {path}: {exc}") from exc
