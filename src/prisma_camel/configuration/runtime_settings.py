"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class SchemaFileSettings:
    """Location and encoding of the Prisma schema to convert."""

    path: Path
    output: Path | None
    encoding: str = DEFAULT_ENCODING

    @property
    def resolved_output(self) -> Path:
        """Destination path; the input file is overwritten when no output is set."""
        return self.output if self.output is not None else self.path


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaFileSettings
