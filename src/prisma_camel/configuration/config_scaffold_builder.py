"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "prisma-camel.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for prisma-camel.
# Replace the <REQUIRED> placeholder before running convert --config.
# Relative paths are resolved against the directory of this file.

schema:
  # Prisma schema file to convert.
  path: "<REQUIRED>"
  # Where to write the converted schema; omit to overwrite schema.path.
  # output: "<OPTIONAL>"
  # Text encoding used to read and write the schema (default utf-8).
  # encoding: "utf-8"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
