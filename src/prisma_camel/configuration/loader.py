"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_ENCODING, Configuration, SchemaFileSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    return Configuration(path=path, schema=schema)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaFileSettings:
    section = _require_mapping(value, "schema")
    schema_path = _resolve_path(
        base_path, _require_non_empty_string(section.get("path"), "schema.path")
    )
    output_value = _optional_string(section.get("output"), "schema.output")
    output_path = _resolve_path(base_path, output_value) if output_value else None
    encoding = _optional_string(section.get("encoding"), "schema.encoding") or DEFAULT_ENCODING
    return SchemaFileSettings(path=schema_path, output=output_path, encoding=encoding)


def _resolve_path(base_path: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if candidate.is_absolute():
        return candidate
    return (base_path / candidate).resolve()


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} section must be a mapping.")
    return value


def _require_non_empty_string(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{label} must be a non-empty string.")
    return value.strip()


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{label} must be a string.")
    stripped = value.strip()
    return stripped or None
