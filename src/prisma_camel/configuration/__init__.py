"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_ENCODING, Configuration, SchemaFileSettings

__all__ = [
    "Configuration",
    "SchemaFileSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ENCODING",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
