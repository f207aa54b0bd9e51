"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_EXCEPTION_MESSAGE_TEMPLATE, AssertionSettings

__all__ = [
    "AssertionSettings",
    "DEFAULT_EXCEPTION_MESSAGE_TEMPLATE",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
