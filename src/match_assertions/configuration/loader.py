"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from match_assertions.value_rendering import DEFAULT_LIMIT_CHILDREN_COUNT

from .runtime_settings import DEFAULT_EXCEPTION_MESSAGE_TEMPLATE, AssertionSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> AssertionSettings:
    """Load and validate the assertion settings file."""
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

    exception_message_template = _parse_messages_section(parsed.get("messages"))
    limit_children_count = _parse_rendering_section(parsed.get("rendering"))

    return AssertionSettings(
        exception_message_template=exception_message_template,
        limit_children_count=limit_children_count,
    )


def _parse_messages_section(value: Any) -> str:
    section = _optional_mapping(value, "messages")
    template = section.get("exception_message", DEFAULT_EXCEPTION_MESSAGE_TEMPLATE)
    return _require_non_empty_string(template, "messages.exception_message")


def _parse_rendering_section(value: Any) -> int:
    section = _optional_mapping(value, "rendering")
    return _require_positive_int(
        section.get("limit_children_count", DEFAULT_LIMIT_CHILDREN_COUNT),
        "rendering.limit_children_count",
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    if not value.strip():
        raise ConfigurationError(f"{field_name} must not be empty.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
