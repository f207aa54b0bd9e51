"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "match-assertions.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Assertion configuration template for match-assertions.
# Every setting is optional; remove a key to keep its default.

messages:
  # Failure message used when a matcher is not a supported kind.
  # Available placeholders: ${customMessage}, ${exceptionMessage}.
  exception_message: "${customMessage}${exceptionMessage}"

rendering:
  # Maximum number of container entries shown in failure messages.
  limit_children_count: 250
"""


def build_placeholder_configuration() -> str:
    """Build a YAML assertion configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the assertion configuration template to the requested output path.

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
