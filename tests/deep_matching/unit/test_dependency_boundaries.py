"""Boundary tests for deep_matching and value_rendering internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "match_assertions"


def test_collaborators_do_not_import_the_assertion_layer() -> None:
    collaborator_dirs = (
        _package_root() / "deep_matching",
        _package_root() / "value_rendering",
    )
    forbidden_import_fragments = (
        "match_assertions.assertion_framework",
        "match_assertions.assertions",
        "match_assertions.configuration",
        "match_assertions.cli",
    )

    for collaborator_dir in collaborator_dirs:
        for module_path in collaborator_dir.glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert fragment not in text, f"Forbidden dependency in {module_path}: {fragment}"
