"""Command line interface entry point."""

from __future__ import annotations

import re
import sys

import click
import yaml

from match_assertions.assertion_framework import AssertionFailure
from match_assertions.assertions import create_assertions
from match_assertions.configuration import (
    DEFAULT_CONFIG_FILENAME,
    AssertionSettings,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="match-assertions")
def cli() -> None:
    """Deep match assertion utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML assertion configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML assertion configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option("--actual", "actual_text", required=True, help="Actual value as YAML")
@click.option("--matcher", "matcher_text", required=False, help="Matcher value as YAML")
@click.option("--regex", "regex_text", required=False, help="Regular expression matcher")
@click.option("--refute", is_flag=True, default=False, help="Expect the value not to match.")
@click.option("--message", required=False, help="Custom message prefixed to failures")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML assertion configuration file",
)
def check(
    actual_text: str,
    matcher_text: str | None,
    regex_text: str | None,
    refute: bool,
    message: str | None,
    config_path: str | None,
) -> None:
    """Check an actual value against a matcher and report the outcome."""
    if (matcher_text is None) == (regex_text is None):
        raise click.UsageError("Provide exactly one of --matcher or --regex.")
    try:
        settings = load_configuration(config_path) if config_path else AssertionSettings()
        actual = _parse_yaml(actual_text, "--actual")
        matcher = _compile_regex(regex_text) if regex_text is not None else _parse_yaml(
            matcher_text, "--matcher"
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    registry = create_assertions(settings)
    entry_point = registry.refute.match if refute else registry.assert_.match
    try:
        entry_point(actual, matcher, message)
    except AssertionFailure as exc:
        raise CliError(str(exc)) from exc
    click.echo("ok")


def _parse_yaml(text: str | None, option_name: str) -> object:
    try:
        return yaml.safe_load(text or "")
    except yaml.YAMLError as exc:
        raise CliError(f"{option_name} is not valid YAML: {exc}") from exc


def _compile_regex(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise CliError(f"--regex is not a valid regular expression: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
