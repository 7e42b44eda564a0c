#!/usr/bin/env python
"""
Lint Gherkin feature files.

Rules:

* no-unused-variables
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

import click

from .config import InvalidInclude, LintConfiguration, NoProjectFile, UnknownRule
from .parser import FeatureParseError, parse_file
from .rule import InvalidSeverity, RuleError

logger = logging.getLogger("featurelint")

__all__ = ["main"]


@click.command()
@click.option("--list-rules", is_flag=True, default=False, help="List the rules and exit")
@click.option("--verbose", is_flag=True, default=False)
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.version_option(package_name="featurelint")
def main(verbose: bool, list_rules: bool, files: Sequence[Path]):
    if verbose:
        logging.basicConfig()
        logger.setLevel(logging.DEBUG)

    try:
        config = LintConfiguration.get_config()
    except NoProjectFile as e:
        click.echo(
            f'"{e.proj_filename}" could not be located in the search paths: {e.search_paths!s}'
        )
        sys.exit(1)
    except (InvalidInclude, UnknownRule, InvalidSeverity) as e:
        click.echo(f"Invalid configuration: {e}")
        sys.exit(1)

    if list_rules:
        _list_rules(config)
        return

    _run_rules(config, files)


def _list_rules(config: LintConfiguration):
    for rule in config.rules:
        click.echo(f"{rule.name} ({rule.severity}): {rule.documentation.description}")


def _resolve_files(config: LintConfiguration, files: Sequence[Path]) -> Sequence[Path]:
    # Recursively search directories provided on the command line.
    found_files = [
        file_
        for part in files
        for file_ in (sorted(part.rglob("*")) if part.is_dir() else [part])
        if config.include.search(file_.as_posix()) and file_.is_file()
    ]
    if not found_files:
        click.echo("No files to lint.")
        sys.exit(0)
    else:
        click.echo("Linting the following files:")
        for file_ in found_files:
            click.echo(f"- {file_}")
    return found_files


def _lint_file(config: LintConfiguration, path: Path) -> list[tuple[str, RuleError]]:
    """Return the (severity, error) pairs of every enabled rule."""
    document = parse_file(path)
    return [
        (rule.severity, error) for rule in config.enabled_rules for error in rule.run(document)
    ]


def _run_rules(config: LintConfiguration, files: Sequence[Path]):
    found_files = _resolve_files(config, files)
    _exit = 0
    for path in found_files:
        try:
            results = _lint_file(config, path)
        except FeatureParseError as e:
            click.echo(f"{path.as_posix()} could not be parsed:")
            click.echo(e.message)
            _exit = 1
            continue
        for severity, error in results:
            click.echo(f"{severity}: {error.pretty_output(path.as_posix())}")
            if severity == "error":
                _exit = 1
    if _exit:
        click.echo("Linting failed.")
        sys.exit(1)
    click.echo("Linting ran successfully")
