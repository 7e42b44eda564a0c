"""Fixtures for the featurelint features."""
from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Iterable

from behave import fixture, use_fixture
from behave.model import Scenario

from features.steps.lint_env import LintContext, LintEnvironment


@fixture
def lint_environment(context: LintContext) -> Iterable[LintEnvironment]:
    with TemporaryDirectory() as tmp_dir:
        lint = LintEnvironment(_path=Path(tmp_dir), verbose=False, project_files={})
        context.lint = lint
        context.result = None
        yield lint


def before_scenario(context: LintContext, _scenario: Scenario):
    use_fixture(lint_environment, context)
