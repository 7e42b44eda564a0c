from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

from featurelint.cli import main

UNUSED_COLUMN = dedent(
    """\
    Feature: Outline
      Scenario Outline: Eating
        Given I have <a> cucumbers

        Examples:
          | a | b |
          | 1 | 2 |
    """
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "pyproject.toml").write_text("[tool.featurelint]\n")
    (tmp_path / "features").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_clean_file(project: Path):
    (project / "features" / "ok.feature").write_text(
        UNUSED_COLUMN.replace("| a | b |", "| a |").replace("| 1 | 2 |", "| 1 |")
    )
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 0, result.output
    assert "- features/ok.feature" in result.output
    assert "Linting ran successfully" in result.output


def test_errors_fail(project: Path):
    (project / "features" / "bad.feature").write_text(UNUSED_COLUMN)
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 1, result.output
    assert (
        'error: features/bad.feature:6:13: Examples table variable "b" is not used in any step'
        " [no-unused-variables]"
    ) in result.output
    assert "Linting failed." in result.output


def test_warnings_pass(project: Path):
    (project / "pyproject.toml").write_text(
        '[tool.featurelint.rules]\nno-unused-variables = "warn"\n'
    )
    (project / "features" / "bad.feature").write_text(UNUSED_COLUMN)
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 0, result.output
    assert "warn: features/bad.feature:6:13:" in result.output


def test_no_files(project: Path):
    (project / "features" / "steps.py").write_text("")
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 0, result.output
    assert "No files to lint." in result.output


def test_parse_error(project: Path):
    (project / "features" / "broken.feature").write_text(
        "Feature: Broken\n  Scenario: Broken\n    Given a table\n      | a |\n      | b | c |\n"
    )
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 1, result.output
    assert "features/broken.feature could not be parsed:" in result.output


def test_undecodable_file(project: Path):
    """Test that a file that is not UTF-8 fails without stopping the other files."""
    (project / "features" / "latin.feature").write_bytes(b"Feature: caf\xe9\n")
    (project / "features" / "z.feature").write_text(UNUSED_COLUMN)
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 1, result.output
    assert "features/latin.feature could not be parsed:" in result.output
    assert "error: features/z.feature:6:13:" in result.output
    assert "Linting failed." in result.output


def test_invalid_include(project: Path):
    (project / "pyproject.toml").write_text("[tool.featurelint]\ninclude = '('\n")
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 1, result.output
    assert 'Invalid configuration: include pattern "(" is invalid' in result.output


def test_invalid_configuration(project: Path):
    (project / "pyproject.toml").write_text('[tool.featurelint.rules]\nno-such-rule = "error"\n')
    result = CliRunner().invoke(main, ["features"])
    assert result.exit_code == 1, result.output
    assert "Invalid configuration: Unknown rules: no-such-rule" in result.output


def test_list_rules(project: Path):
    result = CliRunner().invoke(main, ["--list-rules"])
    assert result.exit_code == 0, result.output
    assert (
        "no-unused-variables (error): Disallows unused variables in scenario outlines."
        in result.output
    )
