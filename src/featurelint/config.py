from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Mapping, Pattern, Sequence

import toml

from .rule import Rule
from .rules import DEFAULT_RULES

logger = logging.getLogger(__name__)

__all__ = ["InvalidInclude", "LintConfiguration", "NoProjectFile", "UnknownRule"]

DEFAULT_INCLUDE = r"\.feature$"


@dataclass
class LintConfiguration:
    """Configuration for running all of the rules."""

    name: str
    rules: Sequence[Rule]
    include: Pattern[str]
    _config_file: ClassVar[Path] = Path("pyproject.toml")

    @property
    def enabled_rules(self) -> Sequence[Rule]:
        return [rule for rule in self.rules if rule.enabled]

    @classmethod
    def get_config(cls) -> LintConfiguration:
        pyproject = cls.get_configfile()
        logger.debug("Reading configuration from %s", pyproject)
        lint_config: Mapping[str, Any] = (
            toml.load(pyproject).get("tool", {}).get("featurelint", {})
        )
        return cls.from_mapping(lint_config, name=pyproject.parent.name)

    @classmethod
    def from_mapping(cls, lint_config: Mapping[str, Any], name: str = "") -> LintConfiguration:
        try:
            include = re.compile(lint_config.get("include", DEFAULT_INCLUDE))
        except re.error as e:
            raise InvalidInclude(lint_config["include"], e) from e
        severities: Mapping[str, str] = lint_config.get("rules", {})
        unknown = [rule_name for rule_name in severities if rule_name not in DEFAULT_RULES]
        if unknown:
            raise UnknownRule(unknown)
        rules = [
            rule.update(severities[rule_name]) if rule_name in severities else rule
            for rule_name, rule in DEFAULT_RULES.items()
        ]
        return LintConfiguration(name=name, rules=rules, include=include)

    @classmethod
    def get_configfile(cls) -> Path:
        cwd = Path.cwd().absolute()
        paths = [cwd] + list(cwd.parents)
        for path in paths:
            pyproject = path / cls._config_file
            if pyproject.exists() and pyproject.is_file():
                break
        else:
            raise NoProjectFile(cls._config_file, search_paths=paths)
        return pyproject


class NoProjectFile(Exception):
    """No project file could be found."""

    def __init__(self, proj_filename: Path, search_paths: Sequence[Path]):
        self.proj_filename = proj_filename.as_posix()
        self.search_paths = [path.as_posix() for path in search_paths]


class InvalidInclude(Exception):
    """The include pattern is not a valid regular expression."""

    def __init__(self, pattern: str, error: re.error):
        super().__init__(f'include pattern "{pattern}" is invalid: {error}')
        self.pattern = pattern


class UnknownRule(Exception):
    """The configuration names rules that do not exist."""

    def __init__(self, rule_names: Sequence[str]):
        super().__init__(f"Unknown rules: {', '.join(rule_names)}")
        self.rule_names = list(rule_names)
