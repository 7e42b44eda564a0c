from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Sequence

from .model import GherkinDocument

logger = logging.getLogger(__name__)

__all__ = [
    "Documentation",
    "DocumentationExample",
    "InvalidSeverity",
    "Rule",
    "RuleError",
    "SEVERITIES",
]

SEVERITIES = ("off", "warn", "error")


@dataclass(frozen=True)
class RuleError:
    """A problem reported by a rule."""

    message: str
    rule: str
    line: int
    column: int

    def pretty_output(self, path: str) -> str:
        return f"{path}:{self.line}:{self.column}: {self.message} [{self.rule}]"


@dataclass(frozen=True)
class DocumentationExample:
    title: str
    description: str
    config: Mapping[str, Any]


@dataclass(frozen=True)
class Documentation:
    """Static description of a rule, used to generate the rule reference."""

    description: str
    examples: Sequence[DocumentationExample] = field(default_factory=tuple)


class InvalidSeverity(Exception):
    """A rule was configured with an unknown severity."""

    def __init__(self, rule: str, severity: Any):
        super().__init__(f'"{severity}" is not a valid severity for {rule}')
        self.rule = rule
        self.severity = severity


@dataclass
class Rule:
    """A lint rule over a parsed feature file."""

    name: str
    check: Callable[[GherkinDocument], list[RuleError]] = field(repr=False)
    documentation: Documentation = field(repr=False)
    severity: str = "error"

    @property
    def enabled(self) -> bool:
        return self.severity != "off"

    def run(self, document: GherkinDocument) -> list[RuleError]:
        """Run the rule, or return nothing if it is turned off."""
        if not self.enabled:
            return []
        errors = self.check(document)
        logger.debug("%s reported %d error(s) in %s", self.name, len(errors), document.uri)
        return errors

    def update(self, severity: str) -> Rule:
        """Return a copy of the rule with a new severity."""
        if severity not in SEVERITIES:
            raise InvalidSeverity(self.name, severity)
        return replace(self, severity=severity)
