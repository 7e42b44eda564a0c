"""Lint Gherkin feature files."""
from __future__ import annotations

from .model import GherkinDocument
from .parser import FeatureParseError, parse_file, parse_text
from .rule import Rule, RuleError
from .rules import DEFAULT_RULES

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RULES",
    "FeatureParseError",
    "GherkinDocument",
    "Rule",
    "RuleError",
    "parse_file",
    "parse_text",
]
