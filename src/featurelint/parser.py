from __future__ import annotations

import logging
from pathlib import Path

from gherkin.errors import ParserError
from gherkin.parser import Parser
from gherkin.token_scanner import TokenScanner

from .model import GherkinDocument

logger = logging.getLogger(__name__)

__all__ = ["FeatureParseError", "parse_file", "parse_text"]


class FeatureParseError(Exception):
    """A feature file could not be parsed."""

    def __init__(self, uri: str, message: str):
        super().__init__(f"{uri}: {message}" if uri else message)
        self.uri = uri
        self.message = message


def parse_text(text: str, uri: str = "") -> GherkinDocument:
    """Parse feature file text into a document."""
    try:
        raw = Parser().parse(TokenScanner(text))
    except ParserError as e:
        raise FeatureParseError(uri, str(e)) from e
    document = GherkinDocument.from_raw(raw, uri=uri)
    if document.feature is None:
        logger.debug("%s has no feature", uri or "<text>")
    return document


def parse_file(path: Path) -> GherkinDocument:
    """Parse a feature file."""
    logger.debug("Parsing %s", path)
    try:
        text = path.read_text(encoding="utf8")
    except (UnicodeDecodeError, OSError) as e:
        raise FeatureParseError(path.as_posix(), str(e)) from e
    return parse_text(text, uri=path.as_posix())
