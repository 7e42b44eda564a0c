"""
Typed view of a parsed feature file.

The gherkin parser returns untyped dictionaries shaped like the cucumber ``GherkinDocument``
message. ``GherkinDocument.from_raw`` is the only place that walks those dictionaries; rules work
on the frozen dataclasses below.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

__all__ = [
    "Background",
    "DataTable",
    "DocString",
    "Examples",
    "Feature",
    "FeatureChild",
    "GherkinDocument",
    "Location",
    "Rule",
    "Scenario",
    "Step",
    "TableCell",
    "TableRow",
]

RawNode = Mapping[str, Any]


@dataclass(frozen=True)
class Location:
    """A 1-based line and an optional column."""

    line: int
    column: int | None = None


@dataclass(frozen=True)
class TableCell:
    location: Location
    value: str | None = None


@dataclass(frozen=True)
class TableRow:
    location: Location
    cells: tuple[TableCell, ...] = ()


@dataclass(frozen=True)
class DataTable:
    location: Location
    rows: tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class DocString:
    location: Location
    content: str = ""
    delimiter: str = '"""'


@dataclass(frozen=True)
class Step:
    """
    A step line.

    A step carries at most one argument: a data table or a doc string.
    """

    location: Location
    keyword: str
    text: str
    data_table: DataTable | None = None
    doc_string: DocString | None = None

    def __post_init__(self):
        assert (
            self.data_table is None or self.doc_string is None
        ), "a step takes either a data table or a doc string"


@dataclass(frozen=True)
class Examples:
    location: Location
    keyword: str = "Examples"
    name: str = ""
    table_header: TableRow | None = None
    table_body: tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class Scenario:
    location: Location
    keyword: str
    name: str = ""
    steps: tuple[Step, ...] = ()
    examples: tuple[Examples, ...] = ()

    @property
    def is_outline(self) -> bool:
        """A scenario with examples is a scenario outline."""
        return bool(self.examples)


@dataclass(frozen=True)
class Background:
    location: Location
    keyword: str
    name: str = ""
    steps: tuple[Step, ...] = ()


@dataclass(frozen=True)
class Rule:
    location: Location
    keyword: str
    name: str = ""
    children: tuple[FeatureChild, ...] = ()


@dataclass(frozen=True)
class FeatureChild:
    scenario: Scenario | None = None
    background: Background | None = None
    rule: Rule | None = None


@dataclass(frozen=True)
class Feature:
    location: Location
    keyword: str
    name: str = ""
    language: str = "en"
    children: tuple[FeatureChild, ...] = ()


@dataclass(frozen=True)
class GherkinDocument:
    uri: str = ""
    feature: Feature | None = None
    comments: Sequence[str] = field(default_factory=tuple, repr=False)

    @classmethod
    def from_raw(cls, raw: RawNode, *, uri: str = "") -> GherkinDocument:
        """Build the typed document from the parser's dictionary output."""
        feature_raw = raw.get("feature")
        return cls(
            uri=uri or raw.get("uri", ""),
            feature=_feature_from_raw(feature_raw) if feature_raw else None,
            comments=tuple(comment.get("text", "") for comment in raw.get("comments", [])),
        )


def _location_from_raw(raw: RawNode | None) -> Location:
    if not raw:
        return Location(line=0)
    return Location(line=raw.get("line", 0), column=raw.get("column"))


def _cell_from_raw(raw: RawNode) -> TableCell:
    return TableCell(location=_location_from_raw(raw.get("location")), value=raw.get("value"))


def _row_from_raw(raw: RawNode) -> TableRow:
    return TableRow(
        location=_location_from_raw(raw.get("location")),
        cells=tuple(_cell_from_raw(cell) for cell in raw.get("cells", [])),
    )


def _step_from_raw(raw: RawNode) -> Step:
    data_table = raw.get("dataTable")
    doc_string = raw.get("docString")
    return Step(
        location=_location_from_raw(raw.get("location")),
        keyword=raw.get("keyword", ""),
        text=raw.get("text", ""),
        data_table=DataTable(
            location=_location_from_raw(data_table.get("location")),
            rows=tuple(_row_from_raw(row) for row in data_table.get("rows", [])),
        )
        if data_table
        else None,
        doc_string=DocString(
            location=_location_from_raw(doc_string.get("location")),
            content=doc_string.get("content", ""),
            delimiter=doc_string.get("delimiter", '"""'),
        )
        if doc_string
        else None,
    )


def _examples_from_raw(raw: RawNode) -> Examples:
    header = raw.get("tableHeader")
    return Examples(
        location=_location_from_raw(raw.get("location")),
        keyword=raw.get("keyword", "Examples"),
        name=raw.get("name", ""),
        table_header=_row_from_raw(header) if header else None,
        table_body=tuple(_row_from_raw(row) for row in raw.get("tableBody", [])),
    )


def _child_from_raw(raw: RawNode) -> FeatureChild:
    scenario = raw.get("scenario")
    background = raw.get("background")
    rule = raw.get("rule")
    return FeatureChild(
        scenario=Scenario(
            location=_location_from_raw(scenario.get("location")),
            keyword=scenario.get("keyword", ""),
            name=scenario.get("name", ""),
            steps=tuple(_step_from_raw(step) for step in scenario.get("steps", [])),
            examples=tuple(_examples_from_raw(ex) for ex in scenario.get("examples", [])),
        )
        if scenario
        else None,
        background=Background(
            location=_location_from_raw(background.get("location")),
            keyword=background.get("keyword", ""),
            name=background.get("name", ""),
            steps=tuple(_step_from_raw(step) for step in background.get("steps", [])),
        )
        if background
        else None,
        rule=Rule(
            location=_location_from_raw(rule.get("location")),
            keyword=rule.get("keyword", ""),
            name=rule.get("name", ""),
            children=tuple(_child_from_raw(child) for child in rule.get("children", [])),
        )
        if rule
        else None,
    )


def _feature_from_raw(raw: RawNode) -> Feature:
    return Feature(
        location=_location_from_raw(raw.get("location")),
        keyword=raw.get("keyword", ""),
        name=raw.get("name", ""),
        language=raw.get("language", "en"),
        children=tuple(_child_from_raw(child) for child in raw.get("children", [])),
    )
