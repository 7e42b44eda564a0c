"""
Disallow unused variables in scenario outlines.

Every column of an outline's examples tables must be used as a ``<placeholder>`` in the
scenario name, a step or a step argument, and every placeholder must name a column.
"""
from __future__ import annotations

from typing import Dict

from ..gherkin_utils import feature_spread, iter_placeholders
from ..model import GherkinDocument, Location, Scenario
from ..rule import Documentation, DocumentationExample, RuleError

__all__ = ["DOCUMENTATION", "NAME", "run"]

NAME = "no-unused-variables"

# variable name -> where it was seen
VariableLocations = Dict[str, Location]


def run(document: GherkinDocument) -> list[RuleError]:
    if document.feature is None:
        return []

    errors: list[RuleError] = []
    for child in feature_spread(document.feature):
        if child.scenario is None:
            # Only scenarios have variables.
            continue
        if not child.scenario.is_outline:
            continue
        errors += _check_scenario(child.scenario)
    return errors


def _check_scenario(scenario: Scenario) -> list[RuleError]:
    examples_variables = _examples_variables(scenario)
    scenario_variables = _scenario_variables(scenario)

    errors = [
        RuleError(
            message=f'Examples table variable "{variable}" is not used in any step',
            rule=NAME,
            line=location.line,
            column=location.column or 0,
        )
        for variable, location in examples_variables.items()
        if variable not in scenario_variables
    ]
    errors += [
        RuleError(
            message=f'Step variable "{variable}" does not exist in the examples table',
            rule=NAME,
            line=location.line,
            column=location.column or 0,
        )
        for variable, location in scenario_variables.items()
        if variable not in examples_variables
    ]
    return errors


def _examples_variables(scenario: Scenario) -> VariableLocations:
    variables: VariableLocations = {}
    for examples in scenario.examples:
        if examples.table_header is None:
            continue
        for cell in examples.table_header.cells:
            if cell.value:
                variables[cell.value] = cell.location
    return variables


def _scenario_variables(scenario: Scenario) -> VariableLocations:
    variables: VariableLocations = {}

    # Columns assume a single separator between keyword and text, e.g. "Scenario Outline: ".
    name_column = (scenario.location.column or 0) + len(scenario.keyword) + 2
    for placeholder in iter_placeholders(scenario.name):
        variables[placeholder.name] = Location(
            line=scenario.location.line, column=name_column + placeholder.offset
        )

    for step in scenario.steps:
        # Step keywords include their trailing space, e.g. "Given ".
        text_column = (step.location.column or 0) + len(step.keyword)
        for placeholder in iter_placeholders(step.text):
            variables[placeholder.name] = Location(
                line=step.location.line, column=text_column + placeholder.offset
            )

        if step.data_table is not None:
            for row in step.data_table.rows:
                for cell in row.cells:
                    if not cell.value:
                        continue
                    for placeholder in iter_placeholders(cell.value):
                        variables[placeholder.name] = Location(
                            line=cell.location.line,
                            column=(cell.location.column or 0) + placeholder.offset,
                        )
        elif step.doc_string is not None:
            for placeholder in iter_placeholders(step.doc_string.content):
                # The column inside a multi-line doc string is not tracked.
                variables[placeholder.name] = Location(
                    line=step.doc_string.location.line, column=0
                )

    return variables


DOCUMENTATION = Documentation(
    description="Disallows unused variables in scenario outlines.",
    examples=(
        DocumentationExample(
            title="Example",
            description="Enable rule",
            config={NAME: "error"},
        ),
    ),
)
