from pathlib import Path
from textwrap import dedent

from behave import given, then, when

from features.steps.lint_env import LintContext

here = Path(__file__).parent


@given("a new project")
def step_new_project(context: LintContext):
    context.lint.project_files["pyproject.toml"] = "[tool.featurelint]\n"


@given("there is no project file")
def step_no_project(_context: LintContext):
    pass


@given('the example feature "{name}"')
def step_example_feature(context: LintContext, name: str):
    # Kept as .gherkin so that behave does not collect them.
    src = here / "data" / f"{name}.gherkin"
    context.lint.project_files[f"features/{name}.feature"] = src.read_text()


@given('the rule {rule} has severity "{severity}"')
def step_rule_severity(context: LintContext, rule: str, severity: str):
    severity_toml = dedent(
        f"""
        [tool.featurelint.rules]
        {rule} = "{severity}"
        """
    )
    context.lint.project_files["pyproject.toml"] += severity_toml


@when('I run featurelint with "{args}"')
def step_run_lint(context: LintContext, args: str):
    context.result = context.lint.run(*args.split())


@when("I run featurelint with no arguments")
def step_run_lint_no_args(context: LintContext):
    context.result = context.lint.run()


@then("the exit code is {exit_code}")
def step_exit_code(context: LintContext, exit_code: str):
    assert context.result
    assert context.result.exit_code == int(exit_code), context.result.output


@then("the output contains the text")
def step_output_contains_text(context: LintContext):
    assert context.result
    assert context.text.strip() in context.result.output, context.result.output


@then('the output contains "{message}"')
def step_output_contains_message(context: LintContext, message: str):
    assert context.result
    assert message in context.result.output, context.result.output


@then('the output does not contain "{message}"')
def step_output_does_not_contain_message(context: LintContext, message: str):
    assert context.result
    assert message not in context.result.output, context.result.output
