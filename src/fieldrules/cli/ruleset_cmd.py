"""Rule-set commands — validate and parse."""

import json
from pathlib import Path

import click

from fieldrules.metadata.validator import validate_ruleset_file
from fieldrules.shorthand import parse_rule_string


@click.group()
def ruleset():
    """Rule-set commands."""
    pass


@ruleset.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
def validate(path: Path, strict: bool):
    """Validate a rule-set file against the rule-set JSON Schema."""
    issues = validate_ruleset_file(path, strict=strict)

    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} schema error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(
            click.style(f"{len(warnings)} warning(s) found.", fg="yellow")
        )

    click.echo(click.style("Rule set is valid.", fg="green", bold=True))


@ruleset.command()
@click.argument("rules")
def parse(rules: str):
    """Show the rule bindings a pipe-delimited shorthand string expands to."""
    bindings = [binding.to_dict() for binding in parse_rule_string(rules)]
    click.echo(json.dumps(bindings, indent=2))
