"""Record validation command."""

from pathlib import Path

import click

from fieldrules.constraints import BasicConstraints, DEFAULT_MESSAGES
from fieldrules.errors import ValidatorConfigError
from fieldrules.metadata.loader import RuleSetLoader, load_record_file


@click.command()
@click.argument("ruleset_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("records_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--no-builtins",
    is_flag=True,
    default=False,
    help="Do not register the basic constraint set and its default messages.",
)
def check(ruleset_path: Path, records_path: Path, no_builtins: bool):
    """Validate the records in RECORDS_PATH against the rule set in RULESET_PATH."""
    try:
        ruleset = RuleSetLoader(ruleset_path).load()
        records = load_record_file(records_path)

        validator = ruleset.build()
        if not no_builtins:
            validator.add_constraint_provider(BasicConstraints())
            # Rule-set messages take precedence over the built-in defaults
            validator.add_messages(
                {k: v for k, v in DEFAULT_MESSAGES.items() if k not in ruleset.messages}
            )

        invalid = 0
        for index, record in enumerate(records):
            validator.reset()
            label = f"Record {index + 1}"

            if not record:
                click.echo(click.style(f"- {label}: empty, skipped", fg="yellow"))
                continue

            if validator.validate(record):
                click.echo(click.style(f"✓ {label}: valid", fg="green"))
                continue

            invalid += 1
            click.echo(click.style(f"✗ {label}: {len(validator.errors)} error(s)", fg="red"))
            for field, message in validator.errors.items():
                click.echo(f"  {field}: {message}")
    except ValidatorConfigError as e:
        click.echo(click.style(f"Configuration error: {e}", fg="red"), err=True)
        raise SystemExit(2)

    if invalid:
        click.echo(
            click.style(
                f"\n{invalid} of {len(records)} record(s) invalid",
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    click.echo(click.style(f"\nAll {len(records)} record(s) are valid.", fg="green", bold=True))
