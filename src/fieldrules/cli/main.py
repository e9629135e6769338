"""fieldrules CLI entry point."""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """fieldrules — declarative field validation CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
from fieldrules.cli.check_cmd import check  # noqa: E402
from fieldrules.cli.ruleset_cmd import ruleset  # noqa: E402

cli.add_command(check)
cli.add_command(ruleset)
