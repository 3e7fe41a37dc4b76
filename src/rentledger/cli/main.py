"""Main CLI entry point."""

import click

from rentledger.domain.csv_import import CSVImportService
from rentledger.utils.amount_parser import DotPolicy
from rentledger.utils.log import configure_logging

# Import and register all commands at module level
from rentledger.cli.commands import import_cmd, journal, report


@click.group()
@click.option(
    "--dot-policy",
    type=click.Choice([policy.value for policy in DotPolicy]),
    default=DotPolicy.GROUPING.value,
    show_default=True,
    envvar="RENTLEDGER_DOT_POLICY",
    help="How a lone '.' in amounts is read: thousands grouping (10.000) or decimal point (10.5)",
)
@click.option(
    "--dayfirst",
    is_flag=True,
    envvar="RENTLEDGER_DAYFIRST",
    help="Read ambiguous dates like 01/10/2023 as day/month/year",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    envvar="RENTLEDGER_LOG_LEVEL",
    help="Log level for diagnostics written to stderr",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    envvar="RENTLEDGER_LOG_FORMAT",
    help="Log output format",
)
@click.pass_context
def cli(ctx, dot_policy: str, dayfirst: bool, log_level: str, log_format: str):
    """Rentledger - double-entry books for a rental business.

    Import bank or ledger exports in loosely formatted CSV and derive the
    general journal, income statement and balance sheet from them.
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is not None:
        configure_logging(level=log_level, format=log_format)
        ctx.obj["importer"] = CSVImportService(
            dot_policy=DotPolicy(dot_policy), dayfirst=dayfirst
        )


# Register all commands
import_cmd.register_commands(cli)
journal.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
