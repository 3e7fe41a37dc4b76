"""Financial statement commands."""

import click

from rentledger.cli.store_loading import format_amount, load_store_or_exit
from rentledger.domain.entities import BalanceSheet, IncomeStatement
from rentledger.domain.ledger import LedgerService


def _display_income_statement(statement: IncomeStatement) -> None:
    click.echo("\nIncome Statement")
    click.echo("-" * 80)
    click.echo(f"{'Revenue':<50} {format_amount(statement.revenue):>29}")
    click.echo(f"{'Expenses':<50} {format_amount(statement.expenses):>29}")
    click.echo("-" * 80)
    click.echo(f"{'Net Income':<50} {format_amount(statement.net_income):>29}")
    click.echo("=" * 80)


def _display_balance_sheet(sheet: BalanceSheet) -> None:
    click.echo("\nBalance Sheet")
    click.echo("-" * 80)
    click.echo(f"{'Assets':<50} {format_amount(sheet.assets):>29}")
    click.echo(f"{'Liabilities':<50} {format_amount(sheet.liabilities):>29}")
    click.echo(f"{'Equity (incl. retained earnings)':<50} {format_amount(sheet.equity):>29}")
    click.echo("-" * 80)
    click.echo(
        f"{'Liabilities + Equity':<50} {format_amount(sheet.liabilities + sheet.equity):>29}"
    )
    click.echo("=" * 80)
    if sheet.is_balanced:
        click.echo("Tie-out: balanced")
    else:
        click.echo(f"Tie-out: OUT OF BALANCE by {format_amount(sheet.difference)}")


@click.command("report")
@click.argument("csv_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--demo", is_flag=True, help="Start from the built-in demo transactions")
@click.option("--exclude", multiple=True, help="Transaction ID to delete before posting (repeatable)")
@click.option(
    "--statement",
    type=click.Choice(["income", "balance", "all"]),
    default="all",
    show_default=True,
    help="Which statement to show",
)
@click.pass_context
def show_report(
    ctx,
    csv_files: tuple[str, ...],
    demo: bool,
    exclude: tuple[str, ...],
    statement: str,
):
    """Show the income statement and balance sheet.

    Transactions whose category has no posting rule (Liability, Equity)
    are listed as warnings instead of being posted.
    """
    store = load_store_or_exit(ctx, csv_files, demo, exclude)
    if len(store) == 0:
        click.echo("No transactions found.")
        return

    report = LedgerService().build_report(store.snapshot())

    if statement in ("income", "all"):
        _display_income_statement(report.income_statement)
    if statement in ("balance", "all"):
        _display_balance_sheet(report.balance_sheet)

    for error in report.unmapped:
        click.echo(f"Warning: {error}", err=True)
    for entry_id in report.unbalanced:
        click.echo(f"Warning: journal entry '{entry_id}' is not balanced", err=True)


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(show_report)
