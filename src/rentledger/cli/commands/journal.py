"""General journal command."""

import click

from rentledger.cli.store_loading import format_amount, load_store_or_exit
from rentledger.domain.ledger import LedgerService


@click.command("journal")
@click.argument("csv_files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--demo", is_flag=True, help="Start from the built-in demo transactions")
@click.option("--exclude", multiple=True, help="Transaction ID to delete before posting (repeatable)")
@click.pass_context
def show_journal(ctx, csv_files: tuple[str, ...], demo: bool, exclude: tuple[str, ...]):
    """Show the general journal derived from the transactions.

    Examples:
        rentledger journal --demo
        rentledger journal mutasi.csv --exclude IMP-1a2b3c4d
    """
    store = load_store_or_exit(ctx, csv_files, demo, exclude)
    report = LedgerService().build_report(store.snapshot())

    if not report.entries:
        click.echo("No journal entries.")
    else:
        click.echo(f"{'Account':<50} {'Debit':>20} {'Credit':>20}")
        click.echo("-" * 92)
        for entry in report.entries:
            click.echo(f"{entry.date.isoformat()} - {entry.description} ({entry.reference})")
            for line in entry.lines:
                debit_str = format_amount(line.debit) if line.debit else ""
                credit_str = format_amount(line.credit) if line.credit else ""
                # Credit lines are indented, as in a handwritten journal
                indent = "    " if line.credit else ""
                account = f"{indent}{line.account_id} {line.account_name}"
                click.echo(f"  {account:<48} {debit_str:>20} {credit_str:>20}")
        click.echo("-" * 92)
        total_debit = sum(entry.total_debit for entry in report.entries)
        total_credit = sum(entry.total_credit for entry in report.entries)
        click.echo(f"{'Total':<50} {format_amount(total_debit):>20} {format_amount(total_credit):>20}")

    for error in report.unmapped:
        click.echo(f"Warning: {error}", err=True)


def register_commands(cli):
    """Register journal command with main CLI."""
    cli.add_command(show_journal)
