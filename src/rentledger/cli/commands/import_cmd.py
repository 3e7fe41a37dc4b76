"""CSV import command."""

import click

from rentledger.cli.error_handling import handle_domain_error
from rentledger.cli.store_loading import format_amount
from rentledger.domain.errors import DomainError, NoTransactionsParsedError


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="Show reference and contra account columns")
@click.pass_context
def import_csv(ctx, csv_file: str, verbose: bool):
    """Parse transactions from a CSV file and list them.

    The delimiter (comma, semicolon or tab) and the column roles are
    detected from the header row. English and Indonesian headers are
    recognized (date/tgl, description/keterangan, debit/credit, amount/jumlah).
    """
    importer = ctx.obj["importer"]

    try:
        result = importer.import_file(csv_file)
    except NoTransactionsParsedError as e:
        for error in e.errors:
            click.echo(f"    {error}", err=True)
        handle_domain_error(ctx, e)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if verbose:
        click.echo(f"{'ID':<14} {'Date':<12} {'Category':<10} {'Amount':>20}  {'Reference':<12} {'Contra':<10} Description")
        click.echo("-" * 110)
    else:
        click.echo(f"{'Date':<12} {'Category':<10} {'Amount':>20}  Description")
        click.echo("-" * 80)

    for txn in result.transactions:
        amount_str = format_amount(txn.amount)
        if verbose:
            click.echo(
                f"{txn.id:<14} {txn.date.isoformat():<12} {txn.category.value:<10} "
                f"{amount_str:>20}  {txn.reference:<12} {txn.contra_account or '':<10} {txn.description}"
            )
        else:
            click.echo(
                f"{txn.date.isoformat():<12} {txn.category.value:<10} {amount_str:>20}  {txn.description}"
            )

    click.echo(f"\nImport complete:")
    click.echo(f"  Parsed: {len(result.transactions)} transactions")
    click.echo(f"  Skipped: {result.skipped} rows")
    if result.errors:
        click.echo(f"  Errors: {len(result.errors)}")
        for error in result.errors:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
