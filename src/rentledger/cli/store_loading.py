"""Assemble a transaction store from CLI arguments."""

from datetime import date
from decimal import Decimal

import click

from rentledger.cli.error_handling import handle_domain_error
from rentledger.domain.entities import Transaction, TransactionCategory
from rentledger.domain.errors import DomainError, NoTransactionsParsedError
from rentledger.domain.transaction import TransactionService, TransactionStore


# Opening transactions of the rental shop, used by --demo
DEMO_TRANSACTIONS = (
    Transaction("T001", date(2023, 10, 1), "Rental - B002 NMAX", TransactionCategory.REVENUE,
                Decimal("540000"), "INV-1001", "Cash"),
    Transaction("T002", date(2023, 10, 2), "Oil Change - B003", TransactionCategory.EXPENSE,
                Decimal("-150000"), "EXP-502", "Cash"),
    Transaction("T003", date(2023, 10, 3), "Rental - B001 Vario", TransactionCategory.REVENUE,
                Decimal("300000"), "INV-1002", "Bank Transfer"),
    Transaction("T004", date(2023, 10, 5), "Shop Rent October", TransactionCategory.EXPENSE,
                Decimal("-5000000"), "EXP-503", "Bank Transfer"),
    Transaction("T005", date(2023, 10, 6), "New Helmet Purchase", TransactionCategory.ASSET,
                Decimal("-750000"), "AST-001", "Cash"),
)


def load_store_or_exit(
    ctx: click.Context,
    csv_files: tuple[str, ...],
    demo: bool,
    exclude: tuple[str, ...],
) -> TransactionStore:
    """Build a store from demo data and CSV files, then drop excluded IDs.

    Files that yield no transactions are reported and skipped; any other
    domain error ends the command.
    """
    store = TransactionStore(DEMO_TRANSACTIONS if demo else ())
    service = TransactionService(store, importer=ctx.obj["importer"])

    for csv_file in csv_files:
        try:
            result = service.import_file(csv_file)
        except NoTransactionsParsedError as e:
            click.echo(f"Warning: {csv_file}: {e}", err=True)
            continue
        except DomainError as e:
            handle_domain_error(ctx, e)
        if result.skipped:
            click.echo(
                f"Warning: {csv_file}: skipped {result.skipped} unparseable row(s)",
                err=True,
            )

    for transaction_id in exclude:
        if not service.delete_transaction(transaction_id):
            click.echo(f"Warning: transaction '{transaction_id}' not found", err=True)

    return store


def format_amount(amount: Decimal) -> str:
    """Format an amount in Rupiah with two decimals."""
    return f"Rp {amount:,.2f}"
