"""Ledger domain service: full report from a transaction snapshot."""

from functools import lru_cache
from typing import Iterable

from rentledger.domain.entities import LedgerReport, Transaction
from rentledger.domain.errors import UnmappedCategoryError
from rentledger.domain.journal import JournalService
from rentledger.domain.statements import StatementService
from rentledger.utils.log import get_logger

logger = get_logger(__name__)


def _build_report(snapshot: tuple[Transaction, ...]) -> LedgerReport:
    journal_service = JournalService()
    statement_service = StatementService()

    entries = []
    unmapped = []
    for txn in snapshot:
        try:
            entries.append(journal_service.derive_entry(txn))
        except UnmappedCategoryError as e:
            logger.warning(
                "transaction_unmapped", id=e.transaction_id, category=e.category
            )
            unmapped.append(e)

    unbalanced = statement_service.find_unbalanced(entries)
    for entry_id in unbalanced:
        logger.warning("journal_entry_unbalanced", id=entry_id)

    balance_sheet = statement_service.balance_sheet(entries)
    if not balance_sheet.is_balanced:
        logger.warning("balance_sheet_out_of_balance", difference=str(balance_sheet.difference))

    return LedgerReport(
        entries=tuple(entries),
        income_statement=statement_service.income_statement(entries),
        balance_sheet=balance_sheet,
        unmapped=tuple(unmapped),
        unbalanced=tuple(unbalanced),
    )


# Decimal("100") == Decimal("100.00"), so the key carries each amount's text
def _cache_key(snapshot: tuple[Transaction, ...]) -> tuple:
    return tuple((txn, str(txn.amount)) for txn in snapshot)


@lru_cache(maxsize=32)
def _cached_report(key: tuple) -> LedgerReport:
    return _build_report(tuple(txn for txn, _ in key))


class LedgerService:
    """Service deriving journal and statements from transactions.

    Reports are recomputed from the full snapshot on every change; a small
    cache keyed on the immutable snapshot avoids repeating identical work.
    """

    def build_report(self, transactions: Iterable[Transaction]) -> LedgerReport:
        """Derive the journal, income statement and balance sheet.

        Transactions whose category has no posting rule are left out of the
        journal and listed in ``LedgerReport.unmapped``.

        Args:
            transactions: Transactions in store order (a store works too)

        Returns:
            LedgerReport for exactly these transactions
        """
        return _cached_report(_cache_key(tuple(transactions)))
