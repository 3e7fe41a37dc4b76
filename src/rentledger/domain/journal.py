"""Journal derivation: one balanced double entry per transaction."""

from decimal import Decimal
from typing import Callable, Iterable

from rentledger.domain.chart_of_accounts import (
    CASH_ON_HAND,
    FIXED_ASSETS,
    MAINTENANCE_EXPENSE,
    RENT_EXPENSE,
    RENTAL_INCOME,
    get_account,
    resolve_contra_account,
)
from rentledger.domain.entities import (
    JournalEntry,
    JournalLine,
    Transaction,
    TransactionCategory,
)
from rentledger.domain.errors import UnmappedCategoryError

PostingRule = Callable[[Transaction, Decimal], tuple[JournalLine, JournalLine]]


def _debit(code: str, amount: Decimal, name: str | None = None) -> JournalLine:
    return JournalLine(
        account_id=code,
        account_name=name or get_account(code).name,
        debit=amount,
        credit=Decimal("0"),
    )


def _credit(code: str, amount: Decimal, name: str | None = None) -> JournalLine:
    return JournalLine(
        account_id=code,
        account_name=name or get_account(code).name,
        debit=Decimal("0"),
        credit=amount,
    )


def _contra_code(txn: Transaction) -> str:
    return resolve_contra_account(txn.contra_account).code


def _post_revenue(txn: Transaction, amount: Decimal) -> tuple[JournalLine, JournalLine]:
    # Dr cash/bank, Cr rental income
    return (
        _debit(_contra_code(txn), amount, txn.contra_account),
        _credit(RENTAL_INCOME, amount),
    )


def _post_expense(txn: Transaction, amount: Decimal) -> tuple[JournalLine, JournalLine]:
    # Dr expense, Cr cash/bank
    expense_code = RENT_EXPENSE if "Rent" in txn.description else MAINTENANCE_EXPENSE
    return (
        _debit(expense_code, amount),
        _credit(_contra_code(txn), amount, txn.contra_account),
    )


def _post_asset(txn: Transaction, amount: Decimal) -> tuple[JournalLine, JournalLine]:
    # Dr fixed assets, Cr cash
    return (
        _debit(FIXED_ASSETS, amount),
        _credit(CASH_ON_HAND, amount),
    )


POSTING_RULES: dict[TransactionCategory, PostingRule] = {
    TransactionCategory.REVENUE: _post_revenue,
    TransactionCategory.EXPENSE: _post_expense,
    TransactionCategory.ASSET: _post_asset,
}

# Categories deliberately left without a rule; posting them is an error
UNSUPPORTED_CATEGORIES = frozenset(
    {TransactionCategory.LIABILITY, TransactionCategory.EQUITY}
)


class JournalService:
    """Service deriving journal entries from transactions.

    Derivation is a pure function of the transaction: the same transaction
    always yields an equal entry.
    """

    def derive_entry(self, txn: Transaction) -> JournalEntry:
        """Derive the journal entry for a transaction.

        Args:
            txn: Source transaction

        Returns:
            Two-line journal entry whose debits equal its credits

        Raises:
            UnmappedCategoryError: If no posting rule exists for the category
        """
        rule = POSTING_RULES.get(txn.category)
        if rule is None:
            category = getattr(txn.category, "value", txn.category)
            raise UnmappedCategoryError(txn.id, str(category))

        return JournalEntry(
            id=txn.id,
            date=txn.date,
            reference=txn.reference,
            description=txn.description,
            lines=rule(txn, abs(txn.amount)),
        )

    def derive_entries(self, transactions: Iterable[Transaction]) -> list[JournalEntry]:
        """Derive entries for every transaction, in order.

        Raises:
            UnmappedCategoryError: On the first transaction without a rule
        """
        return [self.derive_entry(txn) for txn in transactions]
