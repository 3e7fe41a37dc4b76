"""Domain model entities for rentledger.

These are pure data classes. Journal entries and statements are projections
of the transactions they were derived from and are never stored on their own.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from rentledger.domain.errors import UnmappedCategoryError


class TransactionCategory(str, Enum):
    """Business category of a transaction."""

    REVENUE = "Revenue"
    EXPENSE = "Expense"
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"


class AccountType(str, Enum):
    """Type of a chart of accounts entry."""

    HEADER = "Header"
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    date: date
    description: str
    category: TransactionCategory
    amount: Decimal
    reference: str
    contra_account: Optional[str] = None


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    code: str
    name: str
    type: AccountType


@dataclass(frozen=True)
class JournalLine:
    """One side of a double-entry posting."""

    account_id: str
    account_name: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")


@dataclass(frozen=True)
class JournalEntry:
    """Postings derived from a single transaction."""

    id: str
    date: date
    reference: str
    description: str
    lines: tuple[JournalLine, ...]

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), Decimal("0"))

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


@dataclass(frozen=True)
class IncomeStatement:
    """Revenue, expenses and the resulting net income."""

    revenue: Decimal
    expenses: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Assets, liabilities and equity (including retained earnings)."""

    assets: Decimal
    liabilities: Decimal
    equity: Decimal

    @property
    def difference(self) -> Decimal:
        """Amount by which assets miss liabilities plus equity."""
        return self.assets - (self.liabilities + self.equity)

    @property
    def is_balanced(self) -> bool:
        return self.difference == 0


@dataclass(frozen=True)
class ImportResult:
    """Outcome of importing one delimited text batch."""

    transactions: tuple[Transaction, ...]
    skipped: int = 0
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class LedgerReport:
    """Everything derived from one transaction snapshot."""

    entries: tuple[JournalEntry, ...]
    income_statement: IncomeStatement
    balance_sheet: BalanceSheet
    unmapped: tuple[UnmappedCategoryError, ...] = field(default=(), compare=False)
    unbalanced: tuple[str, ...] = ()
