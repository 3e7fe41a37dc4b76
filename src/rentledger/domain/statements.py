"""Financial statement aggregation over journal entries."""

from decimal import Decimal
from typing import Sequence

from rentledger.domain.chart_of_accounts import ACCOUNT_CLASSES
from rentledger.domain.entities import (
    AccountType,
    BalanceSheet,
    IncomeStatement,
    JournalEntry,
)


class StatementService:
    """Service folding journal lines into an income statement and balance sheet.

    Lines are classified by the first digit of their account code. Nothing
    is cached; every call recomputes from the entries it is given.
    """

    def income_statement(self, entries: Sequence[JournalEntry]) -> IncomeStatement:
        """Build the income statement.

        Revenue is the credit total of revenue accounts, expenses the debit
        total of expense accounts.
        """
        revenue = Decimal("0")
        expenses = Decimal("0")

        for entry in entries:
            for line in entry.lines:
                account_class = ACCOUNT_CLASSES.get(line.account_id[:1])
                if account_class == AccountType.REVENUE:
                    revenue += line.credit
                elif account_class == AccountType.EXPENSE:
                    expenses += line.debit

        return IncomeStatement(
            revenue=revenue,
            expenses=expenses,
            net_income=revenue - expenses,
        )

    def balance_sheet(self, entries: Sequence[JournalEntry]) -> BalanceSheet:
        """Build the balance sheet, rolling net income into equity.

        Assets == liabilities + equity is not enforced here; check
        ``BalanceSheet.is_balanced`` on the result.
        """
        assets = Decimal("0")
        liabilities = Decimal("0")
        equity = Decimal("0")

        for entry in entries:
            for line in entry.lines:
                account_class = ACCOUNT_CLASSES.get(line.account_id[:1])
                if account_class == AccountType.ASSET:
                    assets += line.debit - line.credit
                elif account_class == AccountType.LIABILITY:
                    liabilities += line.credit - line.debit
                elif account_class == AccountType.EQUITY:
                    equity += line.credit - line.debit

        # Retained earnings
        equity += self.income_statement(entries).net_income

        return BalanceSheet(assets=assets, liabilities=liabilities, equity=equity)

    def find_unbalanced(self, entries: Sequence[JournalEntry]) -> list[str]:
        """Return IDs of entries whose debits differ from their credits."""
        return [entry.id for entry in entries if not entry.is_balanced]
