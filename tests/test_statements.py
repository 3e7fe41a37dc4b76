"""Tests for statement aggregation."""

from datetime import date
from decimal import Decimal

from rentledger.domain.entities import (
    BalanceSheet,
    IncomeStatement,
    JournalEntry,
    JournalLine,
)


def _entry(entry_id, *lines):
    return JournalEntry(
        id=entry_id,
        date=date(2023, 10, 1),
        reference="REF",
        description="test",
        lines=tuple(lines),
    )


def test_income_statement_from_sample(journal_service, statement_service, sample_transactions):
    entries = journal_service.derive_entries(sample_transactions)

    statement = statement_service.income_statement(entries)

    assert statement == IncomeStatement(
        revenue=Decimal("840000"),
        expenses=Decimal("5150000"),
        net_income=Decimal("-4310000"),
    )


def test_balance_sheet_from_sample(journal_service, statement_service, sample_transactions):
    entries = journal_service.derive_entries(sample_transactions)

    sheet = statement_service.balance_sheet(entries)

    assert sheet.assets == Decimal("-4310000")
    assert sheet.liabilities == Decimal("0")
    assert sheet.equity == Decimal("-4310000")
    assert sheet.is_balanced


def test_balance_sheet_ties_out(journal_service, statement_service, make_transaction):
    """Supported categories always satisfy assets == liabilities + equity."""
    from rentledger.domain.entities import TransactionCategory

    transactions = [
        make_transaction(id="R1", amount="1250000.50", contra_account="Bank"),
        make_transaction(id="R2", amount="300000", contra_account=None),
        make_transaction(id="E1", category=TransactionCategory.EXPENSE, amount="-99999.99"),
        make_transaction(id="A1", category=TransactionCategory.ASSET, amount="-2000000"),
    ]
    entries = journal_service.derive_entries(transactions)

    sheet = statement_service.balance_sheet(entries)

    assert sheet.assets == sheet.liabilities + sheet.equity
    assert sheet.difference == 0


def test_liability_and_equity_lines(statement_service):
    entries = [
        _entry(
            "LOAN",
            JournalLine("1002", "Bank Central Asia", debit=Decimal("1000")),
            JournalLine("2001", "Accounts Payable", credit=Decimal("1000")),
        ),
        _entry(
            "CAPITAL",
            JournalLine("1001", "Cash on Hand", debit=Decimal("500")),
            JournalLine("3001", "Owner Capital", credit=Decimal("500")),
        ),
    ]

    sheet = statement_service.balance_sheet(entries)

    assert sheet == BalanceSheet(
        assets=Decimal("1500"), liabilities=Decimal("1000"), equity=Decimal("500")
    )
    assert sheet.is_balanced


def test_empty_ledger(statement_service):
    assert statement_service.income_statement([]) == IncomeStatement(
        Decimal("0"), Decimal("0"), Decimal("0")
    )
    assert statement_service.balance_sheet([]).is_balanced


def test_unbalanced_entry_is_reported_not_raised(statement_service):
    broken = _entry(
        "BROKEN",
        JournalLine("1001", "Cash on Hand", debit=Decimal("100")),
        JournalLine("4001", "Rental Income", credit=Decimal("90")),
    )
    fine = _entry(
        "FINE",
        JournalLine("1001", "Cash on Hand", debit=Decimal("10")),
        JournalLine("4001", "Rental Income", credit=Decimal("10")),
    )

    assert statement_service.find_unbalanced([broken, fine]) == ["BROKEN"]

    sheet = statement_service.balance_sheet([broken, fine])
    assert not sheet.is_balanced
    assert sheet.difference == Decimal("10")


def test_unknown_account_class_is_ignored(statement_service):
    entry = _entry(
        "ODD",
        JournalLine("9001", "Suspense", debit=Decimal("10")),
        JournalLine("9002", "Suspense", credit=Decimal("10")),
    )

    assert statement_service.income_statement([entry]).revenue == 0
    assert statement_service.balance_sheet([entry]).assets == 0
