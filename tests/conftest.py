"""Shared pytest fixtures for rentledger tests."""

import itertools
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from rentledger.cli.store_loading import DEMO_TRANSACTIONS
from rentledger.domain.csv_import import CSVImportService
from rentledger.domain.entities import Transaction, TransactionCategory
from rentledger.domain.journal import JournalService
from rentledger.domain.ledger import LedgerService
from rentledger.domain.statements import StatementService
from rentledger.domain.transaction import TransactionService, TransactionStore


@pytest.fixture
def importer():
    """Create a CSVImportService with predictable transaction IDs."""
    counter = itertools.count(1)
    return CSVImportService(id_factory=lambda: f"IMP-{next(counter):03d}")


@pytest.fixture
def store():
    """Create an empty TransactionStore."""
    return TransactionStore()


@pytest.fixture
def transaction_service(store, importer):
    """Create a TransactionService over the empty store."""
    return TransactionService(store, importer=importer)


@pytest.fixture
def journal_service():
    return JournalService()


@pytest.fixture
def statement_service():
    return StatementService()


@pytest.fixture
def ledger_service():
    return LedgerService()


@pytest.fixture
def sample_transactions():
    """The demo shop's five opening transactions."""
    return DEMO_TRANSACTIONS


@pytest.fixture
def sample_store(sample_transactions):
    """Create a store holding the sample transactions."""
    return TransactionStore(sample_transactions)


@pytest.fixture
def make_transaction():
    """Build a transaction with sensible defaults."""

    def _make(
        id="TX1",
        category=TransactionCategory.REVENUE,
        amount="100000",
        description="Rental - B001 Vario",
        contra_account="Cash",
        reference="REF-1",
        txn_date=date(2023, 10, 1),
    ):
        return Transaction(
            id=id,
            date=txn_date,
            description=description,
            category=category,
            amount=Decimal(amount),
            reference=reference,
            contra_account=contra_account,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
