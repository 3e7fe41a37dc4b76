"""Transaction store and transaction domain service."""

import random
import uuid
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Iterator, Optional

from rentledger.domain.csv_import import CSVImportService
from rentledger.domain.entities import ImportResult, Transaction, TransactionCategory
from rentledger.domain.errors import (
    ConflictError,
    ValidationError,
    duplicate_transaction_id,
)
from rentledger.utils.log import get_logger

logger = get_logger(__name__)

DEFAULT_CONTRA_ACCOUNT = "Cash"


class TransactionStore:
    """Ordered, caller-owned collection of transactions.

    Supports append and delete-by-id only. The engine works on
    ``snapshot()`` tuples, which later changes to the store never touch.
    """

    def __init__(self, transactions: Iterable[Transaction] = ()):
        self._transactions: list[Transaction] = []
        self.extend(transactions)

    def add(self, txn: Transaction) -> None:
        """Append a transaction.

        Raises:
            ConflictError: If a transaction with the same ID is stored
        """
        self.extend([txn])

    def extend(self, transactions: Iterable[Transaction]) -> None:
        """Append a batch of transactions, all or nothing.

        Raises:
            ConflictError: If any ID is already stored or repeats in the batch
        """
        batch = list(transactions)
        seen = {txn.id for txn in self._transactions}
        for txn in batch:
            if txn.id in seen:
                raise ConflictError(duplicate_transaction_id(txn.id))
            seen.add(txn.id)
        self._transactions.extend(batch)

    def delete(self, transaction_id: str) -> bool:
        """Remove the transaction with the given ID.

        Returns:
            True if a transaction was removed, False if the ID is unknown
        """
        for index, txn in enumerate(self._transactions):
            if txn.id == transaction_id:
                del self._transactions[index]
                return True
        return False

    def get(self, transaction_id: str) -> Optional[Transaction]:
        for txn in self._transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def snapshot(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __contains__(self, transaction_id: object) -> bool:
        return any(txn.id == transaction_id for txn in self._transactions)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, store: TransactionStore, importer: Optional[CSVImportService] = None):
        """Initialize transaction service.

        Args:
            store: Transaction store to operate on
            importer: Import reader; a default reader is used when omitted
        """
        self.store = store
        self.importer = importer or CSVImportService()

    def create_transaction(
        self,
        date: date,
        description: str,
        category: TransactionCategory,
        amount: Decimal,
        reference: Optional[str] = None,
        contra_account: Optional[str] = None,
        transaction_id: Optional[str] = None,
    ) -> Transaction:
        """Create a manually entered transaction and append it to the store.

        Args:
            date: Transaction date
            description: Description, required
            category: Transaction category
            amount: Signed amount, must be non-zero
            reference: Optional external document ID (generated if omitted)
            contra_account: Optional cash or bank account name (defaults to Cash)
            transaction_id: Optional ID (generated if omitted)

        Returns:
            The stored transaction

        Raises:
            ValidationError: If description is empty or amount is zero
            ConflictError: If the ID already exists
        """
        if not description or not description.strip():
            raise ValidationError("Description is required")
        if amount == 0:
            raise ValidationError("Amount must be non-zero")

        txn = Transaction(
            id=transaction_id or uuid.uuid4().hex[:9],
            date=date,
            description=description,
            category=TransactionCategory(category),
            amount=amount,
            reference=reference or f"REF-{random.randrange(1000)}",
            contra_account=contra_account or DEFAULT_CONTRA_ACCOUNT,
        )
        self.store.add(txn)
        logger.info("transaction_created", id=txn.id, category=txn.category.value)
        return txn

    def import_text(self, text: str) -> ImportResult:
        """Parse delimited text and append the whole batch to the store."""
        result = self.importer.import_text(text)
        self.store.extend(result.transactions)
        return result

    def import_file(self, csv_file_path: str | Path) -> ImportResult:
        """Parse a delimited file and append the whole batch to the store."""
        result = self.importer.import_file(csv_file_path)
        self.store.extend(result.transactions)
        return result

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction by ID; unknown IDs are a no-op."""
        deleted = self.store.delete(transaction_id)
        if deleted:
            logger.info("transaction_deleted", id=transaction_id)
        else:
            logger.debug("transaction_delete_missing", id=transaction_id)
        return deleted

    def search(self, term: str) -> list[Transaction]:
        """List transactions whose description or reference contains a term."""
        needle = term.lower()
        return [
            txn
            for txn in self.store
            if needle in txn.description.lower() or needle in txn.reference.lower()
        ]
