"""CSV import domain service."""

import csv
import re
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

from rentledger.domain.entities import ImportResult, Transaction, TransactionCategory
from rentledger.domain.errors import (
    EmptyInputError,
    NoTransactionsParsedError,
    NotANumberError,
    NotFoundError,
    RowParseError,
    empty_input,
)
from rentledger.utils.amount_parser import DotPolicy, parse_amount
from rentledger.utils.date_parser import parse_date
from rentledger.utils.log import get_logger

logger = get_logger(__name__)

# Candidate delimiters in tie-break order
DELIMITERS = (",", ";", "\t")

# Header keywords per column role, English and Indonesian
COLUMN_KEYWORDS = {
    "date": ("date", "tgl"),
    "description": ("desc", "keterangan"),
    "reference": ("ref", "no"),
    "debit": ("debit", "in"),
    "credit": ("credit", "out"),
    "amount": ("amount", "jumlah", "saldo"),
}

DEFAULT_DESCRIPTION = "Imported Transaction"
DEFAULT_CONTRA_ACCOUNT = "Bank"


@dataclass(frozen=True)
class ColumnMap:
    """Header positions of each recognized column role."""

    date: Optional[int] = None
    description: Optional[int] = None
    reference: Optional[int] = None
    debit: Optional[int] = None
    credit: Optional[int] = None
    amount: Optional[int] = None


def _generate_import_id() -> str:
    return f"IMP-{uuid.uuid4().hex[:8]}"


class CSVImportService:
    """Service for turning delimited bank or ledger exports into transactions."""

    def __init__(
        self,
        dot_policy: DotPolicy = DotPolicy.GROUPING,
        dayfirst: bool = False,
        id_factory: Callable[[], str] = _generate_import_id,
    ):
        """Initialize CSV import service.

        Args:
            dot_policy: Interpretation of amounts whose only separator is a dot
            dayfirst: Read ambiguous dates as day/month/year
            id_factory: Callable producing a fresh transaction ID
        """
        self.dot_policy = dot_policy
        self.dayfirst = dayfirst
        self.id_factory = id_factory

    def import_file(self, csv_file_path: str | Path) -> ImportResult:
        """Import transactions from a delimited file.

        Raises:
            NotFoundError: If the file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise NotFoundError(f"CSV file not found: {csv_file_path}")

        text = csv_path.read_text(encoding="utf-8-sig")
        return self.import_text(text)

    def import_text(self, text: str) -> ImportResult:
        """Import transactions from delimited text with a header row.

        Rows that cannot be used are skipped and reported; a bad row never
        aborts the batch.

        Args:
            text: Raw delimited text

        Returns:
            ImportResult with the emitted transactions in input order, the
            number of skipped rows and the row error messages

        Raises:
            EmptyInputError: If there is no data row below the header
            NoTransactionsParsedError: If no row produced a transaction
        """
        lines = [line for line in re.split(r"\r\n|\n", text) if line.strip()]
        if len(lines) < 2:
            raise EmptyInputError(empty_input())

        delimiter = self.detect_delimiter(lines[0])
        headers = [
            cell.strip().replace('"', "").lower()
            for cell in self._split_line(lines[0], delimiter)
        ]
        columns = self.map_columns(headers)

        transactions: list[Transaction] = []
        skipped = 0
        errors: list[str] = []

        # Row 1 is the header
        for row_num, line in enumerate(lines[1:], start=2):
            try:
                row = [
                    cell.strip().replace('"', "")
                    for cell in self._split_line(line, delimiter)
                ]
                if len(row) < len(headers):
                    raise RowParseError(
                        row_num, f"expected {len(headers)} columns, found {len(row)}"
                    )

                txn = self._parse_row(row, row_num, columns)
                if txn is not None:
                    transactions.append(txn)
            except Exception as e:
                message = str(e) if isinstance(e, RowParseError) else f"Row {row_num}: {e}"
                logger.warning("import_row_skipped", row=row_num, reason=message)
                errors.append(message)
                skipped += 1
                continue

        if not transactions:
            raise NoTransactionsParsedError(skipped=skipped, errors=tuple(errors))

        logger.info(
            "import_parsed",
            transactions=len(transactions),
            skipped=skipped,
            delimiter=delimiter,
        )
        return ImportResult(
            transactions=tuple(transactions),
            skipped=skipped,
            errors=tuple(errors),
        )

    def detect_delimiter(self, header_line: str) -> str:
        """Pick the delimiter that occurs most often in the header line."""
        # max() keeps the first of equal counts, so comma wins ties
        return max(DELIMITERS, key=header_line.count)

    def map_columns(self, headers: list[str]) -> ColumnMap:
        """Locate column roles by keyword containment in lower-cased headers."""

        def find(keywords: tuple[str, ...]) -> Optional[int]:
            for index, header in enumerate(headers):
                if any(keyword in header for keyword in keywords):
                    return index
            return None

        return ColumnMap(**{role: find(keywords) for role, keywords in COLUMN_KEYWORDS.items()})

    def _split_line(self, line: str, delimiter: str) -> list[str]:
        return next(csv.reader([line], delimiter=delimiter))

    def _parse_row(
        self, row: list[str], row_num: int, columns: ColumnMap
    ) -> Optional[Transaction]:
        """Build a transaction from one row, or None if it carries no amount."""
        if columns.debit is not None and columns.credit is not None:
            debit = self._parse_optional_amount(row[columns.debit], row_num)
            credit = self._parse_optional_amount(row[columns.credit], row_num)
            if credit > 0:
                category = TransactionCategory.REVENUE
                amount = credit
            elif debit > 0:
                category = TransactionCategory.EXPENSE
                amount = -debit
            else:
                return None
        elif columns.amount is not None:
            try:
                amount = parse_amount(row[columns.amount], self.dot_policy)
            except NotANumberError as e:
                raise RowParseError(row_num, str(e))
            category = (
                TransactionCategory.REVENUE if amount >= 0 else TransactionCategory.EXPENSE
            )
        else:
            return None

        if amount == 0:
            return None

        txn_date = date.today()
        date_str = self._cell(row, columns.date)
        if date_str:
            try:
                txn_date = parse_date(date_str, dayfirst=self.dayfirst)
            except ValueError as e:
                raise RowParseError(row_num, str(e))

        return Transaction(
            id=self.id_factory(),
            date=txn_date,
            description=self._cell(row, columns.description) or DEFAULT_DESCRIPTION,
            category=category,
            amount=amount,
            reference=self._cell(row, columns.reference) or f"CSV-{row_num - 1}",
            contra_account=DEFAULT_CONTRA_ACCOUNT,
        )

    def _parse_optional_amount(self, value: str, row_num: int) -> Decimal:
        """Parse a debit or credit cell, where an empty cell means no value.

        A non-empty cell without a number fails the row rather than reading
        as zero.
        """
        if not value.strip():
            return Decimal("0")
        try:
            return parse_amount(value, self.dot_policy)
        except NotANumberError as e:
            raise RowParseError(row_num, str(e))

    @staticmethod
    def _cell(row: list[str], index: Optional[int]) -> Optional[str]:
        if index is None:
            return None
        return row[index] or None
