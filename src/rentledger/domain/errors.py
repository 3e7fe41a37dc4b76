"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity or path does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class NotANumberError(ValidationError):
    """An amount string held no digits to parse."""


class EmptyInputError(ValidationError):
    """Import text has no data rows below the header."""


class RowParseError(ValidationError):
    """A single import row could not be turned into a transaction."""

    def __init__(self, row_num: int, message: str):
        super().__init__(f"Row {row_num}: {message}")
        self.row_num = row_num


class NoTransactionsParsedError(DomainError):
    """An import finished without emitting a single transaction."""

    def __init__(self, skipped: int = 0, errors: tuple[str, ...] = ()):
        super().__init__(no_transactions_parsed(skipped))
        self.skipped = skipped
        self.errors = errors


class UnmappedCategoryError(DomainError):
    """A transaction carries a category the journal rules cannot post."""

    def __init__(self, transaction_id: str, category: str):
        super().__init__(unmapped_category(transaction_id, category))
        self.transaction_id = transaction_id
        self.category = category


def amount_not_a_number(value: str) -> str:
    """Return message for an amount without digits."""
    return f"Could not parse amount '{value}': no digits found"


def empty_input() -> str:
    """Return message for import text without data rows."""
    return "Import text has no data rows (a header and at least one row are required)"


def no_transactions_parsed(skipped: int) -> str:
    """Return message for an import that produced nothing."""
    return (
        f"Could not parse any transactions ({skipped} row{'s' if skipped != 1 else ''} "
        "skipped). Check the file format."
    )


def unmapped_category(transaction_id: str, category: str) -> str:
    """Return message for a transaction without a posting rule."""
    return f"Transaction '{transaction_id}' has category '{category}' with no journal rule"


def account_not_found(code: str) -> str:
    """Return message for missing chart account."""
    return f"Account {code} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction '{transaction_id}' not found"


def duplicate_transaction_id(transaction_id: str) -> str:
    """Return message for duplicate transaction ID."""
    return f"Transaction with id '{transaction_id}' already exists"
