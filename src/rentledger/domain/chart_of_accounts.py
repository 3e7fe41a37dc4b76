"""Fixed chart of accounts for the rental business."""

from rentledger.domain.entities import Account, AccountType
from rentledger.domain.errors import NotFoundError, account_not_found


CHART_OF_ACCOUNTS = (
    Account("1000", "Assets", AccountType.HEADER),
    Account("1001", "Cash on Hand", AccountType.ASSET),
    Account("1002", "Bank Central Asia", AccountType.ASSET),
    Account("1200", "Fixed Assets - Bikes", AccountType.ASSET),
    Account("2000", "Liabilities", AccountType.HEADER),
    Account("2001", "Accounts Payable", AccountType.LIABILITY),
    Account("3000", "Equity", AccountType.HEADER),
    Account("3001", "Owner Capital", AccountType.EQUITY),
    Account("4000", "Revenue", AccountType.HEADER),
    Account("4001", "Rental Income", AccountType.REVENUE),
    Account("5000", "Expenses", AccountType.HEADER),
    Account("5001", "Maintenance Expense", AccountType.EXPENSE),
    Account("5002", "Rent Expense", AccountType.EXPENSE),
    Account("5003", "General & Admin", AccountType.EXPENSE),
)

CASH_ON_HAND = "1001"
BANK = "1002"
FIXED_ASSETS = "1200"
RENTAL_INCOME = "4001"
MAINTENANCE_EXPENSE = "5001"
RENT_EXPENSE = "5002"

# First digit of an account code
ACCOUNT_CLASSES = {
    "1": AccountType.ASSET,
    "2": AccountType.LIABILITY,
    "3": AccountType.EQUITY,
    "4": AccountType.REVENUE,
    "5": AccountType.EXPENSE,
}

_ACCOUNTS_BY_CODE = {account.code: account for account in CHART_OF_ACCOUNTS}


def get_account(code: str) -> Account:
    """Get a chart account by code.

    Raises:
        NotFoundError: If the code is not in the chart
    """
    account = _ACCOUNTS_BY_CODE.get(code)
    if account is None:
        raise NotFoundError(account_not_found(code))
    return account


def resolve_contra_account(name: str | None) -> Account:
    """Pick the cash or bank account a contra account name posts to."""
    if name is not None and "cash" in name.lower():
        return get_account(CASH_ON_HAND)
    return get_account(BANK)
