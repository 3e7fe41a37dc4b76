"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser


def parse_date(date_str: str, dayfirst: bool = False) -> date:
    """Parse a transaction date from an export cell or manual entry.

    Accepts anything dateutil reads ("2023-10-01", "01/10/2023",
    "1 Oct 2023") plus "today" and "yesterday".

    Args:
        date_str: Date string
        dayfirst: Read "01/10/2023" as 1 October rather than 10 January

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    try:
        return date_parser.parse(date_str, dayfirst=dayfirst).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
