"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from enum import Enum
import re

from rentledger.domain.errors import NotANumberError, amount_not_a_number


class DotPolicy(str, Enum):
    """How a lone ``.`` separator is interpreted.

    Bank exports in Rupiah write ten thousand as ``10.000``, so the default
    treats the dot as a grouping separator. ``DECIMAL`` is for sources that
    write ``10.5``.
    """

    GROUPING = "grouping"
    DECIMAL = "decimal"


def parse_amount(amount_str: str, dot_policy: DotPolicy = DotPolicy.GROUPING) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "540000"
    - "Rp 1.234.567", "Rp. 1.234.567" (the currency token and its dot are dropped)
    - "1,234,567.00" and "10.000,50" (last separator is the decimal one)
    - "10000,50" (a lone comma is decimal)
    - "(5000)" (negative in parentheses)
    - "-150000"

    Args:
        amount_str: Amount string
        dot_policy: Interpretation of a lone ``.`` separator

    Returns:
        Decimal amount

    Raises:
        NotANumberError: If no digits remain after cleaning
    """
    if amount_str is None:
        raise NotANumberError(amount_not_a_number(""))

    # Currency tokens take a trailing dot with them: "Rp. 500"
    clean = re.sub(r"[A-Za-z]+\.?", "", amount_str)
    clean = re.sub(r"[\s$€£¥]", "", clean)

    # Handle parentheses notation (negative)
    is_negative = False
    if clean.startswith("(") and clean.endswith(")"):
        is_negative = True
        clean = clean[1:-1]
    if clean.startswith("-"):
        is_negative = not is_negative
        clean = clean[1:]

    if not re.search(r"\d", clean):
        raise NotANumberError(amount_not_a_number(amount_str))

    has_dot = "." in clean
    has_comma = "," in clean
    if has_dot and has_comma:
        if clean.rfind(",") > clean.rfind("."):
            # 10.000,50
            clean = clean.replace(".", "").replace(",", ".")
        else:
            # 10,000.50
            clean = clean.replace(",", "")
    elif has_comma:
        if clean.count(",") > 1:
            clean = clean.replace(",", "")
        else:
            clean = clean.replace(",", ".")
    elif has_dot:
        if dot_policy is DotPolicy.GROUPING or clean.count(".") > 1:
            clean = clean.replace(".", "")

    try:
        amount = Decimal(clean)
    except InvalidOperation:
        raise NotANumberError(amount_not_a_number(amount_str))

    return -amount if is_negative else amount
