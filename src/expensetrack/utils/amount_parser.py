"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

_NUMERIC_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_CENT = Decimal("1")

# Largest amount the expenses.amount column (NUMERIC(10, 2)) holds
MAX_AMOUNT = Decimal("99999999.99")


def parse_amount(amount_str: str, require_decimal_point: bool = False) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles:
    - "12.34"
    - "\\"1,234.56\\"" (quoted, with thousand separators)
    - "€12.34" (currency symbols, only when ``require_decimal_point`` is off)

    Args:
        amount_str: Amount string
        require_decimal_point: Reject strings without a '.', so that "1234"
            is not mistaken for "12.34". Used by file imports.

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed, or the value is not
            finite or larger than MAX_AMOUNT
    """
    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip().replace('"', "").replace(",", "")
    if not require_decimal_point:
        cleaned = re.sub(r"[$€£¥]", "", cleaned)
    cleaned = cleaned.strip()

    if not _NUMERIC_RE.fullmatch(cleaned):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if require_decimal_point and "." not in cleaned:
        raise ValueError(f"Amount '{amount_str}' has no decimal point")

    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not value.is_finite() or value.copy_abs() > MAX_AMOUNT:
        raise ValueError(f"Amount '{amount_str}' is out of range")
    return value


def to_cents(amount: Decimal) -> int:
    """Convert an amount to integer cents, rounding half away from zero."""
    return int((Decimal(amount) * 100).quantize(_CENT, rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal amount."""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))
