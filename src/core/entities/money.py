"""Currency amount helpers.

Amounts are plain ``Decimal`` values without a currency symbol; formatting
for display is left to the presentation layer.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")
CENTS = Decimal("0.01")


def parse_amount(value: Any) -> Decimal | None:
    """Parse a user-entered amount, returning None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    if not amount.is_finite():
        return None
    return amount


def clamp_final_cost(gross: Decimal, discount: Decimal) -> Decimal:
    """Apply a discount to a gross amount, never going below zero."""
    # Compare first: subtracting an enormous discount can overflow the context
    if discount >= gross:
        return ZERO
    return gross - discount


def quantize(amount: Decimal) -> Decimal:
    """Round to whole paise."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
