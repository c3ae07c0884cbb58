"""Exact decimal handling for monetary amounts.

Amounts are persisted as fixed two-place strings ("1299.99") and converted to
``Decimal`` whenever arithmetic is involved. Floats never touch a price.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

TWO_PLACES = Decimal("0.01")


def to_decimal(value, field_name: str = "amount") -> Decimal:
    """Parse a stored or submitted amount into a two-place ``Decimal``."""
    if isinstance(value, float):
        # Route through repr so 0.1 becomes Decimal("0.1"), not its binary expansion
        value = repr(value)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field_name: [f"Invalid monetary amount: {value!r}"]}) from None

    if not amount.is_finite():
        raise ValidationError({field_name: [f"Invalid monetary amount: {value!r}"]})

    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_money(value) -> str:
    """Canonical storage form: two decimal places, no exponent."""
    return f"{to_decimal(value):.2f}"


def line_total(unit_price, quantity: int) -> Decimal:
    return to_decimal(unit_price) * quantity
