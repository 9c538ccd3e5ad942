# foodpos/core/money.py
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def money(value) -> Decimal:
    """Quantize to cents, rounding half up. Floats go through str() to keep their printed value."""
    if value is None:
        return None
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
