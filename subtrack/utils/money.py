"""Money rounding and display helpers, applied at the output edge only"""

from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction


def to_money(value: Fraction | Decimal | int, places: int = 2) -> Decimal:
    """
    Round an exact amount to ``places`` decimals (half-up).

    Fractions are divided in Decimal arithmetic, so 130/3 -> Decimal("43.33").
    """
    quantum = Decimal(1).scaleb(-places)
    if isinstance(value, Fraction):
        amount = Decimal(value.numerator) / Decimal(value.denominator)
    else:
        amount = Decimal(value)
    return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def format_amount(value: Fraction | Decimal | int, currency_code: str) -> str:
    """Render an amount for display, e.g. ``15.99 USD``"""
    return f"{to_money(value)} {currency_code.upper()}"
