"""
Monetary helpers.

Amounts live in the domain as integers in centavos (1/100 of a sol). The
conversion to major units happens only here, for display.
"""

from decimal import Decimal

from bodega.config import get_settings

# IGV (Peruvian VAT) rate, in percent of the subtotal
IGV_RATE_PERCENT = 18

# 99 999.99 in major units
MAX_PRICE = 9_999_999

CENTS_PER_UNIT = 100


def tax_for(subtotal: int, rate_percent: int = IGV_RATE_PERCENT) -> int:
    """Return the tax due on ``subtotal`` centavos, rounded half up.

    Pure integer arithmetic: 2600 centavos at 18% gives 468.
    """
    return (subtotal * rate_percent + CENTS_PER_UNIT // 2) // CENTS_PER_UNIT


def to_major(centavos: int) -> Decimal:
    """Convert centavos to major units (soles)."""
    return Decimal(centavos) / CENTS_PER_UNIT


def format_amount(centavos: int, symbol: str | None = None) -> str:
    """Render an amount for display, e.g. ``S/ 26.00``."""
    if symbol is None:
        symbol = get_settings().currency.symbol
    return f"{symbol} {to_major(centavos):,.2f}"
