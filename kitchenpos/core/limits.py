"""
Bounds of the numeric columns.

Prices are stored as NUMERIC(19, 2), quantities as BIGINT and guest counts
as INTEGER. Values outside these bounds are rejected before they reach the
database instead of being rounded or overflowing there.
"""
from decimal import Decimal

PRICE_PRECISION = 19
PRICE_SCALE = 2

INTEGER_MIN = -(2 ** 31)
INTEGER_MAX = 2 ** 31 - 1
BIGINT_MAX = 2 ** 63 - 1

_PRICE_CEILING = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE)


def fits_price_column(price: Decimal) -> bool:
    """True if ``price`` can be stored exactly in a price column."""
    if not price.is_finite():
        return False
    if abs(price) >= _PRICE_CEILING:
        return False
    # 1.50 and 1.5 are the same price; only significant decimals count
    return -price.normalize().as_tuple().exponent <= PRICE_SCALE
