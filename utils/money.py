"""
utils/money.py
--------------
Conversion between major currency units (dollars) and the minor units
(cents) prices are stored in.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENTS_PER_UNIT = 100


def to_minor_units(amount: Union[int, float, Decimal, str]) -> int:
    """
    Convert an amount in major units to whole minor units.

    Floats go through their string form so 99.99 becomes 9999, not 9998.

    Raises:
        decimal.InvalidOperation: If `amount` is not numeric.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    cents = (value * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)
