"""
Display helpers for Naira amounts.

Amounts are shown whole-naira with thousands separators ("₦5,520,000"),
rounded half-up. Rates are shown to two decimal places.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

NAIRA_SYMBOL = "₦"

_NON_DIGITS = re.compile(r"[^0-9]")


def format_naira(amount: float) -> str:
    if not math.isfinite(amount):
        return str(amount)

    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{NAIRA_SYMBOL}{abs(rounded):,}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def parse_amount(value: str | float | int | None) -> float:
    """
    Turn user-typed text such as "₦1,200,000" into a number.

    Every non-digit character is dropped, so decimals and signs are not
    understood. Text without any digits reads as 0, and digit strings too
    large for a float read as infinity.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    digits = _NON_DIGITS.sub("", value)
    return float(digits) if digits else 0.0
