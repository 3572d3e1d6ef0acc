"""
Rounding helpers for displayed scores and percentages.
"""

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with ties toward positive infinity (6.25 -> 6.3, -6.25 -> -6.2)"""
    quantum = Decimal(1).scaleb(-decimals)
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return float(Decimal(str(value)).quantize(quantum, rounding=rounding))


def percentage(part: int, total: int) -> int:
    """Whole-number percentage of part in total, 0 when total is not positive"""
    if total <= 0:
        return 0
    return int(round_half_up(part / total * 100))
