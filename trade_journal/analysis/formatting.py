"""Display helpers for money, percentages, durations and ratios."""
import math


def format_currency(value: float) -> str:
    """'+$12.50', '-$3.00', '$0.00'; thousands shown as '+$1.25k'."""
    abs_value = abs(value)
    if abs_value >= 1000:
        sign = "-" if value < 0 else "+"
        return f"{sign}${abs_value / 1000:.2f}k"
    sign = "-" if value < 0 else "+" if value > 0 else ""
    return f"{sign}${abs_value:.2f}"


def format_percent(value: float) -> str:
    return f"{'+' if value >= 0 else ''}{value:.2f}%"


def format_hold_time(minutes: float) -> str:
    """Minutes under an hour, hours under a day, days beyond that."""
    if minutes < 60:
        return f"{math.floor(minutes + 0.5)}m"
    if minutes < 1440:
        return f"{minutes / 60:.1f}h"
    return f"{minutes / 1440:.1f}d"


def format_profit_factor(value: float) -> str:
    if math.isinf(value) and value > 0:
        return "∞"
    return f"{value:.2f}"
