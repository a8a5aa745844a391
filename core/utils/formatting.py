"""Human-friendly formatting for wizard panels.

Thin facade over the `humanize` library so render code does not depend on
third-party signatures directly.
"""

import humanize

CURRENCY_SYMBOL = "cr"


def format_credits(amount: int) -> str:
    """Format a signed credit amount, e.g. -12,500 cr."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{humanize.intcomma(abs(amount))} {CURRENCY_SYMBOL}"


def format_rate(value: float, unit: str, digits: int = 2) -> str:
    """Format a physical quantity with fixed precision, e.g. '0.125 AU/h'."""
    return f"{value:.{digits}f} {unit}"
