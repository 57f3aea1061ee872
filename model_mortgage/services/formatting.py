# This project was developed with assistance from AI tools.
"""Render-time formatting for calculator results.

Calculators return raw floats; these helpers turn them into display strings
(US dollars, percentages from fractions, plain numbers) and clean up
form-entered numbers before validation.
"""

import math
import re
from collections.abc import Iterable

from ..schemas import CalculatorResult, ResultFormat, VerdictResult


def format_currency(value: float, decimals: int = 0) -> str:
    """Format as US dollars, e.g. ``$1,234`` or ``-$1,234.56``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percentage(value: float, decimals: int = 2) -> str:
    """Format a fraction as a percentage: 0.43 -> ``43.00%``."""
    return f"{value * 100:.{decimals}f}%"


def format_number(value: float, decimals: int = 0) -> str:
    """Format with thousands separators: 1234.6 -> ``1,235``."""
    return f"{value:,.{decimals}f}"


def format_result(result: CalculatorResult | VerdictResult) -> str:
    """Display string for one result entry.

    Verdicts render their text; an infinite value (a refinance that never
    breaks even) renders as ``Never``.
    """
    if isinstance(result, VerdictResult):
        return result.description
    if math.isinf(result.value):
        return "Never"
    if result.format is ResultFormat.CURRENCY:
        return format_currency(result.value)
    if result.format is ResultFormat.PERCENTAGE:
        return format_percentage(result.value)
    return format_number(result.value, 2)


def parse_numeric_input(text: str) -> float | None:
    """Parse a form-entered number such as ``$350,000`` or ``6.5%``.

    Returns None when nothing numeric is left after stripping symbols.
    """
    cleaned = re.sub(r"[$,%\s]", "", text.strip())
    try:
        return float(cleaned)
    except ValueError:
        return None


def result_map(
    results: Iterable[CalculatorResult | VerdictResult],
) -> dict[str, CalculatorResult | VerdictResult]:
    """Index a result list by label."""
    return {result.label: result for result in results}
