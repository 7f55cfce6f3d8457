"""
Result formatting.

Every bare number the engine returns goes through format_number() so the
same value always prints the same way. Results built from physical
constants use format_scientific(), since their magnitudes are far outside
the fixed six-decimal range.
"""

import math

from ..utils.constants import (
    DECIMAL_PLACES,
    SCIENTIFIC_LOWER,
    SCIENTIFIC_UPPER,
    SIGNIFICANT_FIGURES,
    ZERO_TOLERANCE,
)


def format_number(value: float) -> str:
    """
    Format a number for display.

    - magnitude below 1e-10 -> "0"
    - within 1e-10 of an integer -> that integer
    - otherwise six decimals

    Examples:
        format_number(4.0)          -> "4"
        format_number(-2.0000000001) -> "-2"
        format_number(0.5)          -> "0.500000"
    """
    if math.isnan(value) or math.isinf(value):
        return str(value)
    if abs(value) < ZERO_TOLERANCE:
        return "0"
    nearest = round(value)
    if abs(value - nearest) < ZERO_TOLERANCE:
        return str(int(nearest))
    return f"{value:.{DECIMAL_PLACES}f}"


def format_fixed(value: float) -> str:
    """Fixed six-decimal rendering, used for limit values."""
    return f"{value:.{DECIMAL_PLACES}f}"


def format_error(message: str) -> str:
    return f"Error: {message}"


def format_scientific(value: float) -> str:
    """
    Significant-figure rendering for physical-constant results.

    Magnitudes that format_number would flatten to "0" or print with float
    noise use LaTeX scientific notation instead.

    Examples:
        format_scientific(1.054571817e-34) -> "1.054572 \\times 10^{-34}"
        format_scientific(299792458.0)     -> "299792458"
    """
    if value == 0 or not math.isfinite(value):
        return format_number(value)
    if SCIENTIFIC_LOWER <= abs(value) < SCIENTIFIC_UPPER:
        return format_number(value)
    mantissa, exponent = f"{value:.{SIGNIFICANT_FIGURES - 1}e}".split("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa} \\times 10^{{{int(exponent)}}}"
