"""Number formatting helpers."""

from .constants import FORMAT_FALLBACK


def thousands_separated(value: int) -> str:
    """
    Render a non-negative integer with ',' between groups of three digits.

    Examples:
        thousands_separated(10000) == "10,000"
        thousands_separated(10000000) == "10,000,000"

    Returns FORMAT_FALLBACK if the value cannot be rendered.
    """
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError, OverflowError):
        return FORMAT_FALLBACK
