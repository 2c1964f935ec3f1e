"""Rounding and formatting primitives.

`round2` is the rounding checkpoint applied at every geometric and monetary
boundary of the calculators. The formatters are presentational only: their
output never feeds back into a computation.
"""

from __future__ import annotations

import math

NBSP = "\u00a0"


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    The rounding is applied to ``value * 100`` so results match the
    reference quotes to the cent. NaN, infinities and magnitudes too large
    to scale by 100 are returned unchanged.

    Args:
        value: Number to round

    Returns:
        Rounded value (``-0.0`` is normalized to ``0.0``)
    """
    if not math.isfinite(value):
        return value
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        return value
    rounded = math.floor(scaled + 0.5) / 100
    return -rounded if value < 0 and rounded else rounded


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def _to_french(formatted: str) -> str:
    """Swap English separators ("1,234.5") for French ones ("1 234,5")."""
    return formatted.replace(",", NBSP).replace(".", ",")


def format_currency(value: float | None) -> str:
    """Format an amount in euros with 2 decimals.

    Args:
        value: Amount to format

    Returns:
        Formatted string like "1 234,50 €" ("0,00 €" for missing values)
    """
    if not _is_number(value):
        return f"0,00{NBSP}€"
    return _to_french(f"{value:,.2f}") + f"{NBSP}€"


def format_quantity(value: float | None) -> str:
    """Format a quantity with at most 2 decimals and no trailing zeros.

    Args:
        value: Quantity to format

    Returns:
        Formatted string like "12,5" or "1 200"
    """
    if not _is_number(value):
        return "0"
    if float(value).is_integer():
        return _to_french(f"{int(value):,}")
    formatted = f"{value:,.2f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return _to_french(formatted)


def format_percent(rate: float) -> str:
    """Format a VAT rate, e.g. "5,5 %"."""
    return f"{rate:g}".replace(".", ",") + f"{NBSP}%"
