"""Helpers for Decimal normalization and minor currency units."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def fraction_to_decimal(num, denom) -> Decimal:
    """Convert a GnuCash num/denom pair to Decimal.

    A zero or missing denominator yields zero.
    """
    denominator = coerce_decimal(denom)
    if denominator == 0:
        return Decimal("0")
    return coerce_decimal(num) / denominator


def to_minor_units(value, decimal_places: int) -> int:
    """Convert a major-unit amount to an integer of minor units.

    Args:
        value: Amount in major units (e.g. 12.34 dollars).
        decimal_places: Number of minor-unit digits of the currency.

    Returns:
        int: Amount in minor units, rounded half up.
    """
    scaled = coerce_decimal(value) * (Decimal(10) ** decimal_places)
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


__all__ = ["coerce_decimal", "fraction_to_decimal", "to_minor_units"]
