"""Parsing and formatting of budget amounts typed into the grid.

Amounts live in the engine as signed integers of minor currency units.
Text only exists at the interface boundary: ``parse_amount`` turns what a
user typed into minor units once, and ``format_amount`` renders them back.
"""

import re

from src.domain.constants import DEFAULT_DECIMAL_PLACES

_DISALLOWED = re.compile(r"[^\d\-,.]")
_SEPARATORS = re.compile(r"[^\d\-]")


def _strip_affixes(text: str, prefix: str, suffix: str) -> str:
    if prefix and text.startswith(prefix):
        text = text[len(prefix):]
    if suffix and text.endswith(suffix):
        text = text[: len(text) - len(suffix)]
    return text


def _missing_fraction_digits(text: str, decimal_places: int) -> int:
    """Return how many zero digits must be appended to reach minor units.

    A period or comma counts as the decimal point only when at most
    ``decimal_places`` digits follow it; otherwise separators are digit
    grouping and the value is a whole number.
    """
    if decimal_places == 0:
        return 0
    position = max(text.rfind("."), text.rfind(","))
    if position == -1:
        return decimal_places
    fraction_digits = len(text) - position - 1
    if fraction_digits > decimal_places:
        return decimal_places
    return decimal_places - fraction_digits


def parse_amount(
    text: str,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    prefix: str = "",
    suffix: str = "",
) -> int:
    """Parse a typed amount into minor currency units.

    Both "1,234.5" and "1.234,5" are accepted; "12" means twelve major
    units.

    Args:
        text: Raw cell text, possibly with a currency prefix or suffix.
        decimal_places: Minor-unit digits of the category currency.
        prefix: Currency prefix to strip, e.g. "$".
        suffix: Currency suffix to strip, e.g. " €".

    Returns:
        int: Signed amount in minor units.

    Raises:
        ValueError: If the text holds no number.
    """
    cleaned = _strip_affixes(text.strip(), prefix, suffix)
    cleaned = _DISALLOWED.sub("", cleaned)
    padding = _missing_fraction_digits(cleaned, decimal_places)
    digits = _SEPARATORS.sub("", cleaned)
    negative = digits.startswith("-")
    digits = digits.replace("-", "")
    if not digits:
        raise ValueError(f"Not an amount: {text!r}")
    value = int(digits) * 10**padding
    return -value if negative else value


def format_amount(
    amount: int,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> str:
    """Render minor units with grouping, e.g. -123456 -> "-1,234.56"."""
    if decimal_places == 0:
        return f"{amount:,}"
    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), 10**decimal_places)
    return f"{sign}{whole:,}.{fraction:0{decimal_places}d}"


__all__ = ["parse_amount", "format_amount"]
