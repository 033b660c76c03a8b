"""Helpers for integer minor-unit money values."""

from decimal import Decimal


def coerce_minor_units(value) -> int:
    """Normalize numeric values to integer minor units.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        int: Normalized amount.

    Raises:
        ValueError: If the value carries a fractional part.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Not a money amount: {value!r}")
    if isinstance(value, int):
        return value
    decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    if decimal_value != decimal_value.to_integral_value():
        raise ValueError(f"Amount has a fractional minor unit: {value!r}")
    return int(decimal_value)


def format_minor_units(amount: int, currency: str, exponent: int = 2) -> str:
    """Format a minor-unit amount for messages, e.g. ``IDR 3,000.00``.

    Args:
        amount: Amount in minor units.
        currency: ISO 4217 currency code.
        exponent: Number of minor-unit digits of the currency.

    Returns:
        str: Human-readable amount.
    """
    sign = "-" if amount < 0 else ""
    major = Decimal(abs(amount)).scaleb(-exponent)
    return f"{sign}{currency} {major:,.{exponent}f}"


__all__ = ["coerce_minor_units", "format_minor_units"]
