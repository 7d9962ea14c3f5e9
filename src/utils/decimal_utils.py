"""Helpers for Decimal normalization and integer-cents arithmetic."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Amount is not finite: {value!r}")
    return result


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100``, or zero when ``whole`` is zero."""
    if whole == 0:
        return Decimal("0")
    return part / whole * 100


def to_cents(value: Decimal) -> int:
    """Convert a Decimal amount to integer cents (ROUND_HALF_UP)."""
    return int(value.quantize(CENT, rounding=ROUND_HALF_UP) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


__all__ = ["CENT", "coerce_decimal", "percentage", "to_cents", "from_cents"]
