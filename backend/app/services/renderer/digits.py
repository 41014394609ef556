"""Devanagari numeral transcoding and amount formatting."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

_DEVANAGARI_DIGITS = str.maketrans("0123456789", "०१२३४५६७८९")


def to_local_digits(text: object) -> str:
    """
    Map ASCII digits 0-9 to Devanagari numerals, one for one.

    Every other character passes through unchanged, so applying it to
    its own output is a no-op. Apply exactly once, at render time.
    """
    if text is None:
        return ""
    return str(text).translate(_DEVANAGARI_DIGITS)


def format_amount(value: Union[int, float, Decimal]) -> str:
    """Two-decimal amount with Devanagari numerals (1810 -> '१८१०.००')."""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return to_local_digits(f"{amount:.2f}")


def format_rate(value: Union[int, float, Decimal]) -> str:
    """Percentage without a trailing '.0' for whole numbers (12.0 -> '१२')."""
    number = Decimal(str(value)).normalize()
    text = format(number, "f")
    return to_local_digits(text)
