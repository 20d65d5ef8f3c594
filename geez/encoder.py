"""
Ge'ez Encoder
=============
Converts a positive integer into its canonical Ge'ez numeral.

Numbers below 10,000 are written with ፻ as the hundreds multiplier:
    123  → ፻፳፫
    2021 → ፳፻፳፩

Larger numbers are split into base-10,000 limbs; each limb is written as a
number below 10,000 followed by one ፼ per power of 10,000:
    10,000        → ፼
    100,000,000   → ፼፼
    123,456,789   → ፼፼፳፫፻፵፭፼፷፯፻፹፱
"""
import numbers
from typing import Any

from .errors import InvalidArgumentError, NoRepresentationError
from .glyphs import HUNDRED, MYRIAD, ONES_GLYPHS, TENS_GLYPHS

MYRIAD_BASE = 10_000


def encode_two_digit(n: int) -> str:
    """Write 0-99 as at most one tens glyph followed by at most one ones glyph."""
    if n == 0:
        return ""
    if n < 10:
        return ONES_GLYPHS[n]
    tens, ones = divmod(n, 10)
    result = TENS_GLYPHS[tens * 10]
    if ones:
        result += ONES_GLYPHS[ones]
    return result


def encode_up_to_9999(n: int) -> str:
    """Write 0-9999; a leading hundreds count of 1 is implied by a bare ፻."""
    if n == 0:
        return ""
    if n < 100:
        return encode_two_digit(n)

    hundreds, remainder = divmod(n, 100)
    if hundreds == 1:
        result = HUNDRED
    else:
        result = encode_two_digit(hundreds) + HUNDRED
    return result + encode_two_digit(remainder)


def _as_integer(n: Any) -> int:
    if isinstance(n, bool):
        raise InvalidArgumentError("Ge'ez numerals encode integers, not booleans")
    if isinstance(n, numbers.Integral):
        return int(n)
    if isinstance(n, float):
        if n.is_integer():
            return int(n)
        raise InvalidArgumentError(f"Ge'ez numerals do not support decimal numbers (got {n!r})")
    raise InvalidArgumentError(f"Ge'ez numerals encode integers, got {type(n).__name__}")


def _limbs(n: int) -> list[int]:
    """Base-10,000 digits of ``n``, least significant first."""
    limbs = []
    while n:
        n, limb = divmod(n, MYRIAD_BASE)
        limbs.append(limb)
    return limbs


def encode(n: int) -> str:
    """
    Convert a positive integer to Ge'ez numerals.

    Args:
        n: The number to convert. Integral floats such as 3.0 are accepted.

    Returns:
        The canonical Ge'ez numeral string

    Raises:
        InvalidArgumentError: If ``n`` is not an integer
        NoRepresentationError: If ``n`` is zero or negative
    """
    value = _as_integer(n)
    if value < 1:
        raise NoRepresentationError(
            "Ge'ez numerals do not have a representation for zero or negative numbers"
        )

    if value < MYRIAD_BASE:
        return encode_up_to_9999(value)

    limbs = _limbs(value)
    top = len(limbs) - 1
    parts = []

    for power in range(top, -1, -1):
        limb = limbs[power]
        if limb == 0:
            continue
        if power == 0:
            parts.append(encode_up_to_9999(limb))
        elif limb == 1 and power == top:
            # Leading unit limb: ፼፼ alone means 1 × 10000²
            parts.append(MYRIAD * power)
        else:
            # An interior 1 needs its ፩, or the run would merge with the one before it
            parts.append(encode_up_to_9999(limb) + MYRIAD * power)

    return "".join(parts) or ONES_GLYPHS[1]
