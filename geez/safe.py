"""
Safe Conversions & Live Input Feedback
======================================
Non-raising wrappers for call sites that re-run on every keystroke.

Every error kind collapses to None here, so these helpers are only for
callers that do not need to tell failures apart. Anything else should call
encode/decode directly and handle GeezError.
"""
import logging
import math
import re
from typing import Any, Optional

from .decoder import decode
from .encoder import encode
from .errors import GeezError
from .validator import validate

logger = logging.getLogger(__name__)

# Digits with optional sign, thousands separators and a fractional part
_ARABIC_NUMBER = re.compile(r"^[+-]?(\d{1,3}(,\d{3})+|\d+)(\.\d*)?$|^[+-]?\.\d+$")

# int() and str() refuse digit strings past sys.get_int_max_str_digits()
_CHUNK_DIGITS = 1000


def parse_integer(text: str) -> int:
    """
    int() for a decimal literal of any length.

    Raises:
        ValueError: If ``text`` is not an optionally signed run of digits
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isdecimal():
        raise ValueError(f"invalid integer literal: {text!r}")
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if text.startswith("-") else value


def digit_count(value: int) -> int:
    """Number of decimal digits in ``value``, without converting it to text."""
    value = abs(value)
    if value < 10:
        return 1
    digits = int(math.log10(value)) + 1
    # log10 is a float estimate; settle the boundary exactly
    if 10 ** (digits - 1) > value:
        digits -= 1
    elif 10 ** digits <= value:
        digits += 1
    return digits


def format_number(value: int, group: bool = False) -> str:
    """Decimal text for ``value``; too-long values print as a digit count."""
    try:
        return f"{value:,}" if group else str(value)
    except ValueError:
        return f"<{digit_count(value):,}-digit number>"


def safe_encode(n: Any) -> Optional[str]:
    """Like encode(), but returns None instead of raising."""
    try:
        return encode(n)
    except GeezError as e:
        logger.debug("safe_encode(%r) suppressed %s: %s", n, e.kind.name, e)
        return None


def safe_decode(numeral: Any) -> Optional[int]:
    """Like decode(), but returns None instead of raising."""
    try:
        return decode(numeral)
    except GeezError as e:
        logger.debug("safe_decode(%r) suppressed %s: %s", numeral, e.kind.name, e)
        return None


def describe_validation_error(numeral: Any) -> Optional[str]:
    """
    One-line message for a Ge'ez numeral being typed.

    Returns None when the input is empty or valid, otherwise the validator's
    message for the first violation.
    """
    if numeral is None:
        return None
    if isinstance(numeral, str):
        numeral = numeral.strip()
        if not numeral:
            return None
    error = validate(numeral)
    return error.message if error is not None else None


def _parse_arabic(text: str) -> Optional[float | int]:
    cleaned = text.strip()
    if not _ARABIC_NUMBER.match(cleaned):
        return None
    cleaned = cleaned.replace(",", "")
    whole, _, fraction = cleaned.partition(".")
    if fraction.strip("0"):
        return float(cleaned)
    if not whole.lstrip("+-"):
        return 0
    return parse_integer(whole)


def describe_arabic_input(text: str) -> Optional[str]:
    """
    One-line message for an Arabic number being typed.

    Returns None when the input is empty or can be written in Ge'ez.
    """
    if not text or not text.strip():
        return None
    number = _parse_arabic(text)
    if number is None:
        return "Please enter a valid number"
    if number < 1:
        return "Ge'ez numerals start from 1 (no zero)"
    if not isinstance(number, int):
        return "Decimals are not supported in Ge'ez"
    return None


def convert_arabic_input(text: str) -> Optional[str]:
    """Ge'ez numeral for typed Arabic-number text, or None if it has none."""
    if not text or describe_arabic_input(text) is not None:
        return None
    return safe_encode(_parse_arabic(text))
