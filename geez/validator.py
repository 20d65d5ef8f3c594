"""
Ge'ez Structural Validator
==========================
Static check that runs before any value is computed.

Rules:
  1. Input must not be empty or blank
     (other whitespace is not stripped: " ፩" fails rule 2 at position 1)
  2. Only the 20 Ge'ez numeral glyphs are allowed
  3. At most one tens digit per digit-group          (፲፳ is invalid)
  4. At most one ones digit per digit-group          (፫፬ is invalid)
  5. Tens come before ones within a digit-group      (፩፲ is invalid)
  6. ፻ and ፼ close a digit-group; the next one starts fresh

A digit-group may end the numeral without a closing multiplier.
"""
from typing import Optional

from .errors import (
    EmptyInputError, ErrorKind, GeezError, InvalidArgumentError, StructuralError,
)
from .glyphs import DigitClass
from .lexer import Lexer


def validate(candidate: str) -> Optional[GeezError]:
    """
    Check a numeral string against the Ge'ez grammar.

    Returns None when the string is structurally valid, otherwise the error
    describing the first violation. Never raises.
    """
    if not isinstance(candidate, str):
        return InvalidArgumentError(
            f"Ge'ez numerals must be given as text, got {type(candidate).__name__}"
        )
    if not candidate.strip():
        return EmptyInputError()

    try:
        tokens = Lexer(candidate).tokenize()
    except StructuralError as e:
        return e

    group_has_tens = False
    group_has_ones = False

    for token in tokens:
        if token.digit_class is DigitClass.TENS:
            if group_has_tens:
                return StructuralError(ErrorKind.DUPLICATE_TENS, token.position, token.glyph, candidate)
            if group_has_ones:
                return StructuralError(ErrorKind.TENS_AFTER_ONES, token.position, token.glyph, candidate)
            group_has_tens = True

        elif token.digit_class is DigitClass.ONES:
            if group_has_ones:
                return StructuralError(ErrorKind.DUPLICATE_ONES, token.position, token.glyph, candidate)
            group_has_ones = True

        else:
            # ፻ or ፼ — whatever follows is a new digit-group
            group_has_tens = False
            group_has_ones = False

    return None


def ensure_valid(candidate: str) -> None:
    """Raise the first violation in ``candidate``, if any."""
    error = validate(candidate)
    if error is not None:
        raise error


def is_valid(candidate: str) -> bool:
    """True when ``candidate`` is a structurally valid Ge'ez numeral."""
    return validate(candidate) is None
