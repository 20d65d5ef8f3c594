"""
Ge'ez Decoder
=============
Converts a Ge'ez numeral string into its integer value.

The string is validated in full before any value is accumulated, so a
malformed numeral always raises instead of producing a wrong number.

    ፻፳፫   → 123
    ፼     → 10,000        (a bare multiplier implies 1)
    ፪፼    → 20,000
    ፼፼፼   → 1,000,000,000,000
"""
from .errors import EmptyInputError, InvalidArgumentError
from .glyphs import DigitClass
from .lexer import Lexer
from .validator import ensure_valid


def decode(numeral: str) -> int:
    """
    Convert Ge'ez numerals to an integer.

    Args:
        numeral: The Ge'ez numeral string. Surrounding whitespace is ignored.

    Returns:
        The integer value (always >= 1)

    Raises:
        InvalidArgumentError: If ``numeral`` is not a string
        EmptyInputError: If ``numeral`` is blank
        StructuralError: If ``numeral`` breaks the Ge'ez grammar
    """
    if not isinstance(numeral, str):
        raise InvalidArgumentError(
            f"Ge'ez numerals must be given as text, got {type(numeral).__name__}"
        )
    source = numeral.strip()
    if not source:
        raise EmptyInputError()

    ensure_valid(source)

    total = 0
    current_group = 0

    for token in Lexer(source).tokenize():
        if token.digit_class is DigitClass.MYRIAD:
            # token.value is already 10000 ** run length
            total += (current_group or 1) * token.value
            current_group = 0
        elif token.digit_class is DigitClass.HUNDRED:
            current_group = (current_group or 1) * 100
        else:
            current_group += token.value

    return total + current_group
