# Ge'ez Numerals — arbitrary-precision Ethiopic numeral codec
"""
Ge'ez Numerals: convert between integers and Ethiopic numerals.
Supports unlimited range through stacked myriads (፼፼ = 10000²)
and rejects malformed numerals with structured errors.
"""
from .glyphs import (
    GLYPH_REGISTRY, GlyphInfo, DigitClass, MyriadPower,
    HUNDRED, MYRIAD, KEYPAD, lookup, classify, myriad_power_info,
)
from .errors import (
    ErrorKind, GeezError, InvalidArgumentError, NoRepresentationError,
    EmptyInputError, StructuralError,
)
from .lexer import Lexer, Token
from .validator import validate, ensure_valid, is_valid
from .encoder import encode
from .decoder import decode
from .safe import (
    safe_encode, safe_decode, describe_validation_error,
    describe_arabic_input, convert_arabic_input,
    parse_integer, digit_count, format_number,
)

__version__ = "1.0.0"
__all__ = [
    "GLYPH_REGISTRY", "GlyphInfo", "DigitClass", "MyriadPower",
    "HUNDRED", "MYRIAD", "KEYPAD", "lookup", "classify", "myriad_power_info",
    "ErrorKind", "GeezError", "InvalidArgumentError", "NoRepresentationError",
    "EmptyInputError", "StructuralError",
    "Lexer", "Token",
    "validate", "ensure_valid", "is_valid",
    "encode", "decode",
    "safe_encode", "safe_decode", "describe_validation_error",
    # Live-typing helpers for Arabic-number input
    "describe_arabic_input", "convert_arabic_input",
    # Decimal text of any length
    "parse_integer", "digit_count", "format_number",
]
