"""
Ge'ez Errors
============
Every failure the codec can report, as one exception hierarchy.

    GeezError
      ├── InvalidArgumentError   (also TypeError)   — not an integer / not a string
      ├── NoRepresentationError  (also ValueError)  — zero or negative
      ├── EmptyInputError        (also ValueError)  — blank numeral
      └── StructuralError        (also ValueError)  — unknown glyph or bad digit-group

Each error carries an ErrorKind so callers can branch without isinstance chains.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure kinds reported by the encoder, decoder and validator."""
    INVALID_ARGUMENT  = "invalid_argument"
    NO_REPRESENTATION = "no_representation"
    EMPTY_INPUT       = "empty_input"
    UNKNOWN_GLYPH     = "unknown_glyph"
    DUPLICATE_TENS    = "duplicate_tens"
    DUPLICATE_ONES    = "duplicate_ones"
    TENS_AFTER_ONES   = "tens_after_ones"


STRUCTURAL_KINDS = frozenset({
    ErrorKind.UNKNOWN_GLYPH,
    ErrorKind.DUPLICATE_TENS,
    ErrorKind.DUPLICATE_ONES,
    ErrorKind.TENS_AFTER_ONES,
})


class GeezError(Exception):
    """Base class for all Ge'ez numeral errors."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(GeezError, TypeError):
    """Raised when the encoder gets a non-integer or the decoder a non-string."""
    kind = ErrorKind.INVALID_ARGUMENT


class NoRepresentationError(GeezError, ValueError):
    """Raised for integers below 1 — Ge'ez has no zero and no negatives."""
    kind = ErrorKind.NO_REPRESENTATION


class EmptyInputError(GeezError, ValueError):
    """Raised for an empty or whitespace-only numeral."""
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Input cannot be empty"):
        super().__init__(message)


class StructuralError(GeezError, ValueError):
    """
    A numeral string that breaks the Ge'ez grammar.

    Attributes:
        kind:      One of the structural ErrorKinds
        position:  1-based index of the offending character
        glyph:     The offending character
        numeral:   The full candidate string
    """

    def __init__(self, kind: ErrorKind, position: int, glyph: str,
                 numeral: str, message: Optional[str] = None):
        if kind not in STRUCTURAL_KINDS:
            raise ValueError(f"{kind} is not a structural error kind")
        self.kind = kind
        self.position = position
        self.glyph = glyph
        self.numeral = numeral
        super().__init__(message or _structural_message(kind, position, glyph, numeral))

    def __repr__(self) -> str:
        return (f"StructuralError({self.kind.name}, position={self.position}, "
                f"glyph={self.glyph!r})")


def _structural_message(kind: ErrorKind, position: int, glyph: str, numeral: str) -> str:
    if kind is ErrorKind.UNKNOWN_GLYPH:
        return f'Invalid character: "{glyph}" at position {position}. Only Ge\'ez numerals are allowed.'
    if kind is ErrorKind.DUPLICATE_TENS:
        return (f"Invalid structure: Multiple tens digits in sequence at position {position}. "
                f'"{numeral}" is not a valid Ge\'ez number.')
    if kind is ErrorKind.DUPLICATE_ONES:
        return (f"Invalid structure: Multiple ones digits in sequence at position {position}. "
                f'"{numeral}" is not a valid Ge\'ez number.')
    return (f"Invalid structure: Tens digit after ones digit at position {position}. "
            f'Tens must come before ones. "{numeral}" is not a valid Ge\'ez number.')
