"""
Ge'ez Lexer
===========
Tokenizes a Ge'ez numeral string into a stream of classified tokens.
A run of consecutive ፼ glyphs is folded into a single MYRIAD token whose
``count`` is the run length, so ፼፼ arrives as one token worth 10000².

The validator and the decoder both consume this stream.
"""
from dataclasses import dataclass
from typing import Iterator

from .errors import ErrorKind, StructuralError
from .glyphs import GLYPH_REGISTRY, MYRIAD, DigitClass


@dataclass(frozen=True)
class Token:
    """A single token from a Ge'ez numeral."""
    digit_class: DigitClass
    glyph: str
    value: int
    position: int  # 1-based
    count: int = 1

    def __repr__(self) -> str:
        return f"Token({self.digit_class.name}, {self.glyph!r}, @{self.position})"


class Lexer:
    """
    Tokenizes a Ge'ez numeral.

    Usage:
        tokens = Lexer("፻፳፫").tokenize()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _current(self) -> str | None:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _check_alphabet(self):
        """Reject the first character outside the 20-glyph alphabet."""
        for index, ch in enumerate(self.source):
            if ch not in GLYPH_REGISTRY:
                raise StructuralError(ErrorKind.UNKNOWN_GLYPH, index + 1, ch, self.source)

    def _read_myriads(self) -> Token:
        """Read a run of ፼ glyphs."""
        start = self.pos + 1
        count = 0
        while self._current() == MYRIAD:
            count += 1
            self.pos += 1
        return Token(DigitClass.MYRIAD, MYRIAD * count, 10_000 ** count, start, count)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire numeral into a list of tokens."""
        return list(self._iter_tokens())

    def _iter_tokens(self) -> Iterator[Token]:
        """Generate tokens one at a time."""
        self._check_alphabet()
        self.pos = 0
        while self.pos < len(self.source):
            ch = self.source[self.pos]

            if ch == MYRIAD:
                yield self._read_myriads()
                continue

            info = GLYPH_REGISTRY[ch]
            yield Token(info.digit_class, ch, info.value, self.pos + 1)
            self.pos += 1
