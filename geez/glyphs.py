"""
Ge'ez Glyph Registry
====================
Maps each Ethiopic numeral glyph to its value and digit class.
Within every class the map is a bijection:
    one glyph per value, no two glyphs share a value.

    Ones:    ፩ ፪ ፫ ፬ ፭ ፮ ፯ ፰ ፱      (1-9)
    Tens:    ፲ ፳ ፴ ፵ ፶ ፷ ፸ ፹ ፺      (10-90)
    Hundred: ፻                      (100, multiplier)
    Myriad:  ፼                      (10,000, multiplier, stackable)

There is no zero.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class DigitClass(Enum):
    """The four numeral classes of the Ge'ez system."""
    ONES    = auto()  # ፩ … ፱
    TENS    = auto()  # ፲ … ፺
    HUNDRED = auto()  # ፻
    MYRIAD  = auto()  # ፼


@dataclass(frozen=True)
class GlyphInfo:
    """
    A Ge'ez numeral glyph.

    Each glyph carries:
      - symbol:       The Unicode character
      - value:        Its integer value
      - digit_class:  Ones, tens, hundred or myriad
      - name:         Transliterated Ge'ez name
      - label:        English reading, used by the keypad
    """
    symbol: str
    value: int
    digit_class: DigitClass
    name: str
    label: str


@dataclass(frozen=True)
class MyriadPower:
    """A stacked myriad: ``power`` consecutive ፼ glyphs worth ``10000**power``."""
    power: int
    value: int
    name: str


HUNDRED = "፻"
MYRIAD = "፼"


# ─────────────────────────────────────────────────────────────
#  THE GLYPH REGISTRY — 20 Ethiopic numerals
# ─────────────────────────────────────────────────────────────

_ONES = [
    ("፩", 1, "Ahadu", "one"),
    ("፪", 2, "Kil'etu", "two"),
    ("፫", 3, "Shelastu", "three"),
    ("፬", 4, "Arba'tu", "four"),
    ("፭", 5, "Hamistu", "five"),
    ("፮", 6, "Sidistu", "six"),
    ("፯", 7, "Sab'atu", "seven"),
    ("፰", 8, "Samantu", "eight"),
    ("፱", 9, "Tis'atu", "nine"),
]

_TENS = [
    ("፲", 10, "Asartu", "ten"),
    ("፳", 20, "Esra", "twenty"),
    ("፴", 30, "Selasa", "thirty"),
    ("፵", 40, "Arba'a", "forty"),
    ("፶", 50, "Hamsa", "fifty"),
    ("፷", 60, "Sissa", "sixty"),
    ("፸", 70, "Sab'a", "seventy"),
    ("፹", 80, "Samanya", "eighty"),
    ("፺", 90, "Tis'a", "ninety"),
]

GLYPH_REGISTRY: dict[str, GlyphInfo] = {}

for _symbol, _value, _name, _label in _ONES:
    GLYPH_REGISTRY[_symbol] = GlyphInfo(_symbol, _value, DigitClass.ONES, _name, _label)
for _symbol, _value, _name, _label in _TENS:
    GLYPH_REGISTRY[_symbol] = GlyphInfo(_symbol, _value, DigitClass.TENS, _name, _label)

GLYPH_REGISTRY[HUNDRED] = GlyphInfo(HUNDRED, 100, DigitClass.HUNDRED, "Mi'et", "hundred")
GLYPH_REGISTRY[MYRIAD] = GlyphInfo(MYRIAD, 10_000, DigitClass.MYRIAD, "Ilf", "myriad (stackable)")

# Quick-access tables for the codec
ONES_GLYPHS: dict[int, str] = {v: s for s, v, _, _ in _ONES}
TENS_GLYPHS: dict[int, str] = {v: s for s, v, _, _ in _TENS}
VALUE_OF: dict[str, int] = {symbol: info.value for symbol, info in GLYPH_REGISTRY.items()}

ONES_CHARS = frozenset(ONES_GLYPHS.values())
TENS_CHARS = frozenset(TENS_GLYPHS.values())
GLYPH_CHARS = frozenset(GLYPH_REGISTRY)

# On-screen keypad rows, in display order
KEYPAD: dict[str, list[GlyphInfo]] = {
    "ones": [GLYPH_REGISTRY[s] for s in ONES_GLYPHS.values()],
    "tens": [GLYPH_REGISTRY[s] for s in TENS_GLYPHS.values()],
    "multipliers": [GLYPH_REGISTRY[HUNDRED], GLYPH_REGISTRY[MYRIAD]],
}

_MYRIAD_NAMES = {
    1: f"Myriad ({MYRIAD})",
    2: f"Double Myriad ({MYRIAD * 2}) - 100 Million",
    3: f"Triple Myriad ({MYRIAD * 3}) - 1 Trillion",
    4: f"Quadruple Myriad ({MYRIAD * 4}) - 10 Quadrillion",
}


def lookup(symbol: str) -> Optional[GlyphInfo]:
    """Look up a glyph by its Unicode symbol."""
    return GLYPH_REGISTRY.get(symbol)


def classify(symbol: str) -> Optional[DigitClass]:
    """Return the digit class of a glyph, or None outside the alphabet."""
    info = GLYPH_REGISTRY.get(symbol)
    return info.digit_class if info else None


def ones_glyph(value: int) -> str:
    """Glyph for a ones digit (1-9)."""
    try:
        return ONES_GLYPHS[value]
    except KeyError:
        raise ValueError(f"No ones glyph for {value!r}; expected 1-9") from None


def tens_glyph(value: int) -> str:
    """Glyph for a tens digit (10, 20, ..., 90)."""
    try:
        return TENS_GLYPHS[value]
    except KeyError:
        raise ValueError(f"No tens glyph for {value!r}; expected a multiple of 10 in 10-90") from None


def myriad_power_info(power: int) -> MyriadPower:
    """Describe ``power`` stacked myriads, e.g. 2 → ፼፼ = 100,000,000."""
    if isinstance(power, bool) or not isinstance(power, int) or power < 1:
        raise ValueError(f"Myriad power must be a positive integer, got {power!r}")
    name = _MYRIAD_NAMES.get(power, f"{power}× Myriad (10,000^{power})")
    return MyriadPower(power=power, value=10_000 ** power, name=name)


def describe_all() -> str:
    """Return a formatted table of all glyphs for REPL help."""
    lines = [
        "╔══════════════════════════════════════════════════╗",
        "║              GE'EZ NUMERAL REGISTRY              ║",
        "╠══════╦══════════╦══════════════╦═════════════════╣",
        "║ Glyph║ Value    ║ Name         ║ Reading         ║",
        "╠══════╬══════════╬══════════════╬═════════════════╣",
    ]
    for symbol, info in GLYPH_REGISTRY.items():
        value = f"{info.value:,}".ljust(8)
        name = info.name.ljust(12)
        label = info.label[:15].ljust(15)
        lines.append(f"║  {symbol}   ║ {value} ║ {name} ║ {label} ║")
    lines.append("╚══════╩══════════╩══════════════╩═════════════════╝")
    return "\n".join(lines)
