"""
Ge'ez REPL
==========
Interactive converter. Type an Arabic number to see it in Ge'ez,
or a Ge'ez numeral to see its value.
"""
from typing import Callable

from .glyphs import describe_all, GLYPH_CHARS
from .safe import (
    convert_arabic_input, describe_arabic_input, describe_validation_error, format_number,
    safe_decode,
)


BANNER = r"""
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║     ፩ ─── GE'EZ NUMERAL CONVERTER ─── ፼                      ║
║                                                              ║
║     Arabic ⇄ Ge'ez, unlimited range via stacked myriads      ║
║                                                              ║
║     Type a number (2021) or a numeral (፳፻፳፩)                 ║
║     Type 'help' for the glyph reference                      ║
║     Type 'exit' or Ctrl+C to quit                            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

HELP_TEXT = """
Examples:
  123          → ፻፳፫
  2021         → ፳፻፳፩
  ፼፼           → 100,000,000
  ፪፼           → 20,000

Rules:
  One tens glyph, then one ones glyph, per group   (፲፩ not ፩፲)
  ፻ multiplies by 100, ፼ by 10,000; stack ፼ for more

Commands: help, table, exit
"""


def evaluate(line: str) -> str:
    """Convert one line of input and return the text to show."""
    if any(ch in GLYPH_CHARS for ch in line):
        error = describe_validation_error(line)
        if error:
            return f"⚠ {error}"
        return f"⟹ {format_number(safe_decode(line), group=True)}"

    error = describe_arabic_input(line)
    if error:
        return f"⚠ {error}"
    return f"⟹ {convert_arabic_input(line)}"


def run_repl(input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print):
    """Run the interactive converter."""
    output_fn(BANNER)

    while True:
        try:
            line = input_fn("  ፩⟩ ")
        except (EOFError, KeyboardInterrupt):
            output_fn("\n  Goodbye.")
            break

        line = line.strip()
        if not line:
            continue

        command = line.lower()
        if command in ("exit", "quit"):
            output_fn("  Goodbye.")
            break

        if command == "help":
            output_fn(HELP_TEXT)
            continue

        if command == "table":
            output_fn(describe_all())
            continue

        output_fn(f"  {evaluate(line)}")


if __name__ == "__main__":
    run_repl()
