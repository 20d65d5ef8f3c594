"""
Ge'ez CLI — Command-Line Numeral Converter
==========================================
Entry point for converting and checking Ge'ez numerals from a shell.

Usage:
    # Integers to Ge'ez
    geez encode 123 2021 10000

    # Ge'ez to integers
    geez decode ፻፳፫ ፼፼

    # Check numerals without converting
    geez validate ፫፬ ፲፩

    # Glyph reference and stacked myriads
    geez table
    geez myriad 3

    # Interactive converter
    geez repl

    # HTTP API
    geez serve --port 8000
"""

from __future__ import annotations

import argparse
import logging
import sys

from .decoder import decode
from .encoder import encode
from .errors import GeezError
from .glyphs import describe_all, myriad_power_info
from .safe import format_number, parse_integer
from .validator import validate


def _parse_number(text: str) -> int | float | str:
    """Best-effort number from a shell argument; strings pass through to encode()."""
    cleaned = text.replace(",", "").replace("_", "")
    try:
        return parse_integer(cleaned)
    except ValueError:
        pass
    try:
        return float(cleaned)
    except ValueError:
        return text


# ─────────────────────────────────────────────────────────────
#  Commands
# ─────────────────────────────────────────────────────────────

def cmd_encode(args) -> int:
    """Convert integers to Ge'ez numerals."""
    failures = 0
    for raw in args.numbers:
        try:
            print(f"  {raw} → {encode(_parse_number(raw))}")
        except GeezError as e:
            failures += 1
            print(f"  ✘ {raw}: {e}")
    return 1 if failures else 0


def cmd_decode(args) -> int:
    """Convert Ge'ez numerals to integers."""
    failures = 0
    for numeral in args.numerals:
        try:
            value = decode(numeral)
            print(f"  {numeral} → {format_number(value, group=args.group)}")
        except GeezError as e:
            failures += 1
            print(f"  ✘ {numeral}: {e}")
    return 1 if failures else 0


def cmd_validate(args) -> int:
    """Check numerals against the Ge'ez grammar."""
    failures = 0
    for numeral in args.numerals:
        error = validate(numeral)
        if error is None:
            print(f"  ✔ {numeral}")
        else:
            failures += 1
            print(f"  ✘ {numeral} [{error.kind.name}] {error}")
    return 1 if failures else 0


def cmd_table(args) -> int:
    """Print the glyph registry."""
    print(describe_all())
    return 0


def cmd_myriad(args) -> int:
    """Explain a stack of myriads."""
    try:
        info = myriad_power_info(args.power)
    except ValueError as e:
        print(f"  ✘ {e}")
        return 1
    print(f"  {info.name}")
    print(f"  10,000^{info.power} = {format_number(info.value, group=True)}")
    return 0


def cmd_repl(args) -> int:
    """Start the interactive converter."""
    from .repl import run_repl
    run_repl()
    return 0


def cmd_serve(args) -> int:
    """Launch the HTTP conversion API."""
    try:
        import uvicorn  # noqa: F401
    except ImportError:
        print("✘ uvicorn is required for the HTTP API.")
        print("  Install it with:  pip install uvicorn fastapi")
        return 1

    from .server import ServerConfig, run_server
    config = ServerConfig.from_env()
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    run_server(config)
    return 0


# ─────────────────────────────────────────────────────────────
#  Main
# ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geez",
        description="Ge'ez numerals — convert and validate Ethiopic numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  geez encode 123 2021\n"
            "  geez decode ፻፳፫\n"
            "  geez validate ፫፬\n"
            "  geez table\n"
            "  geez myriad 2\n"
            "  geez serve --port 8000\n"
        ),
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # encode
    p_encode = subparsers.add_parser("encode", help="Convert integers to Ge'ez numerals")
    p_encode.add_argument("numbers", nargs="+", help="Positive integers (commas allowed)")

    # decode
    p_decode = subparsers.add_parser("decode", help="Convert Ge'ez numerals to integers")
    p_decode.add_argument("numerals", nargs="+", help="Ge'ez numeral strings")
    p_decode.add_argument("--group", action="store_true", help="Print thousands separators")

    # validate
    p_validate = subparsers.add_parser("validate", help="Check Ge'ez numerals for structural errors")
    p_validate.add_argument("numerals", nargs="+", help="Ge'ez numeral strings")

    # table
    subparsers.add_parser("table", help="Show all Ge'ez numeral glyphs")

    # myriad
    p_myriad = subparsers.add_parser("myriad", help="Explain stacked myriads (፼፼…)")
    p_myriad.add_argument("power", type=int, help="Number of stacked ፼ glyphs")

    # repl
    subparsers.add_parser("repl", help="Interactive converter")

    # serve
    p_serve = subparsers.add_parser("serve", help="Launch the HTTP conversion API")
    p_serve.add_argument("--host", default=None, help="Bind address (default: $GEEZ_HOST or 127.0.0.1)")
    p_serve.add_argument("--port", default=None, type=int, help="Port number (default: $GEEZ_PORT or 8000)")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "validate": cmd_validate,
        "table": cmd_table,
        "myriad": cmd_myriad,
        "repl": cmd_repl,
        "serve": cmd_serve,
    }

    if args.command in commands:
        return commands[args.command](args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
