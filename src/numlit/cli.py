"""Command-line interface for numlit.

Usage:
    numlit show 0xFF 3.14           # Summary table of each literal
    numlit convert --to hex 255     # Convert literals to another base
    numlit replace --to hex src.c   # Rewrite every integer literal of a file
    numlit langs                    # List context keys with a grammar
"""

import argparse
import logging
import sys
from pathlib import Path

import numlit
from ._colorize import should_use_color, style

logger = logging.getLogger(__name__)


def format_summary(literal, parser, color=False):
    """Format the summary table of a literal for display.

    Args:
        literal: (Literal) Literal to describe
        parser: (Parser) Grammar whose formatter renders the rows
        color: (bool) Highlight the written representation with ANSI codes

    Returns:
        (str) Table text, one row per line
    """
    rows = numlit.summarize(literal, parser)
    width = max(len(row.text) for row in rows)
    lines = []
    for row in rows:
        marker = "*" if row.current else " "
        line = f"  {marker} {row.label}  {row.text.rjust(width)}"
        if color:
            line = style(line, "strong") if row.current else style(line, "dim")
        lines.append(line)
    return "\n".join(lines)


def show_literals(texts, parser):
    """Print summary tables. Returns the count of unrecognized texts."""
    color = should_use_color(sys.stdout)
    failed = 0
    for text in texts:
        literal = parser.classify(text)
        if literal is None:
            print(f"Error: '{text}' is not a number literal", file=sys.stderr)
            failed += 1
            continue
        header = style(text, "cyan") if color else text
        print(header)
        print(format_summary(literal, parser, color))
    return failed


def convert_literals(texts, base, parser, prefixed):
    """Print each converted text. Returns the count of unchanged texts."""
    results = numlit.convert_all(texts, base, parser, prefixed)
    unchanged = 0
    for text, result in zip(texts, results):
        if result == text and parser.classify(text) is None:
            logger.warning("'%s' is not a number literal, left unchanged", text)
            unchanged += 1
        print(result)
    return unchanged


def _base_arg(text):
    try:
        return numlit.Base.lookup(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def build_argparser():
    parser = argparse.ArgumentParser(
        prog="numlit",
        description="Number literal inspection and base conversion")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Show debug logging")
    parser.add_argument("--lang", default=None,
        help="Context key selecting the literal grammar (default: fallback grammar)")
    parser.add_argument("--signed", action="store_true",
        help="Fallback grammar accepts a leading + or - sign")

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show",
        help="Show a literal in every base or notation")
    show.add_argument("literals", nargs="+",
        help="Literal texts")

    convert = commands.add_parser("convert",
        help="Convert literals to another base")
    convert.add_argument("--to", required=True, type=_base_arg,
        help="Target base: bin, oct, dec or hex")
    convert.add_argument("--bare", action="store_true",
        help="Omit the base prefix")
    convert.add_argument("literals", nargs="+",
        help="Literal texts")

    replace = commands.add_parser("replace",
        help="Rewrite every integer literal of a file")
    replace.add_argument("--to", required=True, type=_base_arg,
        help="Target base: bin, oct, dec or hex")
    replace.add_argument("--bare", action="store_true",
        help="Omit the base prefix")
    replace.add_argument("file", nargs="?",
        help="Source file, standard input when omitted")

    commands.add_parser("langs",
        help="List context keys with a dedicated grammar")
    return parser


def main(argv=None):
    """Main entry point for the numlit CLI."""
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    registry = numlit.default_registry(signed=args.signed)
    parser = registry.lookup(args.lang)
    logger.debug("Using %s grammar for %r", parser.name, args.lang)

    if args.command == "langs":
        for key in registry.keys():
            print(f"{key}  {registry.lookup(key).name}")
        print(f"{numlit.WILDCARD}  {registry.lookup().name}")
        return

    if args.command == "show":
        if show_literals(args.literals, parser):
            sys.exit(1)
        return

    if args.command == "convert":
        if convert_literals(args.literals, args.to, parser, not args.bare):
            sys.exit(1)
        return

    if args.file:
        filepath = Path(args.file)
        if not filepath.exists():
            print(f"Error: File not found: {filepath}", file=sys.stderr)
            sys.exit(1)
        source = filepath.read_text(encoding="utf-8")
    else:
        source = sys.stdin.read()
    sys.stdout.write(numlit.replace_literals(source, args.to, parser, not args.bare))


if __name__ == "__main__":
    main()
