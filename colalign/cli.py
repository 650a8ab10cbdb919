"""
colalign - align whitespace-separated fields into columns

Usage:
    colalign [SPEC] [options] < input

Examples:
    colalign < table.txt                    # Left-align every column
    colalign '<><' < decls.c                # Left, right, then left for the rest
    colalign '<10>' -o ' | ' < data.txt     # Column 0 at least 10 wide, ' | ' between columns
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from colalign import __version__
from colalign.align import Aligner, split_text
from colalign.config import Config
from colalign.exceptions import ConfigError, InvalidSpecError
from colalign.utils import WIDTH_TABLES

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


# ANSI color codes
class Colors:
    """Terminal color definitions"""

    RESET = "\033[0m"
    DIM = "\033[2m"

    RED = "\033[31m"
    BRIGHT_RED = "\033[91m"


def print_error(message: str, hint: Optional[str] = None):
    """Print an error message to stderr"""
    print(f"{Colors.BRIGHT_RED}❌ Error:{Colors.RESET} {Colors.RED}{message}{Colors.RESET}", file=sys.stderr)
    if hint:
        print(f"{Colors.DIM}{hint}{Colors.RESET}", file=sys.stderr)


def non_negative_int(value: str) -> int:
    """argparse type for ``--until``"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="colalign",
        description="Align whitespace-separated fields of standard input into columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Specifier:
  One directive per column: an optional minimum width followed by
  '<' (left), '>' (right) or '=' (center). The last directive applies
  to all remaining columns. Example: '<50>=<'
        """,
    )
    parser.add_argument(
        "spec",
        nargs="?",
        default=None,
        help="Alignment specifier (default: all columns left-aligned)",
    )
    parser.add_argument(
        "--separator",
        "-o",
        default=None,
        help="Output separator placed between columns (default: one space)",
    )
    parser.add_argument(
        "--until",
        "-u",
        type=non_negative_int,
        default=None,
        help="Split at most N fields; the rest of the line becomes the last field",
    )
    parser.add_argument(
        "--width-table",
        "-w",
        choices=sorted(WIDTH_TABLES),
        default=None,
        help="Display width table (default: unicode)",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="Read from FILE instead of standard input",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Configuration file (default: ./.colalign.yaml, then ~/.colalign/config.yaml)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"colalign {__version__}",
    )

    return parser.parse_args(argv)


def build_aligner(args: argparse.Namespace) -> Aligner:
    """Merge command line options over the configuration file

    Raises:
        FileNotFoundError: An explicit configuration file does not exist
        ConfigError: Invalid configuration content
        InvalidSpecError: Invalid specifier
    """
    config = Config.load(args.config)

    return Aligner(
        spec=args.spec if args.spec is not None else config.spec,
        separator=args.separator if args.separator is not None else config.separator,
        until=args.until if args.until is not None else config.until,
        width_table=args.width_table if args.width_table is not None else config.width_table,
    )


def read_input(path: Optional[Path]) -> str:
    """Read the whole input; undecodable bytes survive the round trip"""
    if path is None:
        data = sys.stdin.buffer.read()
    else:
        data = path.read_bytes()
    return data.decode(ENCODING, ENCODING_ERRORS)


def write_output(lines: list[str]):
    """Write aligned lines to stdout, one terminator each"""
    out = sys.stdout.buffer
    for line in lines:
        out.write(line.encode(ENCODING, ENCODING_ERRORS) + b"\n")
    out.flush()


def discard_stdout():
    """Point stdout at devnull so the interpreter's final flush cannot fail again"""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI"""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        aligner = build_aligner(args)
    except InvalidSpecError as e:
        print_error(str(e), "Use '<' (left), '>' (right) or '=' (center), optionally preceded by a width")
        return 1
    except FileNotFoundError as e:
        print_error(str(e))
        return 1
    except ConfigError as e:
        print_error(str(e), "Please check the configuration file format")
        return 1

    try:
        text = read_input(args.input)
    except OSError as e:
        print_error(f"Cannot read input: {e}")
        return 1

    lines = split_text(text)
    logger.debug("Read %d line(s)", len(lines))
    try:
        write_output(aligner.align(lines))
    except BrokenPipeError:
        logger.debug("Output pipe closed by reader")
        discard_stdout()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
