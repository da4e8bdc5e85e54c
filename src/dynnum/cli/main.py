"""Main CLI entry point for dynnum."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec.decoder import decode
from ..codec.encoder import encode
from ..exceptions import DynnumError
from .describe import parse_hex, parse_number, print_mode_table, print_number


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the dynnum CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="dynnum: Self-describing number codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dynnum --encode 300                    Encode a number
  dynnum --decode "06 2c 01"             Decode hex bytes
  dynnum --modes                         List registered modes
  dynnum --version                       Show version
        """,
    )

    parser.add_argument(
        "--encode",
        metavar="VALUE",
        type=str,
        help="Encode an integer or float and show its bytes",
    )

    parser.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode one number from hex bytes",
    )

    parser.add_argument(
        "--modes",
        action="store_true",
        help="List the registered modes",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dynnum {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.modes:
        print_mode_table()
        return 0

    if args.encode is not None:
        try:
            value = parse_number(args.encode)
        except ValueError:
            print(f"Error: Not a number: {args.encode}", file=sys.stderr)
            return 1
        try:
            number = encode(value)
        except DynnumError as e:
            print(f"Error encoding {args.encode}: {e}", file=sys.stderr)
            return 1
        print_number(number)
        return 0

    if args.decode is not None:
        try:
            data = parse_hex(args.decode)
        except ValueError:
            print(f"Error: Invalid hex: {args.decode}", file=sys.stderr)
            return 1
        try:
            number = decode(data)
        except DynnumError as e:
            print(f"Error decoding {args.decode}: {e}", file=sys.stderr)
            return 1
        print_number(number, trailing=len(data) - number.size)
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
