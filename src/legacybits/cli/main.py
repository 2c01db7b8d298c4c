"""Main CLI entry point for legacybits."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file, load_flag_type
from ..codec.decoder import from_json
from ..codec.encoder import to_json
from ..codec.schema import FlagSchema


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the legacybits CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="legacybits: Legacy Wire Format for Bit-Flag Sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  legacybits --analyze flags.py                 Show flag types and their records
  legacybits --encode flags.py:Flags 3          Print the legacy record for raw bits
  legacybits --decode flags.py:Flags '{"bits":3}'
                                                Decode a legacy JSON record
  legacybits --version                          Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze flag types defined in a Python file",
    )

    parser.add_argument(
        "--encode",
        nargs=2,
        metavar=("FILE:CLASS", "BITS"),
        help="Encode raw bits (decimal, 0x or 0b) as a legacy JSON record",
    )

    parser.add_argument(
        "--decode",
        nargs=2,
        metavar=("FILE:CLASS", "JSON"),
        help="Decode a legacy JSON record and show its flags",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"legacybits {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --analyze
    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    # Handle --encode
    if args.encode:
        target, raw = args.encode
        try:
            flag_type = load_flag_type(target)
            bits = FlagSchema.from_type(flag_type).adapter().validate_python(int(raw, 0))
            print(to_json(flag_type.from_bits_retain(bits)))
            return 0
        except Exception as e:
            print(f"Error encoding: {e}", file=sys.stderr)
            return 1

    # Handle --decode
    if args.decode:
        target, text = args.decode
        try:
            flag_type = load_flag_type(target)
            schema = FlagSchema.from_type(flag_type)
            flags = from_json(flag_type, text)
        except Exception as e:
            print(f"Error decoding: {e}", file=sys.stderr)
            return 1

        bits = flags.bits()
        names = schema.flag_names(bits)
        unknown = bits & ~schema.known_mask()
        print(f"bits: {bits} (0x{bits:x})")
        print(f"flags: {' | '.join(names) if names else '(none)'}")
        if unknown:
            print(f"unknown bits: 0x{unknown:x}")
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
