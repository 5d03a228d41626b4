"""
Command-line entry point: read a WAV stream, print its header.

    wavheader < input.wav
    wavheader input.wav
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from wavheader import config, parse_header, render, ParseError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavheader",
        description="Parse and validate the canonical PCM WAVE header of a stream.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="WAV file to inspect ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--log-level",
        default=config.cli.log_level,
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    return parser


def inspect_stream(stream: BinaryIO) -> int:
    """Parse one header from stream and report it. Returns the exit code."""
    try:
        header = parse_header(stream)
    except ParseError as e:
        logger.info(f"Header rejected ({e.kind})")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Scan audio stream for clicks

    print(render(header))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.path == "-":
        return inspect_stream(sys.stdin.buffer)

    try:
        with open(args.path, "rb") as f:
            return inspect_stream(f)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
