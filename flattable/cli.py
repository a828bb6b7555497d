"""Command-line interface: flatten JSON or JSON Lines into CSV."""

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .decode import DecodeType, decode
from .errors import FlattableError
from .writer import ListWriter

logger = logging.getLogger(__name__)

FORMATS = {
    "json": DecodeType.JSON,
    "jsonl": DecodeType.JSONL,
}


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_csv(values, output: Optional[str], alphabetize_headers: bool) -> None:
    if output and output != "-":
        with open(output, "w", newline="", encoding="utf-8") as csvfile:
            ListWriter(csv.writer(csvfile), alphabetize_headers=alphabetize_headers).write(values)
    else:
        ListWriter(csv.writer(sys.stdout), alphabetize_headers=alphabetize_headers).write(values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flattable", description="Flatten JSON records into a CSV table")
    parser.add_argument("input", help="Input file, or - for stdin")
    parser.add_argument("-o", "--output", help="Output CSV file (default: stdout)")
    parser.add_argument("--format", choices=sorted(FORMATS), default="json", help="Input encoding")
    parser.add_argument("--alphabetize", action="store_true", help="Sort columns by header")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        values = decode(FORMATS[args.format], _read_input(args.input))
        _write_csv(values, args.output, args.alphabetize)
    except (FlattableError, OSError) as e:
        logger.error(f"Failed to convert {args.input}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
