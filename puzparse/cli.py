"""Command line tool that turns .puz crossword files into JSON."""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional, Sequence

from .errors import PuzError
from .models import Puzzle
from .parser import parse

_VERSION = "0.1.0"

_DESCRIPTION = (
    "parse .puz crossword puzzle files into structured data\n\n"
    "supports all puzzle features including rebus squares, circled cells,\n"
    "and metadata extraction"
)

_EPILOG = (
    "examples:\n"
    "    puz puzzle.puz                  # parse and output to stdout\n"
    "    puz *.puz --pretty              # parse multiple files with formatting\n"
    "    puz daily.puz -o output.json    # save output to file\n"
    "    puz puzzle.puz --single         # output single object for one file"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puz",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="PUZZLE",
        help="one or more .puz files to parse",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="write output to file instead of stdout",
    )
    parser.add_argument(
        "-p",
        "--pretty",
        action="store_true",
        help="format output with indentation and newlines",
    )
    parser.add_argument(
        "-s",
        "--single",
        action="store_true",
        help="output object directly (not wrapped in array)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {_VERSION}"
    )
    return parser


def process_file(path: str) -> Puzzle:
    """Parse one file, reporting its warnings on stderr.

    Raises FileNotFoundError for a missing path, ValueError for a path that
    is not a regular file or cannot be parsed, and OSError if it cannot be
    opened.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"File does not exist: {path}")
    if not os.path.isfile(path):
        raise ValueError(f"Path is not a file: {path}")

    try:
        stream = open(path, "rb")
    except OSError as error:
        raise OSError(f"Failed to open file: {path}") from error

    with stream:
        try:
            outcome = parse(stream)
        except PuzError as error:
            raise ValueError(f"Failed to parse .puz file: {path}") from error

    for warning in outcome.warnings:
        print(f"Warning in {path}: {warning}", file=sys.stderr)

    return outcome.result


def _process_all(files: Sequence[str]) -> List[Dict[str, Any]]:
    results: List[Dict[str, Any]] = []
    for path in files:
        try:
            puzzle = process_file(path)
        except (OSError, ValueError) as error:
            print(f"Error processing {path}: {error}", file=sys.stderr)
            results.append({"file": path, "success": False, "error": str(error)})
        else:
            results.append({"file": path, "success": True, "puzzle": puzzle.to_dict()})
    return results


def _render(data: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    results = _process_all(args.files)

    if args.single and len(results) == 1:
        (result,) = results
        output_data: Any = result["puzzle"] if result["success"] else result
    else:
        output_data = results

    text = _render(output_data, args.pretty)

    if args.output is not None:
        try:
            with open(args.output, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as error:
            print(f"Error: Failed to write to {args.output}: {error}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(text)
        sys.stdout.write("\n")
        sys.stdout.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())