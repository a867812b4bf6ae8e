"""CLI helper to verify that a captured ``functor_lambdas`` run matches the expected output."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from functor_lambdas.transcript import (
    EXPECTED_TRANSCRIPT,
    TranscriptError,
    compare_transcript,
    load_transcript,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check whether captured stdout of functor_lambdas matches the expected transcript.",
    )
    parser.add_argument(
        "transcript",
        type=Path,
        help="Path to a file holding the captured stdout",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        lines = load_transcript(args.transcript)
    except TranscriptError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    result = compare_transcript(lines)
    if result.matches:
        print(f"Transcript matches: {result.actual_count} lines.")
        return 0

    print("Transcript mismatch detected.")
    print(f"Expected lines : {result.expected_count}")
    print(f"Captured lines : {result.actual_count}")

    index = result.first_mismatch_index
    if index is not None:
        print(f"First difference at line #{index} (0-based index):")
        print(f"  expected: {EXPECTED_TRANSCRIPT[index]!r}")
        print(f"  captured: {lines[index]!r}")

    delta = result.delta
    if delta > 0:
        print(f"Unexpected {delta} extra line(s).")
    elif delta < 0:
        print(f"Missing {-delta} line(s).")

    return 1


if __name__ == "__main__":
    sys.exit(main())
