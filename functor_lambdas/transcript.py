"""Utilities for checking a captured run against the expected transcript.

A transcript *matches* when it has exactly the expected lines in the
expected order. These helpers are shared by the ``check_transcript.py``
script and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

EXPECTED_TRANSCRIPT: tuple[str, ...] = (
    "calling functor with template function:",
    "2 3",
    "0",
    "calling lambda defined function:",
    "passing lambda defined function into template function to be called:",
    "5",
    "larger of 2 and 3: 3",
    "smaller of 2 and 3: 2",
    "thing: 0",
    "thing: 2",
    "multiply(2, 3): 6",
    "numbers in array greater than 103",
)


class TranscriptError(RuntimeError):
    """Raised when a transcript file cannot be read."""


@dataclass(frozen=True)
class TranscriptResult:
    """Summary of how a captured transcript compares to the expected one."""

    expected_count: int
    actual_count: int
    first_mismatch_index: int | None

    @property
    def matches(self) -> bool:
        """Return True when every line matches and no lines are missing or extra."""
        return self.first_mismatch_index is None and self.expected_count == self.actual_count

    @property
    def delta(self) -> int:
        """Number of captured lines minus expected lines."""
        return self.actual_count - self.expected_count


def load_transcript(path: Path) -> list[str]:
    """Read a captured stdout file and return its lines without newlines."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TranscriptError(f"transcript file not found: {path}") from exc
    except OSError as exc:  # pragma: no cover - depends on filesystem state
        raise TranscriptError(f"unable to read transcript file: {path}") from exc
    return raw_text.splitlines()


def compare_transcript(
    lines: Sequence[str],
    expected: Sequence[str] = EXPECTED_TRANSCRIPT,
) -> TranscriptResult:
    """Compare ``lines`` to ``expected`` line by line."""
    first_mismatch: int | None = None
    for index, (actual, wanted) in enumerate(zip(lines, expected)):
        if actual != wanted:
            first_mismatch = index
            break

    return TranscriptResult(
        expected_count=len(expected),
        actual_count=len(lines),
        first_mismatch_index=first_mismatch,
    )


__all__ = [
    "EXPECTED_TRANSCRIPT",
    "TranscriptError",
    "TranscriptResult",
    "compare_transcript",
    "load_transcript",
]
