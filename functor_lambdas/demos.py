"""The four demonstration blocks.

Each block prints its part of the transcript and returns the values it
computed so callers (and tests) can inspect them without parsing output.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .invocable import Cell, Function, PrintFunctor, ReferenceCapture, ValueCapture, count_if, operation

NUMBERS: tuple[int, ...] = (2, 5, 17, 99, 33, -6)


@dataclass(frozen=True)
class FunctorResult:
    returned: int


@dataclass(frozen=True)
class LambdaResult:
    direct: int
    via_operation: int


@dataclass(frozen=True)
class CaptureResult:
    larger: int
    smaller: int
    thing_before: int
    thing_after: int


@dataclass(frozen=True)
class LibraryResult:
    product: int
    greater_than_10: int


def make_less_than(two: int) -> ValueCapture[int]:
    return ValueCapture(lambda b, *, a: a if a < b else b, a=two)


def make_set_thing(thing: Cell[int]) -> ReferenceCapture[None]:
    return ReferenceCapture(lambda b, *, a: a.set(b), a=thing)


def greater_than_10(other: int) -> bool:
    return other > 10


def functor_block() -> FunctorResult:
    print("calling functor with template function:")
    p = PrintFunctor()
    return FunctorResult(returned=operation(2, 3, p))


def lambda_block() -> LambdaResult:
    addition = lambda a, b: a + b  # noqa: E731

    print("calling lambda defined function:")
    direct = addition(2, 3)
    print("passing lambda defined function into template function to be called:")
    return LambdaResult(direct=direct, via_operation=operation(2, 3, addition))


def capture_block() -> CaptureResult:
    larger = (lambda a, b: a if a > b else b)(2, 3)
    print(f"larger of 2 and 3: {larger}")

    two = 2
    less_than_2 = make_less_than(two)
    smaller = less_than_2(3)
    print(f"smaller of 2 and 3: {smaller}")

    # Explicitly initialised; the value printed first is always 0.
    thing = Cell(0)
    before = thing.value
    print(f"thing: {thing.value}")
    set_thing = make_set_thing(thing)
    set_thing(2)
    print(f"thing: {thing.value}")

    return CaptureResult(larger=larger, smaller=smaller, thing_before=before, thing_after=thing.value)


def library_block() -> LibraryResult:
    multiply: Function[int] = Function(lambda a, b: a * b, arity=2)
    product = multiply(2, 3)
    print(f"multiply(2, 3): {product}")

    total = count_if(NUMBERS, greater_than_10)
    print("numbers in array greater than 10" + str(total))
    return LibraryResult(product=product, greater_than_10=total)


BLOCKS: tuple[tuple[str, Callable[[], object]], ...] = (
    ("functor", functor_block),
    ("lambda", lambda_block),
    ("capture", capture_block),
    ("library", library_block),
)

__all__ = [
    "BLOCKS",
    "CaptureResult",
    "FunctorResult",
    "LambdaResult",
    "LibraryResult",
    "NUMBERS",
    "capture_block",
    "functor_block",
    "greater_than_10",
    "lambda_block",
    "library_block",
    "make_less_than",
    "make_set_thing",
]
