"""Unit tests for the callable building blocks."""
from __future__ import annotations

import gc
import itertools

import pytest

from functor_lambdas import demos
from functor_lambdas.invocable import (
    Cell,
    DanglingReferenceError,
    EmptyFunctionError,
    Function,
    Invocable,
    PrintFunctor,
    ReferenceCapture,
    SignatureError,
    ValueCapture,
    count_if,
    operation,
)


def test_operation_prints_and_returns_result(capsys: pytest.CaptureFixture[str]) -> None:
    result = operation(2, 3, lambda a, b: a - b)

    assert result == -1
    assert capsys.readouterr().out == "-1\n"


def test_print_functor_prints_inputs_and_returns_zero(capsys: pytest.CaptureFixture[str]) -> None:
    result = operation(2, 3, PrintFunctor())

    assert result == 0
    assert capsys.readouterr().out.splitlines() == ["2 3", "0"]


def test_invocable_protocol_accepts_functions_and_objects() -> None:
    assert isinstance(PrintFunctor(), Invocable)
    assert isinstance(lambda a, b: a, Invocable)
    assert isinstance(ValueCapture(lambda *, a: a, a=1), Invocable)
    assert not isinstance(3, Invocable)


def test_value_capture_ignores_later_rebinding() -> None:
    two = 2
    less_than = ValueCapture(lambda b, *, a: a if a < b else b, a=two)
    two = 100

    assert less_than(3) == 2
    assert less_than.captures["a"] == 2
    assert two == 100


def test_value_capture_copies_mutable_values() -> None:
    source = [1, 2]
    length = ValueCapture(lambda *, items: len(items), items=source)
    source.append(3)

    assert length() == 2


def test_value_capture_isolates_nested_values_from_source() -> None:
    source = [[1]]
    inner_length = ValueCapture(lambda *, items: len(items[0]), items=source)
    source[0].append(2)

    assert inner_length() == 1
    assert inner_length.captures["items"] == [[1]]


def test_value_capture_body_cannot_change_later_calls() -> None:
    grow = ValueCapture(lambda *, items: (items.append(0), len(items))[1], items=[])

    assert grow() == 1
    assert grow() == 1
    assert grow.captures["items"] == []


def test_value_capture_snapshot_cannot_be_edited_through_captures() -> None:
    capture = ValueCapture(lambda *, items: list(items), items=[[1]])
    capture.captures["items"][0].append(9)

    assert capture() == [[1]]


def test_value_capture_captures_are_read_only() -> None:
    capture = ValueCapture(lambda *, a: a, a=1)

    with pytest.raises(TypeError):
        capture.captures["a"] = 5  # type: ignore[index]


def test_reference_capture_writes_through_to_cell() -> None:
    thing = Cell(0)
    set_thing = ReferenceCapture(lambda b, *, a: a.set(b), a=thing)

    set_thing(2)
    assert thing.value == 2

    thing.value = 7
    read_thing = ReferenceCapture(lambda *, a: a.value, a=thing)
    assert read_thing() == 7


def test_reference_capture_rejects_non_cells() -> None:
    with pytest.raises(TypeError, match="must be a Cell"):
        ReferenceCapture(lambda *, a: a, a=3)  # type: ignore[arg-type]


def test_reference_capture_detects_dangling_cell() -> None:
    thing = Cell(0)
    set_thing = ReferenceCapture(lambda b, *, a: a.set(b), a=thing)
    assert set_thing.alive

    del thing
    gc.collect()

    assert not set_thing.alive
    with pytest.raises(DanglingReferenceError, match="'a'"):
        set_thing(2)


def test_function_wraps_callable_with_matching_arity() -> None:
    multiply = Function(lambda a, b: a * b, arity=2)

    assert multiply
    assert multiply(2, 3) == 6


def test_function_rejects_wrong_arity_at_construction() -> None:
    with pytest.raises(SignatureError):
        Function(lambda a: a, arity=2)


def test_function_rejects_non_callable() -> None:
    with pytest.raises(SignatureError, match="not callable"):
        Function(42, arity=2)  # type: ignore[arg-type]


def test_signature_error_is_a_type_error() -> None:
    assert issubclass(SignatureError, TypeError)


def test_function_checks_argument_count_on_call() -> None:
    multiply = Function(lambda a, b: a * b, arity=2)

    with pytest.raises(TypeError, match="expects 2"):
        multiply(2)


def test_empty_function_raises_on_call() -> None:
    empty: Function[int] = Function()

    assert not empty
    with pytest.raises(EmptyFunctionError):
        empty(2, 3)


def test_function_accepts_builtins_without_signature() -> None:
    wrapped = Function(max, arity=2)

    assert wrapped(2, 3) == 3


def test_count_if_counts_matching_elements() -> None:
    numbers = (2, 5, 17, 99, 33, -6)

    assert count_if(numbers, lambda other: other > 10) == 3
    assert count_if(numbers, lambda other: other > 40) == 1
    assert count_if([], lambda other: True) == 0


def test_count_if_is_order_independent() -> None:
    counts = {
        count_if(order, demos.greater_than_10) for order in itertools.permutations(demos.NUMBERS)
    }

    assert counts == {3}


def test_count_if_accepts_any_element_type() -> None:
    words = ["functor", "lambda", "capture"]

    assert count_if(words, lambda word: word.startswith("c")) == 1
