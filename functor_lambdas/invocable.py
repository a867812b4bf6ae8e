"""Callable building blocks shared by the demonstration blocks.

Anything with ``__call__`` satisfies :class:`Invocable`: plain functions,
lambdas, and the small classes below. The classes make the two capture modes
explicit:

- :class:`ValueCapture` deep-copies the captured values when it is created, so
  later changes to the originals are invisible to it.
- :class:`ReferenceCapture` keeps a weak back-reference to a :class:`Cell`
  and reads/writes the live value on every call. The cell must outlive the
  closure; calling it after the cell is gone raises
  :class:`DanglingReferenceError`.

:class:`Function` is a type-erased holder bound to a fixed arity.
"""
from __future__ import annotations

import copy
import inspect
import logging
import weakref
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class SignatureError(TypeError):
    """Raised when a callable cannot accept the arity a wrapper is bound to."""


class EmptyFunctionError(RuntimeError):
    """Raised when an empty :class:`Function` is invoked."""


class DanglingReferenceError(RuntimeError):
    """Raised when a reference capture outlives the cell it points to."""


@runtime_checkable
class Invocable(Protocol[R]):
    def __call__(self, *args: Any) -> R: ...


BinaryOperation = Callable[[int, int], int]
Predicate = Callable[[T], bool]


def operation(a: int, b: int, func: Invocable[int] | BinaryOperation) -> int:
    """Call ``func(a, b)``, print the result on its own line and return it."""
    result = func(a, b)
    print(result)
    return result


class PrintFunctor:
    """Stateless callable: prints both arguments and always returns ``0``."""

    def __call__(self, a: int, b: int) -> int:
        print(a, b)
        return 0

    def __repr__(self) -> str:
        return "PrintFunctor()"


@dataclass(eq=False)
class Cell(Generic[T]):
    """Mutable storage that a :class:`ReferenceCapture` can alias."""

    value: T

    def set(self, value: T) -> None:
        self.value = value


class ValueCapture(Generic[R]):
    """Closure whose captured names are deep-copied once, at construction.

    The body is called as ``body(*args, **captures)`` with a fresh deep copy
    of the snapshot, so neither the source nor the body can change what later
    calls see.
    """

    def __init__(self, body: Callable[..., R], **captures: Any) -> None:
        self._body = body
        self._captures: Mapping[str, Any] = MappingProxyType(
            {name: copy.deepcopy(value) for name, value in captures.items()}
        )

    @property
    def captures(self) -> Mapping[str, Any]:
        return MappingProxyType(self._fresh())

    def _fresh(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self._captures))

    def __call__(self, *args: Any) -> R:
        return self._body(*args, **self._fresh())

    def __repr__(self) -> str:
        names = ", ".join(f"{name}={value!r}" for name, value in self._captures.items())
        return f"ValueCapture([{names}])"


class ReferenceCapture(Generic[R]):
    """Closure whose captured names alias live :class:`Cell` objects.

    Only weak references are held. The body receives the cells themselves and
    writes through them (``a.value = b`` or ``a.set(b)``).
    """

    def __init__(self, body: Callable[..., R], **cells: Cell[Any]) -> None:
        for name, cell in cells.items():
            if not isinstance(cell, Cell):
                raise TypeError(
                    f"reference capture '{name}' must be a Cell, got {type(cell).__name__}"
                )
        self._body = body
        self._refs: dict[str, weakref.ReferenceType[Cell[Any]]] = {
            name: weakref.ref(cell) for name, cell in cells.items()
        }

    def _resolve(self) -> dict[str, Cell[Any]]:
        resolved: dict[str, Cell[Any]] = {}
        for name, ref in self._refs.items():
            cell = ref()
            if cell is None:
                raise DanglingReferenceError(
                    f"captured reference '{name}' no longer exists"
                )
            resolved[name] = cell
        return resolved

    @property
    def alive(self) -> bool:
        return all(ref() is not None for ref in self._refs.values())

    def __call__(self, *args: Any) -> R:
        return self._body(*args, **self._resolve())

    def __repr__(self) -> str:
        return f"ReferenceCapture([&{', &'.join(self._refs)}])"


class Function(Generic[R]):
    """Type-erased callable bound to a fixed number of positional arguments.

    ``Function()`` with no target is empty; calling it raises
    :class:`EmptyFunctionError`. A target that is not callable, or whose
    signature cannot take ``arity`` positional arguments, is rejected with
    :class:`SignatureError` when the wrapper is built.
    """

    def __init__(self, target: Optional[Callable[..., R]] = None, *, arity: int = 2) -> None:
        if arity < 0:
            raise ValueError("arity must be non-negative")
        self.arity = arity
        self._target: Optional[Callable[..., R]] = None
        if target is not None:
            self._target = _check_arity(target, arity)

    def __bool__(self) -> bool:
        return self._target is not None

    def __call__(self, *args: Any) -> R:
        if self._target is None:
            raise EmptyFunctionError("call to empty Function")
        if len(args) != self.arity:
            raise TypeError(
                f"Function expects {self.arity} positional argument(s), got {len(args)}"
            )
        return self._target(*args)

    def __repr__(self) -> str:
        if self._target is None:
            return f"Function(<empty>, arity={self.arity})"
        return f"Function({self._target!r}, arity={self.arity})"


def _check_arity(target: Callable[..., R], arity: int) -> Callable[..., R]:
    if not callable(target):
        raise SignatureError(f"{type(target).__name__!r} object is not callable")
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # Some builtins expose no signature; accept them and fail on call instead.
        logger.debug("no signature available for %r; skipping arity check", target)
        return target
    try:
        signature.bind(*([None] * arity))
    except TypeError as exc:
        raise SignatureError(
            f"{target!r} cannot be called with {arity} positional argument(s): {exc}"
        ) from exc
    return target


def count_if(items: Iterable[T], predicate: Predicate[T]) -> int:
    """Return how many elements of ``items`` satisfy ``predicate``."""
    return sum(1 for item in items if predicate(item))


__all__ = [
    "BinaryOperation",
    "Cell",
    "DanglingReferenceError",
    "EmptyFunctionError",
    "Function",
    "Invocable",
    "Predicate",
    "PrintFunctor",
    "ReferenceCapture",
    "SignatureError",
    "ValueCapture",
    "count_if",
    "operation",
]
