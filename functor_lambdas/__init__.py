"""Callable objects and closures, demonstrated.

`functor_lambdas` walks through a callable class, anonymous closures,
value versus reference capture, a type-erased callable wrapper and a
predicate-driven ``count_if``. Run it with ``python -m functor_lambdas``.
"""

from . import invocable as _invocable
from .invocable import *  # re-export public API symbols
from .runner import RunnerConfig, config_from_env, run

__all__ = [*_invocable.__all__, "RunnerConfig", "config_from_env", "run"]
