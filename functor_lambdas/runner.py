"""Run the demonstration blocks in order, pausing between them.

Configuration layers like the rest of the package: defaults, then
``FUNCTOR_LAMBDAS_*`` environment variables, then explicit overrides.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Mapping, Optional

from .demos import BLOCKS

logger = logging.getLogger(__name__)

ENV_PAUSE = "FUNCTOR_LAMBDAS_PAUSE"
ENV_LOG_LEVEL = "FUNCTOR_LAMBDAS_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "warning"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for one run of the demonstration."""

    pause: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got '{raw}'")


def _normalize_log_level(name: str, raw: str) -> str:
    value = raw.strip().lower()
    if value not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got '{raw}'")
    return value


def config_from_env(
    environ: Optional[Mapping[str, str]] = None,
    base: Optional[RunnerConfig] = None,
) -> RunnerConfig:
    """Return ``base`` (or the defaults) updated from environment variables."""
    env = os.environ if environ is None else environ
    config = base or RunnerConfig()

    raw_pause = env.get(ENV_PAUSE)
    if raw_pause:
        config = replace(config, pause=_parse_bool(ENV_PAUSE, raw_pause))
    raw_level = env.get(ENV_LOG_LEVEL)
    if raw_level:
        config = replace(config, log_level=_normalize_log_level(ENV_LOG_LEVEL, raw_level))
    return config


def wait_for_acknowledgement(read_line: Callable[[], str] = input) -> None:
    """Block until one line is read; its content is discarded."""
    try:
        read_line()
    except EOFError:
        logger.debug("stdin closed during pause; continuing")


def run(
    config: Optional[RunnerConfig] = None,
    *,
    blocks: Iterable[tuple[str, Callable[[], object]]] = BLOCKS,
    read_line: Callable[[], str] = input,
) -> dict[str, object]:
    """Execute each block in order and return their results keyed by name."""
    config = config or RunnerConfig()
    results: dict[str, object] = {}
    for name, block in blocks:
        logger.debug("running block %s", name)
        results[name] = block()
        logger.debug("block %s finished: %r", name, results[name])
        if config.pause:
            wait_for_acknowledgement(read_line)
        else:
            logger.info("pause after block %s skipped", name)
    return results


__all__ = (
    "DEFAULT_LOG_LEVEL",
    "ENV_LOG_LEVEL",
    "ENV_PAUSE",
    "LOG_LEVELS",
    "RunnerConfig",
    "config_from_env",
    "run",
    "wait_for_acknowledgement",
)
