"""CLI to run the callable-object and closure demonstration.

Usage:
    python -m functor_lambdas [--no-pause] [--log-level LEVEL]

Options:
    --no-pause          Do not wait for a line of input after each block
    --log-level LEVEL   Diagnostics level on stderr (debug, info, warning, ...)

Environment:
    FUNCTOR_LAMBDAS_PAUSE      Set to 0/false to disable pauses
    FUNCTOR_LAMBDAS_LOG_LEVEL  Default for --log-level

Examples:
    python -m functor_lambdas
    python -m functor_lambdas --no-pause > out.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from .runner import LOG_LEVELS, RunnerConfig, config_from_env, run

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="functor-lambdas",
        description="Demonstrate callable objects, closures and capture modes.",
    )
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        default=None,
        help="Skip the wait for a line of input after each block.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        default=None,
        help="Level for diagnostics written to stderr.",
    )
    return parser


def _parse_args(argv: Sequence[str]) -> RunnerConfig:
    ns = build_parser().parse_args(argv)
    config = config_from_env()
    if ns.pause is not None:
        config = replace(config, pause=ns.pause)
    if ns.log_level is not None:
        config = replace(config, log_level=ns.log_level)
    return config


def configure_logging(level: str) -> logging.Logger:
    logger = logging.getLogger("functor_lambdas")
    logger.propagate = False
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    config = _parse_args(argv)
    configure_logging(config.log_level)
    run(config)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
