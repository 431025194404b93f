"""Logging setup for the command-line entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys


@dataclasses.dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = "%(name)s: %(levelname)s: %(message)s"


def setup_logging(cfg: LoggingConfig, *, verbose: bool = False) -> None:
    """Send log records to stderr; stdout is reserved for the report."""
    level = logging.DEBUG if verbose else logging.getLevelName(str(cfg.level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level, format=cfg.format)
