"""Run version commands and normalise their outcome.

Every failure, whether the executable is missing or it exits non-zero,
collapses into the ``"not found"`` sentinel.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("toolversions.probe")

NOT_FOUND = "not found"


def check_tool(command: str) -> tuple[bool, str]:
    """Run *command* and return ``(found, output)``.

    stdout and stderr are captured as one stream. Returns
    ``(True, output.strip())`` on exit code 0, or ``(False, "not found")``
    when the command fails or cannot be launched.
    """
    try:
        result = subprocess.run(
            shlex.split(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.debug("Could not launch %r: %s", command, exc)
        return (False, NOT_FOUND)

    if result.returncode != 0:
        logger.debug("%r exited with status %d", command, result.returncode)
        return (False, NOT_FOUND)
    return (True, result.stdout.strip())


def probe_all(selected: Mapping[str, str]) -> dict[str, str]:
    """Probe each tool in *selected*, one after another, in order."""
    results: dict[str, str] = {}
    for name, command in selected.items():
        found, output = check_tool(command)
        logger.debug("%s: %s", name, output if found else NOT_FOUND)
        results[name] = output
    return results
