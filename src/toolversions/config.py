"""Read-only settings from TOML files.

A settings section is a dataclass whose fields all have defaults. Values
come from ``~/.config/toolversions/config.toml`` and then from
``.toolversions/config.toml`` in the working directory; the later file
wins. Keys that do not match a field, or whose value has the wrong type,
are skipped with a warning.
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
import tomllib
from typing import Any, TypeVar

logger = logging.getLogger("toolversions.config")

T = TypeVar("T")


def config_paths(cwd: pathlib.Path | None = None) -> list[pathlib.Path]:
    """Return the settings files in increasing order of precedence."""
    cwd = cwd if cwd is not None else pathlib.Path.cwd()
    return [
        pathlib.Path.home() / ".config" / "toolversions" / "config.toml",
        cwd / ".toolversions" / "config.toml",
    ]


def _read(path: pathlib.Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return {}


def _accepts(default: Any, value: Any) -> bool:
    # bool is an int subclass; keep the two apart.
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(default, bool) and isinstance(value, bool)
    return isinstance(value, type(default))


def load(cls: type[T], section: str, cwd: pathlib.Path | None = None) -> T:
    """Build *cls* from its defaults overlaid with the ``[section]`` tables."""
    defaults = {f.name: f.default for f in dataclasses.fields(cls)}
    values: dict[str, Any] = {}
    for path in config_paths(cwd):
        table = _read(path).get(section, {})
        if not isinstance(table, dict):
            logger.warning("%s: [%s] is not a table", path, section)
            continue
        for key, value in table.items():
            if key not in defaults:
                logger.warning("%s: unknown setting %s.%s", path, section, key)
            elif not _accepts(defaults[key], value):
                logger.warning(
                    "%s: %s.%s should be %s, got %r",
                    path, section, key, type(defaults[key]).__name__, value,
                )
            else:
                values[key] = value
    return cls(**values)
