"""Render probe results as aligned text or JSON."""

from __future__ import annotations

import dataclasses
import json
import pathlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

HEADER = "Detected tool versions:"
TIP = (
    "Tip: run with --json to get machine-readable output, "
    "or --output file.json to write JSON to disk."
)


@dataclasses.dataclass
class ReportConfig:
    json_indent: int = 2


def render_json(results: Mapping[str, str], indent: int = 2) -> str:
    """Serialise *results* as an indented JSON object, keeping key order."""
    return json.dumps(dict(results), indent=indent, ensure_ascii=False)


def render_text(results: Mapping[str, str]) -> str:
    """Build the plain-text table, names padded to the longest one."""
    lines = [HEADER, ""]
    if results:
        width = max(len(name) for name in results)
        lines.extend(f"{name:<{width}} : {value}" for name, value in results.items())
        lines.append("")
    lines.append(TIP)
    return "\n".join(lines)


def emit(
    results: Mapping[str, str],
    *,
    json_output: bool = False,
    output: str | None = None,
    cfg: ReportConfig | None = None,
) -> None:
    """Print or write *results*.

    Asking for an output file implies JSON. The file is always UTF-8;
    errors while writing it are left to propagate.
    """
    cfg = cfg or ReportConfig()
    if not (json_output or output):
        print(render_text(results))
        return

    text = render_json(results, indent=cfg.json_indent)
    if output:
        pathlib.Path(output).write_text(text + "\n", encoding="utf-8")
        print(f"Wrote JSON output to {output}")
    else:
        print(text)
