"""Static table of probed tools and the selection logic over it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import toolversions

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Order here is the order of every report.
TOOLS: dict[str, str] = {
    "ruby": "ruby -v",
    "crystal": "crystal -v",
    "shards": "shards --version",
    "llvm-config": "llvm-config --version",
    "clang": "clang --version",
    "gcc": "gcc --version",
    "sw_vers": "sw_vers -productVersion",
    "uname": "uname -srm",
}


class UnknownToolsError(toolversions.ToolVersionsError):
    """Raised when a selection names tools missing from the registry."""

    def __init__(self, unknown: Iterable[str], available: Iterable[str]) -> None:
        self.unknown = list(unknown)
        self.available = list(available)
        super().__init__(f"Unknown tools requested: {', '.join(self.unknown)}")

    def describe(self) -> str:
        """Return the two-line message shown to the user."""
        return (
            f"Unknown tools requested: {', '.join(self.unknown)}\n"
            f"Available: {', '.join(self.available)}"
        )


def select(
    requested: Iterable[str] | None = None,
    registry: Mapping[str, str] = TOOLS,
) -> dict[str, str]:
    """Return the part of *registry* named by *requested*.

    ``None`` selects everything. The result keeps registry order, not the
    order of *requested*. Raises :class:`UnknownToolsError` naming every
    missing tool, in the order requested.
    """
    if requested is None:
        return dict(registry)

    wanted = list(dict.fromkeys(requested))
    unknown = [name for name in wanted if name not in registry]
    if unknown:
        raise UnknownToolsError(unknown, registry.keys())
    return {name: cmd for name, cmd in registry.items() if name in wanted}
