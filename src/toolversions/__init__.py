"""Report installed versions of common development tools."""

__version__ = "0.1.0"


class ToolVersionsError(Exception):
    """Base class for errors raised by toolversions."""
