"""tool-versions — report which development tools are installed.

Usage:
    tool-versions                      Probe every known tool, print a table
    tool-versions --json               Print results as JSON
    tool-versions --tools ruby,gcc     Probe only the named tools
    tool-versions -o out.json          Write JSON results to a file

Exit codes: 0 success, 1 invalid option, 2 unknown tool requested.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import NoReturn

import toolversions
import toolversions.config
import toolversions.logs
import toolversions.probe
import toolversions.registry
import toolversions.report

EXIT_USAGE = 1
EXIT_UNKNOWN_TOOL = 2


@dataclasses.dataclass(frozen=True)
class Options:
    json_output: bool = False
    tools: tuple[str, ...] | None = None
    output: str | None = None
    verbose: bool = False


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad input."""

    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"ERROR: {message}\n")
        self.print_help(sys.stderr)
        sys.exit(EXIT_USAGE)


def _tool_list(value: str) -> tuple[str, ...]:
    names = (part.strip() for part in value.split(","))
    return tuple(dict.fromkeys(name for name in names if name))


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="tool-versions",
        description="Report versions of installed development tools.",
        epilog="Known tools: " + ", ".join(toolversions.registry.TOOLS),
    )
    parser.add_argument(
        "--json", dest="json_output", action="store_true",
        help="Output results as JSON",
    )
    parser.add_argument(
        "--tools", type=_tool_list, metavar="x,y,z",
        help="Comma-separated list of tools to check",
    )
    parser.add_argument(
        "-o", "--output", metavar="FILE",
        help="Write output to FILE (JSON)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each probe to stderr",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {toolversions.__version__}",
    )
    return parser


def parse_options(argv: list[str]) -> Options:
    """Turn *argv* into :class:`Options`; exits on ``--help`` or bad flags."""
    args = _build_parser().parse_args(argv)
    return Options(
        json_output=args.json_output,
        tools=args.tools,
        output=args.output,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    options = parse_options(args)
    log_cfg = toolversions.config.load(toolversions.logs.LoggingConfig, "logging")
    toolversions.logs.setup_logging(log_cfg, verbose=options.verbose)

    try:
        selected = toolversions.registry.select(options.tools)
    except toolversions.registry.UnknownToolsError as exc:
        print(exc.describe(), file=sys.stderr)
        return EXIT_UNKNOWN_TOOL

    results = toolversions.probe.probe_all(selected)
    report_cfg = toolversions.config.load(toolversions.report.ReportConfig, "report")
    toolversions.report.emit(
        results,
        json_output=options.json_output,
        output=options.output,
        cfg=report_cfg,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
