"""CLI entry point for inline lens.

One invocation handles exactly one request: read one Go source file (from a
path or standard input), analyze it, write the result, exit.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .analyzer import analyze_file, analyze_source
from .errors import ConfigurationError, InlineLensError, ParseError
from .lens import DEFAULT_MAX_FUNC_CALLS, INLINE_BUDGET, LensSettings, filter_reports
from .models import FunctionReport
from .output import display_results, format_reports_json

logger = logging.getLogger(__name__)

STDIN_TARGET = "-"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Estimate Go inlining eligibility from per-function AST node counts"
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=STDIN_TARGET,
        help="Go file to analyze (default: read source from standard input)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--only-inlineable",
        action="store_true",
        help="Hide functions over the inlining budget or with too many calls",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=INLINE_BUDGET,
        help=f"Node count at which a function is considered too large to inline (default: {INLINE_BUDGET})",
    )
    parser.add_argument(
        "--max-calls",
        type=int,
        default=DEFAULT_MAX_FUNC_CALLS,
        help=f"Maximum calls an inlineable function may make (default: {DEFAULT_MAX_FUNC_CALLS})",
    )
    parser.add_argument(
        "--hide-noinline",
        action="store_true",
        help="Hide functions marked //go:noinline",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging output (written to stderr)",
    )
    return parser.parse_args()


def read_stdin() -> str:
    """Read Go source from standard input.

    Raises:
        InlineLensError: The input is not UTF-8
    """
    try:
        return sys.stdin.buffer.read().decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Standard input is not valid UTF-8: {e}"
        raise InlineLensError(msg) from e


def check_target(target: str) -> None:
    """Validate that the target path is an existing Go file.

    Raises:
        InlineLensError: The path is missing, not a file, or not a Go file
    """
    path = Path(target)
    if not path.exists():
        msg = f"File {path} does not exist"
        raise InlineLensError(msg)
    if not path.is_file():
        msg = f"{path} is not a file"
        raise InlineLensError(msg)
    if path.suffix != ".go":
        msg = f"{path} is not a Go file"
        raise InlineLensError(msg)


def analyze_target(target: str) -> tuple[FunctionReport, ...]:
    """Analyze a Go file, or standard input for "-".

    Raises:
        InlineLensError: The input is missing, not a Go file, or not UTF-8
        ParseError: The source is not syntactically valid Go
    """
    if target == STDIN_TARGET:
        return analyze_source(read_stdin())
    check_target(target)
    return analyze_file(target)


def main() -> None:
    """Run the CLI application."""
    console = Console()
    error_console = Console(stderr=True)
    args = parse_args()

    # Configure logging; stdout is reserved for results
    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )
        logger.debug("Debug logging enabled")

    try:
        settings = LensSettings(
            show_only_inlineable=args.only_inlineable,
            max_func_calls=args.max_calls,
            show_noinline=not args.hide_noinline,
            inline_budget=args.budget,
        )
    except ConfigurationError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(2)

    try:
        reports = analyze_target(args.target)
    except ParseError as e:
        error_console.print(f"[red]Error parsing {escape(args.target)}: {escape(str(e))}[/red]")
        sys.exit(1)
    except InlineLensError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    reports = filter_reports(reports, settings)
    logger.debug("Reporting %d function(s)", len(reports))

    if args.format == "json":
        sys.stdout.write(format_reports_json(reports) + "\n")
    else:
        display_results(console, reports, settings)


if __name__ == "__main__":
    main()
