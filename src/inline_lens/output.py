"""JSON serialization and Rich display for analysis results."""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .lens import LensSettings, is_inlineable, lens_title
from .models import FunctionReport


def report_to_dict(report: FunctionReport) -> dict[str, int | bool]:
    """Map a report onto the wire format editor integrations consume."""
    return {
        "line": report.line_number,
        "astCount": report.node_count,
        "funcCallCount": report.call_count,
        "hasNoinline": report.has_noinline_directive,
        "hasAnyCalls": report.has_any_calls,
    }


def format_reports_json(reports: tuple[FunctionReport, ...]) -> str:
    """Serialize reports as a JSON array, in report order."""
    return json.dumps([report_to_dict(report) for report in reports])


def format_results_table(reports: tuple[FunctionReport, ...], settings: LensSettings) -> Table:
    """Create Rich table displaying per-function inlining estimates."""
    table = Table(title="Function Inlining Size Estimates")

    table.add_column("Line", justify="right", style="dim")
    table.add_column("Function", style="cyan", no_wrap=True)
    table.add_column("Nodes", justify="right")
    table.add_column("Calls", justify="right", style="magenta")
    table.add_column("Hint", style="bold")

    for report in reports:
        # Color code against the inlining budget
        nodes_text = Text(lens_title(report))
        if report.has_noinline_directive:
            nodes_text.style = "dim"
        elif is_inlineable(report, settings):
            nodes_text.style = "green"
        elif report.node_count < settings.inline_budget:
            nodes_text.style = "yellow"
        else:
            nodes_text.style = "red"

        hint = "go:noinline" if report.has_noinline_directive else ""

        table.add_row(
            str(report.line_number),
            report.name,
            nodes_text,
            str(report.call_count),
            hint,
        )

    return table


def print_summary_stats(console: Console, reports: tuple[FunctionReport, ...], settings: LensSettings) -> None:
    """Print summary statistics about the analysis."""
    if not reports:
        console.print("[yellow]No functions found to analyze.[/yellow]")
        return

    total_functions = len(reports)
    inlineable = sum(1 for r in reports if is_inlineable(r, settings) and not r.has_noinline_directive)
    noinline = sum(1 for r in reports if r.has_noinline_directive)
    lower_bounds = sum(1 for r in reports if r.has_any_calls)

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"Total functions analyzed: {total_functions}")
    console.print(f"Likely inlineable (< {settings.inline_budget} nodes): {inlineable}")
    console.print(f"Marked go:noinline: {noinline}")

    if lower_bounds > 0:
        console.print(f"[yellow]{lower_bounds} count(s) are lower bounds because of calls (~).[/yellow]")


def display_results(console: Console, reports: tuple[FunctionReport, ...], settings: LensSettings) -> None:
    """Display complete analysis results with table and summary."""
    if not reports:
        console.print("[yellow]No functions found to analyze.[/yellow]")
        return

    table = format_results_table(reports, settings)
    console.print(table)

    print_summary_stats(console, reports, settings)
