"""Hint policy for rendering inlining estimates next to function declarations.

The analyzer only measures. Deciding which functions deserve a hint, and how
the hint reads, lives here so that every front end (the CLI table, an editor
integration consuming the JSON) applies the same thresholds.
"""

from dataclasses import dataclass

from .errors import ConfigurationError
from .models import FunctionReport

# The Go compiler's default inlining budget, in syntax nodes
INLINE_BUDGET = 80
DEFAULT_MAX_FUNC_CALLS = 1

UNCERTAIN_HINT = "Actual nodes count may be higher due to function calls that could be inlined"


@dataclass(frozen=True)
class LensSettings:
    """Thresholds controlling which reports are shown.

    The defaults show everything, so unfiltered output is the analyzer's full
    result. ``editor_defaults()`` gives the settings an editor starts with.
    """

    show_only_inlineable: bool = False
    max_func_calls: int = DEFAULT_MAX_FUNC_CALLS
    show_noinline: bool = True
    inline_budget: int = INLINE_BUDGET

    def __post_init__(self) -> None:
        if self.max_func_calls < 0:
            msg = f"max_func_calls must be >= 0, got {self.max_func_calls}"
            raise ConfigurationError(msg)
        if self.inline_budget <= 0:
            msg = f"inline_budget must be > 0, got {self.inline_budget}"
            raise ConfigurationError(msg)

    @classmethod
    def editor_defaults(cls) -> "LensSettings":
        """Settings that hide functions unlikely to be inlined."""
        return cls(show_only_inlineable=True, show_noinline=False)


def is_inlineable(report: FunctionReport, settings: LensSettings) -> bool:
    """Check whether a function fits the inlining budget and call allowance."""
    return report.node_count < settings.inline_budget and report.call_count <= settings.max_func_calls


def filter_reports(
    reports: tuple[FunctionReport, ...], settings: LensSettings
) -> tuple[FunctionReport, ...]:
    """Drop the reports the settings hide, preserving order."""
    return tuple(
        report
        for report in reports
        if (not settings.show_only_inlineable or is_inlineable(report, settings))
        and (settings.show_noinline or not report.has_noinline_directive)
    )


def _nodes_word(count: int) -> str:
    return "node" if count == 1 else "nodes"


def lens_title(report: FunctionReport) -> str:
    """Short hint shown above a declaration, e.g. "12 nodes" or "~12 nodes".

    The "~" prefix marks counts that are a lower bound because of calls.
    """
    prefix = "~" if report.has_any_calls else ""
    return f"{prefix}{report.node_count} {_nodes_word(report.node_count)}"


def lens_tooltip(report: FunctionReport) -> str:
    """Longer explanation of a hint, with the lower-bound warning when relevant."""
    verb = "is" if report.node_count == 1 else "are"
    tooltip = f"There {verb} {report.node_count} AST {_nodes_word(report.node_count)} in this function"
    if report.has_any_calls:
        tooltip += f"\n{UNCERTAIN_HINT}"
    return tooltip
