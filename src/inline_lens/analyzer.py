"""Main analysis orchestrator for inlining-size estimates."""

import logging
from pathlib import Path

from tree_sitter import Tree

from inline_lens.ast_visitors.declarations import collect_declarations
from inline_lens.ast_visitors.node_counter import count_nodes
from inline_lens.ast_visitors.parse_go import parse_go_file, parse_go_source
from inline_lens.directives import has_noinline_directive
from inline_lens.models import FunctionReport

logger = logging.getLogger(__name__)


def analyze_tree(tree: Tree) -> tuple[FunctionReport, ...]:
    """Complete analysis pipeline for a parsed Go tree.

    Args:
        tree: Parsed tree, free of syntax errors

    Returns:
        One FunctionReport per top-level declaration with a body, in
        declaration order.
    """
    reports: list[FunctionReport] = []

    for declaration in collect_declarations(tree):
        counts = count_nodes(declaration.body)
        report = FunctionReport(
            name=declaration.name,
            line_number=declaration.line_number,
            node_count=counts.node_count,
            call_count=counts.call_count,
            has_noinline_directive=has_noinline_directive(declaration.comments),
        )
        logger.debug(
            "%s (line %d): %d nodes, %d calls",
            report.name,
            report.line_number,
            report.node_count,
            report.call_count,
        )
        reports.append(report)

    return tuple(reports)


def analyze_source(source_code: str) -> tuple[FunctionReport, ...]:
    """Complete analysis pipeline for Go source code held in memory.

    Either every function is reported or the call fails; there are no
    partial results.

    Raises:
        ParseError: The source is not syntactically valid Go
    """
    return analyze_tree(parse_go_source(source_code))


def analyze_file(file_path: str) -> tuple[FunctionReport, ...]:
    """Complete analysis pipeline for a single Go file.

    Raises:
        InlineLensError: The file cannot be read
        ParseError: The file is not syntactically valid Go
    """
    return analyze_tree(parse_go_file(Path(file_path)))
