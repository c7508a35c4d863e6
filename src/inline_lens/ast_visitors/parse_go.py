"""Go source parsing for the inline lens analyzer.

This module is the single place where text becomes a syntax tree. Source is
parsed in memory, so the analyzer can run against unsaved editor buffers
piped through standard input as well as files on disk.

tree-sitter is error tolerant: it always produces a tree and marks the broken
regions with ERROR or missing nodes. The analyzer is all-or-nothing, so any
such node turns the whole parse into a ParseError and no tree is returned.
The grammar is also looser than Go at the top level (it accepts a missing
package clause and bare statements), so the file layout is checked after
parsing.
"""

import logging
from functools import cache
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from inline_lens.ast_visitors.tree_walk import first, iter_descendants
from inline_lens.errors import InlineLensError, ParseError

logger = logging.getLogger(__name__)

TOP_LEVEL_DECLARATION_TYPES = frozenset(
    {
        "function_declaration",
        "method_declaration",
        "type_declaration",
        "var_declaration",
        "const_declaration",
    }
)


@cache
def go_language() -> Language:
    """Return the compiled Go grammar (immutable, safe to share)."""
    return Language(tree_sitter_go.language())


def _is_syntax_error(node: Node) -> bool:
    return node.is_error or node.is_missing


def _describe_error(node: Node) -> str:
    if node.is_missing:
        return f"missing {node.type!r}"
    text = (node.text or b"").decode("utf-8", errors="replace")
    snippet = text.splitlines()[0] if text else ""
    if snippet:
        return f"syntax error near {snippet[:40]!r}"
    return "syntax error"


def parse_go_source(source: str) -> Tree:
    """Parse Go source code into a tree-sitter tree.

    Args:
        source: Complete Go source text of one file

    Returns:
        The parsed tree, guaranteed free of ERROR and missing nodes

    Raises:
        ParseError: The source is not syntactically valid Go. Carries the
            position of the first error in source order.
    """
    # A Parser holds mutable state, so each call gets its own.
    parser = Parser(go_language())
    tree = parser.parse(source.encode("utf-8"))

    root = tree.root_node
    if root.has_error:
        error_node = first(iter_descendants(root), _is_syntax_error)
        if error_node is None:
            error_node = root
        raise _error_at(error_node, _describe_error(error_node))

    _check_file_structure(root)

    logger.debug("Parsed %d bytes of Go source", root.end_byte)
    return tree


def _error_at(node: Node, message: str) -> ParseError:
    row, column = node.start_point
    error = ParseError(message, line=row + 1, column=column + 1)
    logger.debug("Parse failed at %s", error)
    return error


def _check_file_structure(root: Node) -> None:
    """Enforce Go's top-level layout, which tree-sitter-go does not.

    A file is one package clause, then imports, then declarations. Comments
    may appear anywhere.

    Raises:
        ParseError: At the first top-level node out of place
    """
    nodes = [child for child in root.named_children if child.type != "comment"]
    if not nodes:
        raise ParseError("expected 'package' clause", line=1, column=1)
    if nodes[0].type != "package_clause":
        raise _error_at(nodes[0], "expected 'package' clause")

    seen_declaration = False
    for node in nodes[1:]:
        if node.type == "import_declaration":
            if seen_declaration:
                raise _error_at(node, "imports must appear before other declarations")
        elif node.type in TOP_LEVEL_DECLARATION_TYPES:
            seen_declaration = True
        elif node.type == "package_clause":
            raise _error_at(node, "duplicate 'package' clause")
        else:
            raise _error_at(node, "non-declaration statement outside function body")


def parse_go_file(file_path: Path) -> Tree:
    """Parse a Go file into a tree.

    Raises:
        InlineLensError: The file cannot be read or is not valid UTF-8
        ParseError: The file is not syntactically valid Go
    """
    try:
        source_code = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read {file_path}: {e}"
        raise InlineLensError(msg) from e

    return parse_go_source(source_code)
