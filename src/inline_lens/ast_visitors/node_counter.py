"""Counting of syntax nodes and call expressions in a function body.

The node count is a size proxy for the Go compiler's inlining cost model,
which weighs candidate functions by the size of their syntax tree. Every
named node tree-sitter produces for the body falls into exactly one
NodeCategory, and the category alone decides how it is counted. The
granularity follows what ``go/ast`` calls a statement or an expression:

    - Grouping productions (blocks, argument lists, expression lists,
      parameter declarations) are walked through but not counted.
    - Literals count once; their inner tokens (string content, escape
      sequences) do not.
    - In keyed composite literal elements (``Point{X: 1}``) only the value
      side is counted.
    - Comments are not part of the tree and are skipped.
    - Everything else counts once, including node kinds this module has never
      heard of, so a newer grammar can only add to a count, never drop nodes.

Anonymous tokens (keywords, operators, punctuation) are never counted.

Call expressions count as nodes and are tallied separately. A body that
contains calls may grow once the compiler inlines the callees, so its count
is a lower bound.

Pinned reference values:
    ``func Add(a, b int) int { return a + b }``     4 nodes, 0 calls
    ``func Add(a, b int) int { return helper(a, b) }``  5 nodes, 1 call
    ``func Noop() {}``                               0 nodes, 0 calls
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import assert_never

from tree_sitter import Node


class NodeCategory(Enum):
    """How a named node contributes to a body's counts."""

    CONTAINER = auto()  # walked through, not counted
    KEYED = auto()  # only the value side is walked
    LEAF = auto()  # counted, children skipped
    COMMENT = auto()  # skipped entirely
    CALL = auto()  # counted as a node and as a call
    NODE = auto()  # counted


CONTAINER_TYPES = frozenset(
    {
        "block",
        "statement_list",
        "expression_list",
        "argument_list",
        "parameter_list",
        "parameter_declaration",
        "variadic_parameter_declaration",
        "literal_value",
        "literal_element",
        "field_declaration_list",
        "field_declaration",
        "type_arguments",
    }
)

LEAF_TYPES = frozenset(
    {
        "interpreted_string_literal",
        "raw_string_literal",
        "rune_literal",
    }
)


@dataclass(frozen=True)
class NodeCount:
    """Counts for one function body."""

    node_count: int
    call_count: int


def classify_node(node_type: str) -> NodeCategory:
    """Map a tree-sitter node type to its counting category."""
    if node_type in CONTAINER_TYPES:
        return NodeCategory.CONTAINER
    if node_type in LEAF_TYPES:
        return NodeCategory.LEAF
    if node_type == "keyed_element":
        return NodeCategory.KEYED
    if node_type == "comment":
        return NodeCategory.COMMENT
    if node_type == "call_expression":
        return NodeCategory.CALL
    return NodeCategory.NODE


def _keyed_value(node: Node) -> list[Node]:
    value = node.child_by_field_name("value")
    if value is not None:
        return [value]
    # Older grammars have no field names on keyed elements
    named = node.named_children
    return named[-1:]


def count_nodes(body: Node) -> NodeCount:
    """Count the nodes and call expressions of a function body in one pass.

    Args:
        body: The body of a function declaration (a ``block`` node)

    Returns:
        NodeCount for the body. The body's own block is a container, so an
        empty body counts zero nodes.
    """
    node_count = 0
    call_count = 0
    stack = [body]

    while stack:
        node = stack.pop()
        category = classify_node(node.type)

        match category:
            case NodeCategory.COMMENT:
                continue
            case NodeCategory.LEAF:
                node_count += 1
                continue
            case NodeCategory.KEYED:
                children = _keyed_value(node)
            case NodeCategory.CONTAINER:
                children = node.named_children
            case NodeCategory.CALL:
                node_count += 1
                call_count += 1
                children = node.named_children
            case NodeCategory.NODE:
                node_count += 1
                children = node.named_children
            case _:
                assert_never(category)

        stack.extend(reversed(children))

    return NodeCount(node_count=node_count, call_count=call_count)
