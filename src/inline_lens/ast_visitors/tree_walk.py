"""Iteration utilities over tree-sitter syntax trees."""

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from tree_sitter import Node

T = TypeVar("T")


def first(iterable: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item in iterable that satisfies the predicate, or None if no match.

    Examples:
        >>> first(iter_descendants(root), lambda node: node.type == "call_expression")
        <Node type=call_expression, ...>
    """
    for item in iterable:
        if predicate(item):
            return item
    return None


def iter_descendants(node: Node) -> Iterator[Node]:
    """Yield node and every node below it in pre-order (source order).

    Anonymous tokens are included; filter on ``Node.is_named`` where only
    grammar productions matter. Uses an explicit stack so deeply nested
    bodies cannot exhaust the interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
