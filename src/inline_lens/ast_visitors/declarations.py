"""Discovery of top-level Go function declarations.

Only declarations that appear directly in the source file are collected, both
plain functions (``func Add(...)``) and methods (``func (p Point) Scale(...)``).
Function literals are part of whatever body contains them and are never
collected on their own. Declarations without a body, such as functions
implemented in assembly, have nothing to count and are skipped.

Each declaration carries the comments attached to it. A comment is attached
when it sits on its own line in the contiguous run of comments immediately
above the ``func`` keyword. A blank line, a statement, or code sharing the
comment's line ends the run.
"""

from dataclasses import dataclass

from tree_sitter import Node, Tree

from inline_lens.ast_visitors.tree_walk import first, iter_descendants

FUNCTION_DECLARATION_TYPES = frozenset({"function_declaration", "method_declaration"})


@dataclass(frozen=True)
class Declaration:
    """A top-level function or method declaration that has a body."""

    name: str
    line_number: int
    body: Node
    comments: tuple[str, ...]  # attached comment text, in source order


def _node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _receiver_type_name(receiver: Node) -> str | None:
    """Extract the receiver's base type name, e.g. "Point" from ``(p *Point[T])``."""
    type_node = first(iter_descendants(receiver), lambda node: node.type == "type_identifier")
    return _node_text(type_node) if type_node is not None else None


def _declaration_name(node: Node) -> str:
    name_node = node.child_by_field_name("name")
    name = _node_text(name_node) if name_node is not None else "<anonymous>"

    if node.type == "method_declaration":
        receiver = node.child_by_field_name("receiver")
        receiver_name = _receiver_type_name(receiver) if receiver is not None else None
        if receiver_name:
            return f"{receiver_name}.{name}"
    return name


def attached_comments(node: Node) -> tuple[str, ...]:
    """Collect the comments directly above a node, in source order.

    Args:
        node: A node whose siblings may include comments (a top-level declaration)

    Returns:
        Text of each attached comment. Empty when the line above the node is
        blank or holds anything other than a standalone comment.
    """
    comments: list[str] = []
    following = node
    candidate = node.prev_named_sibling

    while candidate is not None and candidate.type == "comment":
        # Blank line between the comment and what follows it
        if candidate.end_point[0] + 1 != following.start_point[0]:
            break

        preceding = candidate.prev_named_sibling
        # Trailing comment at the end of an earlier line of code
        if preceding is not None and preceding.end_point[0] == candidate.start_point[0]:
            break

        comments.append(_node_text(candidate))
        following = candidate
        candidate = preceding

    comments.reverse()
    return tuple(comments)


def collect_declarations(tree: Tree) -> tuple[Declaration, ...]:
    """Collect every top-level function and method declaration with a body.

    Returns:
        Declarations in source order.
    """
    declarations: list[Declaration] = []

    for node in tree.root_node.named_children:
        if node.type not in FUNCTION_DECLARATION_TYPES:
            continue

        body = node.child_by_field_name("body")
        if body is None:
            continue

        declarations.append(
            Declaration(
                name=_declaration_name(node),
                line_number=node.start_point[0] + 1,
                body=body,
                comments=attached_comments(node),
            )
        )

    return tuple(declarations)
