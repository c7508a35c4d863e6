"""Recognition of compiler directives that suppress inlining.

Go's compiler honors ``//go:noinline`` written as a line comment of its own
directly above a function declaration. Matching is an exact, case-sensitive
string comparison: ``// go:noinline`` (with a space) or ``//go:noinline now``
are ordinary comments to the compiler and are not recognized here either.
"""

from collections.abc import Iterable

NOINLINE_DIRECTIVE = "//go:noinline"


def is_noinline_directive(comment_line: str) -> bool:
    """Check whether a single comment line is exactly the no-inline pragma.

    Trailing whitespace, including the carriage return of CRLF files, is
    ignored. Leading whitespace is not: the comment text starts at ``//``.
    """
    return comment_line.rstrip() == NOINLINE_DIRECTIVE


def has_noinline_directive(comment_lines: Iterable[str]) -> bool:
    """Check whether any comment attached to a declaration is the no-inline pragma.

    Args:
        comment_lines: Comments directly above a declaration, in source order

    Returns:
        True if at least one line matches exactly, False otherwise (including
        when there are no comments at all).
    """
    return any(is_noinline_directive(line) for line in comment_lines)
