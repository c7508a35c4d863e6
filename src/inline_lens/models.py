"""Core data models for the inline lens analyzer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FunctionReport:
    """Inlining-size estimate for one top-level function declaration."""

    name: str  # e.g., "Add" or "Point.Scale" for methods
    line_number: int  # line of the `func` keyword, 1-based
    node_count: int
    call_count: int
    has_noinline_directive: bool

    @property
    def has_any_calls(self) -> bool:
        """Whether the node count is only a lower bound.

        Callees that the compiler may inline are not expanded into the count.
        """
        return self.call_count > 0
