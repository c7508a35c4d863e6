"""Console testing utilities."""

from collections.abc import Iterator
from contextlib import contextmanager
from io import StringIO

from rich.console import Console


@contextmanager
def capture_console_output(width: int = 100) -> Iterator[tuple[Console, StringIO]]:
    """Create a Console instance with captured, uncolored output.

    Yields:
        tuple[Console, StringIO]: Console instance and output buffer

    Example:
        with capture_console_output() as (console, output):
            display_results(console, reports, LensSettings())
            assert "Add" in output.getvalue()

    """
    output = StringIO()
    console = Console(file=output, force_terminal=False, width=width)
    yield console, output


def assert_console_contains(output: StringIO, *expected_texts: str) -> None:
    """Assert that console output contains all expected text fragments."""
    output_str = output.getvalue()
    for text in expected_texts:
        assert text in output_str, f"Expected '{text}' not found in output: {output_str!r}"
