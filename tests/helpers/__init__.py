"""Test helper utilities."""

from .console import assert_console_contains, capture_console_output
from .factories import make_report
from .go_parsing import first_body, parse_declarations, wrap_body
from .temp_files import temp_go_file

__all__ = [
    "assert_console_contains",
    "capture_console_output",
    "first_body",
    "make_report",
    "parse_declarations",
    "temp_go_file",
    "wrap_body",
]
