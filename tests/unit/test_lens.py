"""Tests for the hint policy."""

import pytest

from inline_lens.errors import ConfigurationError
from inline_lens.lens import (
    INLINE_BUDGET,
    UNCERTAIN_HINT,
    LensSettings,
    filter_reports,
    is_inlineable,
    lens_title,
    lens_tooltip,
)
from tests.helpers.factories import make_report


def test_default_settings_show_everything() -> None:
    """Unfiltered output is the full analysis result."""
    settings = LensSettings()
    reports = (
        make_report("Big", node_count=500, call_count=9),
        make_report("Marked", line_number=2, noinline=True),
    )
    assert filter_reports(reports, settings) == reports


def test_editor_defaults() -> None:
    """The editor hides non-inlineable and directive-marked functions."""
    settings = LensSettings.editor_defaults()
    assert settings.show_only_inlineable is True
    assert settings.show_noinline is False
    assert settings.max_func_calls == 1
    assert settings.inline_budget == INLINE_BUDGET == 80


@pytest.mark.parametrize(
    ("node_count", "call_count", "expected"),
    [
        (4, 0, True),
        (79, 1, True),
        (80, 0, False),
        (10, 2, False),
    ],
)
def test_is_inlineable(node_count: int, call_count: int, expected: bool) -> None:
    """Budget is exclusive, call allowance inclusive."""
    report = make_report(node_count=node_count, call_count=call_count)
    assert is_inlineable(report, LensSettings()) is expected


def test_filter_only_inlineable_preserves_order() -> None:
    """Large functions are dropped, the rest keep their order."""
    small = make_report("Small", line_number=1, node_count=3)
    large = make_report("Large", line_number=5, node_count=120)
    chatty = make_report("Chatty", line_number=9, node_count=10, call_count=3)
    tiny = make_report("Tiny", line_number=12, node_count=1)

    settings = LensSettings(show_only_inlineable=True)
    assert filter_reports((small, large, chatty, tiny), settings) == (small, tiny)


def test_filter_hides_noinline() -> None:
    """Directive-marked functions are hidden unless requested."""
    marked = make_report("Marked", noinline=True)
    plain = make_report("Plain", line_number=5)

    assert filter_reports((marked, plain), LensSettings(show_noinline=False)) == (plain,)
    assert filter_reports((marked, plain), LensSettings(show_noinline=True)) == (marked, plain)


def test_custom_thresholds() -> None:
    """Thresholds are configurable."""
    report = make_report(node_count=30, call_count=2)
    assert not is_inlineable(report, LensSettings())
    assert is_inlineable(report, LensSettings(max_func_calls=2))
    assert not is_inlineable(report, LensSettings(max_func_calls=2, inline_budget=30))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_func_calls": -1},
        {"inline_budget": 0},
        {"inline_budget": -80},
    ],
)
def test_invalid_settings(kwargs: dict[str, int]) -> None:
    """Malformed thresholds raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        LensSettings(**kwargs)


@pytest.mark.parametrize(
    ("node_count", "call_count", "expected"),
    [
        (4, 0, "4 nodes"),
        (1, 0, "1 node"),
        (0, 0, "0 nodes"),
        (12, 2, "~12 nodes"),
        (1, 1, "~1 node"),
    ],
)
def test_lens_title(node_count: int, call_count: int, expected: str) -> None:
    """Titles carry the count, pluralized, with ~ for lower bounds."""
    assert lens_title(make_report(node_count=node_count, call_count=call_count)) == expected


def test_lens_tooltip_exact_count() -> None:
    """Without calls the tooltip is a single sentence."""
    assert lens_tooltip(make_report(node_count=4)) == "There are 4 AST nodes in this function"
    assert lens_tooltip(make_report(node_count=1)) == "There is 1 AST node in this function"


def test_lens_tooltip_lower_bound() -> None:
    """With calls the tooltip warns that the count may grow."""
    tooltip = lens_tooltip(make_report(node_count=5, call_count=1))
    assert tooltip == f"There are 5 AST nodes in this function\n{UNCERTAIN_HINT}"
