"""Tests for numbering labels."""

import pytest

from smart_list.core.tree.numbering import default_child_format, format_for_depth, format_number


@pytest.mark.parametrize(
    ("n", "fmt", "expected"),
    [
        (1, "1.", "1."),
        (3, "01.", "03."),
        (12, "01.", "12."),
        (2, "a.", "b."),
        (27, "a)", "a)"),
        (4, "i.", "iv."),
        (10, "i.", "x."),
        (11, "i.", "11."),
        (2, "Step N", "Step 2"),
    ],
)
def test_format_number(n: int, fmt: str, expected: str) -> None:
    assert format_number(n, fmt) == expected


def test_default_child_format_fallback_table() -> None:
    assert default_child_format("1.") == "a)"
    assert default_child_format("01.") == "a)"
    assert default_child_format("Step N") == "a)"
    assert default_child_format("a.") == "i."
    assert default_child_format("a)") == "i."
    assert default_child_format("i.") == "a)"


def test_format_for_depth_prefers_explicit_child_format() -> None:
    assert format_for_depth(0, None, None) == "1."
    assert format_for_depth(1, None, None) == "a)"
    assert format_for_depth(2, "a.", None) == "i."
    assert format_for_depth(1, "1.", "01.") == "01."
