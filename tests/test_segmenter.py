"""Tests for line segmentation."""

from statement_engine.extractors.segmenter import segment_lines
from statement_engine.models import RawLine


def test_empty_text_yields_no_lines():
    """Test that empty input produces an empty sequence."""
    assert segment_lines("") == []
    assert segment_lines("   \n\t\n") == []


def test_lines_are_trimmed_and_blank_lines_dropped():
    """Test trimming and blank-line removal."""
    lines = segment_lines("  first line  \n\n\t\nsecond\r\n")
    assert [line.text for line in lines] == ["first line", "second"]


def test_original_text_and_position_are_kept():
    """Test that the untrimmed line and its source position are retained."""
    lines = segment_lines("header\n\n  01/15/2024 SHOP $5.00  ")
    assert lines[1] == RawLine(
        text="01/15/2024 SHOP $5.00",
        original="  01/15/2024 SHOP $5.00  ",
        line_number=3,
    )


def test_order_is_preserved():
    """Test that source order is preserved."""
    text = "\n".join(f"line {i}" for i in range(10))
    assert [line.text for line in segment_lines(text)] == [f"line {i}" for i in range(10)]
