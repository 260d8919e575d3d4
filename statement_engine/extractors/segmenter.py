"""
Line Segmenter Module
Splits raw statement text into trimmed, non-empty lines.
"""

from ..models import RawLine


def segment_lines(text: str) -> list[RawLine]:
    """
    Split statement text into RawLine records, preserving source order.

    Args:
        text: Full statement text

    Returns:
        List of RawLine objects; empty for empty input
    """
    if not text:
        return []

    lines = []
    for line_number, original in enumerate(text.splitlines(), 1):
        stripped = original.strip()
        if stripped:
            lines.append(RawLine(text=stripped, original=original, line_number=line_number))
    return lines
