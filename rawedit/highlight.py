"""Literal keyword highlighting for the cursor line."""

from typing import NamedTuple

from .constants import EditorConstants


class Span(NamedTuple):
    text: str
    is_keyword: bool


def highlight_line(line: str) -> list[Span]:
    """Split a line into whitespace-delimited tokens tagged as keyword or not.

    Matching is exact and case-sensitive. Runs of whitespace are not kept:
    the spans are meant to be drawn joined by single spaces.
    """
    return [Span(word, word in EditorConstants.KEYWORDS) for word in line.split()]


def spans_to_text(spans: list[Span]) -> str:
    """Return the text a highlighted line displays as."""
    return ' '.join(span.text for span in spans)
