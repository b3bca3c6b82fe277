"""Split raw command-line tokens into classified segments.

Segments are separated by whitespace or '+', so "3d6+2", "3d6 + 2" and
the tokens ["3d6", "+", "2"] all produce the same two segments.
"""

import re
from typing import Iterable

from rolldice.dice.types import Segment, Separator

# '+' and whitespace both delimit segments; runs collapse to one split
SEGMENT_DELIMITER = re.compile(r"[\s+]+")


def is_blank(piece: str) -> bool:
    """Check if a piece is empty once whitespace and '+' are removed."""
    return not piece.replace("+", "").strip()


def classify(text: str) -> Separator | None:
    """Find the separator of a normalized segment.

    Separators are tried in priority order, so a wild separator wins
    over a plain one. A segment with neither is a bonus token.

    Examples:
        >>> classify("2w10")
        <Separator.WILD: 'w'>
        >>> classify("3d6")
        <Separator.PLAIN: 'd'>
        >>> classify("5") is None
        True
    """
    for separator in Separator:
        if separator.value in text:
            return separator
    return None


def split_segments(tokens: Iterable[str]) -> list[Segment]:
    """Split and classify raw tokens, preserving input order.

    Args:
        tokens: Raw argument strings, e.g. ["3d6+2", "1W10"].

    Returns:
        Classified segments with blank pieces dropped.
    """
    segments = []
    for token in tokens:
        for piece in SEGMENT_DELIMITER.split(token):
            if is_blank(piece):
                continue
            text = piece.strip().lower()
            segments.append(Segment(text=text, separator=classify(text)))
    return segments
