"""Dice group parser.

Turns classified segments into DiceGroups. Supports die groups like
3d6, wild groups like 1w10, and bare bonus numbers that fold into the
preceding group.
"""

import logging
import re
from dataclasses import replace
from typing import Iterable

from rolldice.dice.exceptions import (
    MalformedSeparatorError,
    NonNumericTokenError,
    NonPositiveValueError,
)
from rolldice.dice.segmenter import split_segments
from rolldice.dice.types import DiceGroup, Segment, Separator

logger = logging.getLogger(__name__)

# Base-10 integer with an optional sign; sign is rejected later as non-positive
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Values must fit a signed 64-bit integer
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


def parse_positive_int(text: str) -> int:
    """Parse a strictly positive base-10 integer.

    Args:
        text: The text to parse.

    Returns:
        The parsed value.

    Raises:
        NonNumericTokenError: If text is not an integer or overflows 64 bits.
        NonPositiveValueError: If the value is zero or negative.

    Examples:
        >>> parse_positive_int("12")
        12
    """
    if not INTEGER_PATTERN.fullmatch(text):
        raise NonNumericTokenError(text)

    # Longer than any 64-bit value
    if len(text.lstrip("+-").lstrip("0")) > len(str(INT64_MAX)):
        raise NonNumericTokenError(text)

    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise NonNumericTokenError(text)
    if value <= 0:
        raise NonPositiveValueError(value, token=text)
    return value


def parse_dice_segment(segment: Segment) -> DiceGroup:
    """Parse a die-group segment like "3d6" or "2w10".

    Raises:
        MalformedSeparatorError: If the separator does not occur exactly once.
        NonNumericTokenError: If either side is not an integer.
        NonPositiveValueError: If either side is not positive.
    """
    match segment.separator:
        case Separator.WILD:
            wild = True
        case Separator.PLAIN:
            wild = False
        case _:
            raise MalformedSeparatorError(segment.text)

    parts = segment.text.split(segment.separator.value)
    if len(parts) != 2:
        raise MalformedSeparatorError(segment.text)

    count_text, sides_text = parts
    return DiceGroup.dice(
        count=parse_positive_int(count_text),
        sides=parse_positive_int(sides_text),
        wild=wild,
    )


class DiceGroupBuilder:
    """Accumulates DiceGroups from segments in order.

    Finalized groups are immutable; a bonus token replaces the most
    recent group with a copy carrying the added bonus.

    Example:
        >>> builder = DiceGroupBuilder()
        >>> builder.add(Segment("3d6", Separator.PLAIN))
        >>> builder.add(Segment("2"))
        >>> builder.build()
        (DiceGroup(count=3, sides=6, bonus=2, wild=False),)
    """

    def __init__(self) -> None:
        self._groups: list[DiceGroup] = []

    def add(self, segment: Segment) -> None:
        """Parse one segment and fold it into the groups built so far."""
        if segment.is_bonus:
            self.add_bonus(parse_positive_int(segment.text))
        else:
            self._groups.append(parse_dice_segment(segment))

    def add_bonus(self, value: int) -> None:
        """Add a bonus to the last group, or start a standalone bonus."""
        if self._groups:
            last = self._groups[-1]
            self._groups[-1] = replace(last, bonus=last.bonus + value)
        else:
            self._groups.append(DiceGroup.bonus_only(value))

    def build(self) -> tuple[DiceGroup, ...]:
        return tuple(self._groups)


def parse_groups(tokens: Iterable[str]) -> tuple[DiceGroup, ...]:
    """Parse raw command-line tokens into DiceGroups.

    Every segment is parsed before returning, so a bad segment anywhere
    in the input fails the whole expression.

    Args:
        tokens: Raw argument strings (e.g., ["3d12", "2d6", "5"]).

    Returns:
        DiceGroups in input order. Empty if every token was blank.

    Raises:
        DiceParseError: If any segment is invalid.

    Examples:
        >>> parse_groups(["3d6", "+", "2"])
        (DiceGroup(count=3, sides=6, bonus=2, wild=False),)
        >>> parse_groups(["5"])
        (DiceGroup(count=0, sides=0, bonus=5, wild=False),)
    """
    if isinstance(tokens, str):
        tokens = [tokens]

    builder = DiceGroupBuilder()
    for segment in split_segments(tokens):
        builder.add(segment)

    groups = builder.build()
    logger.debug("Parsed groups: %s", " ".join(group.notation for group in groups))
    return groups
