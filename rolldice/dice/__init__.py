"""Dice expression engine.

Parses compound expressions like "3d6+2 2d8 1w10" and rolls them with
wild-die fumble and explosion rules.

Usage:
    >>> from rolldice.dice import parse_groups, roll_groups, roll_expression
    >>> groups = parse_groups(["3d6", "+", "2"])
    >>> result = roll_groups(groups)
    >>> result = roll_expression("1w6 2")
"""

from typing import Iterable

# Types
from rolldice.dice.types import (
    DiceGroup,
    GroupOutcome,
    Segment,
    Separator,
    SumResult,
)

# Errors
from rolldice.dice.exceptions import (
    DiceError,
    DiceParseError,
    EntropySourceError,
    MalformedSeparatorError,
    NonNumericTokenError,
    NonPositiveValueError,
)

# Random source
from rolldice.dice.source import DieRoller, roll_die

# Segmenter & parser
from rolldice.dice.segmenter import classify, split_segments
from rolldice.dice.parser import DiceGroupBuilder, parse_groups, parse_positive_int

# Aggregator
from rolldice.dice.aggregator import roll_group, roll_groups


def roll_expression(
    expression: str | Iterable[str],
    roller: DieRoller | None = None,
    max_explosions: int | None = None,
) -> SumResult:
    """Parse an expression and roll it.

    Convenience function combining parse_groups and roll_groups.

    Args:
        expression: A string like "3d6+2 1w10", or raw argument tokens.
        roller: Die source override.
        max_explosions: Explosion safety limit override.

    Raises:
        DiceParseError: If the expression is invalid.
    """
    groups = parse_groups(expression)
    return roll_groups(groups, roller=roller, max_explosions=max_explosions)


__all__ = [
    # Types
    "DiceGroup",
    "GroupOutcome",
    "Segment",
    "Separator",
    "SumResult",
    # Errors
    "DiceError",
    "DiceParseError",
    "EntropySourceError",
    "MalformedSeparatorError",
    "NonNumericTokenError",
    "NonPositiveValueError",
    # Random source
    "DieRoller",
    "roll_die",
    # Parsing
    "classify",
    "split_segments",
    "DiceGroupBuilder",
    "parse_groups",
    "parse_positive_int",
    # Rolling
    "roll_group",
    "roll_groups",
    "roll_expression",
]
