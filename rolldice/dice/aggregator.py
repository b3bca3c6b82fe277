"""Roll aggregation with wild-die rules.

A wild group whose last die shows 1 is a fumble: the highest value in
the group is deducted from the total. A wild group whose last die shows
the maximum face explodes: another die is rolled and appended, and the
new die can explode again.
"""

import logging
from typing import Iterable

from rolldice.config import get_settings
from rolldice.dice import source
from rolldice.dice.source import DieRoller
from rolldice.dice.types import DiceGroup, GroupOutcome, SumResult

logger = logging.getLogger(__name__)


def _explode(
    rolls: list[int],
    sides: int,
    roller: DieRoller,
    max_explosions: int,
) -> tuple[int, bool]:
    """Append explosion dice while the last die shows the maximum face.

    Returns:
        Number of dice appended, and whether the safety limit stopped the chain.
    """
    explosions = 0
    while rolls[-1] == sides:
        if explosions >= max_explosions:
            logger.warning(
                "Explosion chain on d%d stopped after %d dice", sides, explosions
            )
            return explosions, True
        rolls.append(roller(sides))
        explosions += 1
        logger.debug("Blown up: d%d rolled %d", sides, rolls[-1])
    return explosions, False


def roll_group(
    group: DiceGroup,
    roller: DieRoller | None = None,
    max_explosions: int | None = None,
) -> GroupOutcome:
    """Roll a single DiceGroup.

    Args:
        group: The group to roll.
        roller: Die source, called once per die with the side count.
            Defaults to the secure source.
        max_explosions: Most explosion dice to append before giving up.
            Defaults to the configured value.

    Returns:
        GroupOutcome with the roll trace and any fumble deduction.
    """
    if group.is_bonus_only:
        return GroupOutcome(group=group)

    if roller is None:
        roller = source.roll_die
    if max_explosions is None:
        max_explosions = get_settings().max_explosions

    rolls = [roller(group.sides) for _ in range(group.count)]

    if not group.wild:
        return GroupOutcome(group=group, rolls=tuple(rolls))

    # Fumble looks at the rolls before any explosion
    fumble_lost = None
    if rolls[-1] == 1:
        fumble_lost = max(rolls)
        logger.debug("Fumble on %s: -%d", group.notation, fumble_lost)

    explosions, capped = _explode(rolls, group.sides, roller, max_explosions)

    return GroupOutcome(
        group=group,
        rolls=tuple(rolls),
        fumble_lost=fumble_lost,
        explosions=explosions,
        capped=capped,
    )


def roll_groups(
    groups: Iterable[DiceGroup],
    roller: DieRoller | None = None,
    max_explosions: int | None = None,
) -> SumResult:
    """Roll every group in order and total the results.

    Args:
        groups: Parsed groups, in input order.
        roller: Die source override. Defaults to the secure source.
        max_explosions: Explosion safety limit. Defaults to the configured value.

    Returns:
        SumResult with per-group outcomes and the grand total.

    Raises:
        EntropySourceError: If the secure random source fails.

    Examples:
        >>> result = roll_groups([DiceGroup.dice(2, 8)])
        >>> 2 <= result.total <= 16
        True
    """
    outcomes = tuple(roll_group(group, roller, max_explosions) for group in groups)
    return SumResult(outcomes=outcomes)
