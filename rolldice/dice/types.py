"""Dice engine type definitions.

Immutable dataclasses for parsed dice groups and their roll outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum


class Separator(str, Enum):
    """Separator between dice count and die size in a segment.

    Declaration order is match priority: a segment containing a wild
    separator is a wild group even if it also contains a plain one.
    """

    WILD = "w"
    PLAIN = "d"


@dataclass(frozen=True)
class Segment:
    """A normalized, non-blank piece of user input.

    Attributes:
        text: Lower-cased segment text with whitespace stripped.
        separator: Matched separator, or None for a bonus token.
    """

    text: str
    separator: Separator | None = None

    @property
    def is_bonus(self) -> bool:
        """Check if this segment is a bare bonus number."""
        return self.separator is None


@dataclass(frozen=True)
class DiceGroup:
    """One clause of a compound roll, like 3d6+2, 1w10 or a bare 5.

    Either a rollable group (count > 0 and sides > 0) or a standalone
    bonus (count == 0, sides == 0, bonus > 0).

    Attributes:
        count: Number of dice to roll.
        sides: Faces per die.
        bonus: Fixed amount added after rolling.
        wild: Whether fumble and explosion rules apply.
    """

    count: int
    sides: int
    bonus: int = 0
    wild: bool = False

    def __post_init__(self) -> None:
        if self.count > 0 and self.sides > 0 and self.bonus >= 0:
            return
        if self.count == 0 and self.sides == 0 and self.bonus > 0 and not self.wild:
            return
        raise ValueError(
            f"Invalid dice group: count={self.count}, sides={self.sides}, "
            f"bonus={self.bonus}, wild={self.wild}"
        )

    @classmethod
    def dice(cls, count: int, sides: int, wild: bool = False) -> "DiceGroup":
        """Create a rollable group with no bonus."""
        return cls(count=count, sides=sides, wild=wild)

    @classmethod
    def bonus_only(cls, value: int) -> "DiceGroup":
        """Create a standalone bonus group."""
        return cls(count=0, sides=0, bonus=value)

    @property
    def is_bonus_only(self) -> bool:
        return self.count == 0

    @property
    def separator(self) -> Separator | None:
        if self.is_bonus_only:
            return None
        return Separator.WILD if self.wild else Separator.PLAIN

    @property
    def notation(self) -> str:
        """Canonical notation that parses back to an equal group.

        Examples:
            >>> DiceGroup(count=3, sides=6, bonus=2).notation
            '3d6+2'
            >>> DiceGroup.dice(2, 10, wild=True).notation
            '2w10'
            >>> DiceGroup.bonus_only(5).notation
            '5'
        """
        if self.is_bonus_only:
            return str(self.bonus)
        text = f"{self.count}{self.separator.value}{self.sides}"
        if self.bonus:
            text += f"+{self.bonus}"
        return text

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True)
class GroupOutcome:
    """Result of rolling one DiceGroup.

    Attributes:
        group: The group that was rolled.
        rolls: Every die value in roll order, explosion dice included.
        fumble_lost: Value deducted by a fumble, or None if no fumble.
        explosions: Number of dice appended by explosion.
        capped: True if the explosion chain was cut off by the safety limit.
    """

    group: DiceGroup
    rolls: tuple[int, ...] = field(default_factory=tuple)
    fumble_lost: int | None = None
    explosions: int = 0
    capped: bool = False

    @property
    def is_fumble(self) -> bool:
        return self.fumble_lost is not None

    @property
    def subtotal(self) -> int:
        """Contribution of this group to the overall total.

        Sum of all rolls plus the bonus, minus any fumble deduction.
        """
        lost = self.fumble_lost or 0
        return sum(self.rolls) + self.group.bonus - lost


@dataclass(frozen=True)
class SumResult:
    """Result of rolling a sequence of dice groups.

    Attributes:
        outcomes: Per-group outcomes, in input order.
    """

    outcomes: tuple[GroupOutcome, ...]

    @property
    def total(self) -> int:
        """Grand total; negative if fumbles outweigh the rolls."""
        return sum(outcome.subtotal for outcome in self.outcomes)

    @property
    def groups(self) -> tuple[DiceGroup, ...]:
        return tuple(outcome.group for outcome in self.outcomes)
