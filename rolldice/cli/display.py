"""Rich display helpers for CLI output."""

from typing import Iterable

from rich.console import Console
from rich.text import Text

from rolldice.dice.types import GroupOutcome


# Shared console instances; soft wrap keeps long roll traces on one line
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def format_rolls(rolls: Iterable[int], separator: str = " ") -> str:
    """Format roll values as a bracketed list.

    Examples:
        >>> format_rolls([3, 1, 6])
        '[3 1 6]'
    """
    return "[" + separator.join(str(value) for value in rolls) + "]"


def display_error(message: str) -> None:
    """Display error message on standard error.

    Args:
        message: Error message. Printed verbatim, never as markup.
    """
    err_console.print(Text.assemble(("ERROR:", "bold red"), f" {message}"))


def display_single_roll(sides: int, value: int) -> None:
    """Display the result of a single fixed die, e.g. "d20 => 17"."""
    console.print(Text.assemble((f"d{sides}", "cyan"), f" => {value}"))


def display_fumble(lost: int) -> None:
    console.print(Text.assemble(("Fumble:", "bold red"), f" -{lost}"))


def display_explosion() -> None:
    console.print(Text("Blown up", style="bold yellow"))


def display_rolls(rolls: Iterable[int]) -> None:
    console.print(Text(f"Rolls:  {format_rolls(rolls)}"))


def display_description(outcome: GroupOutcome) -> None:
    """Display a group's notation next to its rolls, e.g. "3d6+2  => [4, 2, 5]"."""
    rolls = format_rolls(outcome.rolls, separator=", ")
    console.print(Text.assemble((outcome.group.notation, "cyan"), f"\t=> {rolls}"))


def display_outcome(outcome: GroupOutcome, describe: bool = False) -> None:
    """Display one group's trace.

    Fumble notice first, then one notice per explosion die, then the rolls.

    Args:
        outcome: The rolled group.
        describe: Also print the group's notation with its rolls.
    """
    if outcome.is_fumble:
        display_fumble(outcome.fumble_lost)
    for _ in range(outcome.explosions):
        display_explosion()
    if describe:
        display_description(outcome)
    display_rolls(outcome.rolls)


def display_total(total: int) -> None:
    console.print(Text(str(total), style="bold"))
