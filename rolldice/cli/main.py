"""Main CLI application for rolldice."""

import logging

import typer
from pydantic import ValidationError

from rolldice import __version__
from rolldice.cli.display import (
    display_error,
    display_outcome,
    display_single_roll,
    display_total,
)
from rolldice.config import describe_settings_error, get_settings
from rolldice.dice import DiceError, parse_groups, roll_die, roll_groups
from rolldice.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Side counts that get their own single-die command
STANDARD_DICE = (4, 6, 10, 12, 20, 100)

SUM_HELP = """Roll any combination of dice.

Specify a set of dice by the number of dice, followed by a 'd', followed by
the number of sides on that set of dice. Use a 'w' instead of the 'd' to make
it a wild set: a final 1 is a fumble that loses the highest die, and a final
maximum rolls again and adds on.

Separate sets with spaces or with '+'. A bare number is a bonus added to the
set before it, or rolled on its own if it comes first.

Arguments that start with a dash are passed through as dice, so "-3d6" is
reported as a non-positive count. Put "--" before the dice to stop option
parsing altogether.

\b
Examples:
  2d8         d8 + d8, range 2-16
  3d6 + 2     d6 + d6 + d6 + 2, range 5-20
  3d12 2d6 5  d12 + d12 + d12 + d6 + d6 + 5, range 10-53
  1w6         a single wild d6
"""

# Unknown dash-prefixed tokens reach the parser instead of failing as options
SUM_CONTEXT = {"ignore_unknown_options": True}

# Create main app
app = typer.Typer(
    name="rolldice",
    help="Roll dice from the command line",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rolldice {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Rolldice - roll standard dice or compound expressions.

    Use 'rolldice d20' for a single die, or 'rolldice sum 3d6+2 1w10' for more.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        display_error(describe_settings_error(e))
        raise typer.Exit(1)
    configure_logging("DEBUG" if verbose else settings.effective_log_level)


def _make_single_die_command(sides: int):
    def roll_single() -> None:
        try:
            value = roll_die(sides)
        except DiceError as e:
            display_error(str(e))
            raise typer.Exit(1)
        display_single_roll(sides, value)

    roll_single.__name__ = f"d{sides}"
    return roll_single


for _sides in STANDARD_DICE:
    app.command(
        name=f"d{_sides}",
        help=f"Roll a single {_sides}-sided die",
    )(_make_single_die_command(_sides))


@app.command("sum", help=SUM_HELP, context_settings=SUM_CONTEXT)
def sum_dice(
    expression: list[str] = typer.Argument(
        ..., help="Dice sets and bonuses, e.g. 3d6 + 2 1w10", show_default=False
    ),
    describe: bool = typer.Option(
        False, "--describe", help="Show each set's notation with its rolls"
    ),
) -> None:
    """Roll an arbitrary combination of dice."""
    # Parse everything before rolling anything
    try:
        groups = parse_groups(expression)
        result = roll_groups(groups)
    except DiceError as e:
        logger.debug("Rejected expression %r: %s", expression, e)
        display_error(str(e))
        raise typer.Exit(1)

    for outcome in result.outcomes:
        display_outcome(outcome, describe=describe)
    display_total(result.total)


# Aliases for sum, kept out of the command listing
for _alias in ("total", "complex", "add"):
    app.command(
        _alias, help=SUM_HELP, hidden=True, context_settings=SUM_CONTEXT
    )(sum_dice)


if __name__ == "__main__":
    app()
