"""Random die source.

Draws from the operating system's secure random generator so long
explosion chains stay fair.
"""

import logging
import random
from typing import Callable

from rolldice.dice.exceptions import EntropySourceError

logger = logging.getLogger(__name__)

# Any callable mapping a side count to a value in [1, sides].
DieRoller = Callable[[int], int]

_system_random = random.SystemRandom()


def roll_die(sides: int) -> int:
    """Roll a single die.

    Args:
        sides: Number of faces, at least 1.

    Returns:
        A value in [1, sides], uniformly distributed.

    Raises:
        ValueError: If sides is not positive.
        EntropySourceError: If the secure random source fails.

    Examples:
        >>> 1 <= roll_die(20) <= 20
        True
    """
    if sides < 1:
        raise ValueError(f"Die must have at least 1 side, got {sides}")

    try:
        return _system_random.randint(1, sides)
    except (OSError, NotImplementedError) as e:
        logger.error("Secure random source failed rolling d%d: %s", sides, e)
        raise EntropySourceError(f"Secure random source failed: {e}") from e
