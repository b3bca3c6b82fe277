"""Dice engine exception definitions.

Custom exception hierarchy for parsing and rolling. The engine raises
these; only the command-line layer turns them into an exit status.
"""


class DiceError(Exception):
    """Base exception for dice operations.

    Attributes:
        token: The offending input, if any.
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class DiceParseError(DiceError, ValueError):
    """Error parsing dice notation."""

    pass


class MalformedSeparatorError(DiceParseError):
    """A die-group segment has zero or several separators."""

    def __init__(self, segment: str) -> None:
        super().__init__(f'Could not determine desired dice from "{segment}"', token=segment)


class NonNumericTokenError(DiceParseError):
    """A part expected to be an integer is not one."""

    def __init__(self, text: str) -> None:
        super().__init__(f'Could not read number from "{text}"', token=text)


class NonPositiveValueError(DiceParseError):
    """A parsed integer is zero or negative.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: int, token: str | None = None) -> None:
        super().__init__(
            f'Cannot operate against non-positive values like "{value}"',
            token=token if token is not None else str(value),
        )
        self.value = value


class EntropySourceError(DiceError):
    """The secure random source could not produce a value."""

    def __init__(self, message: str = "Secure random source unavailable") -> None:
        super().__init__(message)
