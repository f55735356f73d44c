"""Race to 21 error types.

Every error here is recoverable: the console re-prompts on bad input and the
round engine turns an exhausted deck into an implicit stay.
"""


class RaceTo21Error(Exception):
    """Base class for all game errors."""


class InvalidPlayerCount(RaceTo21Error, ValueError):
    """Player count is not a positive integer within the table limit."""

    def __init__(self, value: object, max_players: int | None = None) -> None:
        self.value = value
        self.max_players = max_players
        if max_players is None:
            message = f"Invalid player count: {value!r} (must be at least 1)"
        else:
            message = f"Invalid player count: {value!r} (must be 1-{max_players})"
        super().__init__(message)


class SupplyExhausted(RaceTo21Error, IndexError):
    """A card was requested from an empty deck."""

    def __init__(self) -> None:
        super().__init__("Cannot deal from an empty deck")


class AmbiguousAnswer(RaceTo21Error, ValueError):
    """A yes/no prompt got something other than a yes or a no."""

    def __init__(self, answer: str) -> None:
        self.answer = answer
        super().__init__(f"Expected yes or no, got {answer!r}")
