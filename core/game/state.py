"""Round state enumeration."""

from enum import Enum, auto


class RoundTask(Enum):
    """
    Round state machine states.

    Flow: COLLECT_PLAYER_COUNT → COLLECT_NAMES → INTRODUCE_PLAYERS →
    PLAYER_TURN ⇄ CHECK_ROUND_END → ROUND_OVER
    """

    # New session: ask how many players
    COLLECT_PLAYER_COUNT = auto()

    # New session: ask each player's name
    COLLECT_NAMES = auto()

    # Show the roster, start the round
    INTRODUCE_PLAYERS = auto()

    # Current player draws or stays
    PLAYER_TURN = auto()

    # Decide whether the round is finished
    CHECK_ROUND_END = auto()

    # Winner (or no winner) decided
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def machine_name(self) -> str:
        """State name as registered with the state machine."""
        return self.name.lower()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundTask, list[RoundTask]] = {
    RoundTask.COLLECT_PLAYER_COUNT: [RoundTask.COLLECT_NAMES],
    RoundTask.COLLECT_NAMES: [RoundTask.INTRODUCE_PLAYERS],
    RoundTask.INTRODUCE_PLAYERS: [RoundTask.PLAYER_TURN],
    RoundTask.PLAYER_TURN: [RoundTask.CHECK_ROUND_END, RoundTask.ROUND_OVER],  # ROUND_OVER on 21
    RoundTask.CHECK_ROUND_END: [RoundTask.PLAYER_TURN, RoundTask.ROUND_OVER],
    RoundTask.ROUND_OVER: [],  # Terminal state
}


def is_valid_transition(from_state: RoundTask, to_state: RoundTask) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])


def machine_transitions() -> list[dict[str, str]]:
    """Build the transitions table for the round state machine.

    One trigger per destination, named ``enter_<state>``, allowed only from the
    sources listed in VALID_TRANSITIONS.
    """
    sources: dict[RoundTask, list[str]] = {}
    for source, destinations in VALID_TRANSITIONS.items():
        for dest in destinations:
            sources.setdefault(dest, []).append(source.machine_name)
    return [
        {"trigger": f"enter_{dest.machine_name}", "source": srcs, "dest": dest.machine_name}
        for dest, srcs in sources.items()
    ]
