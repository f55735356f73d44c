"""Console card table: prompts and displays for a terminal game."""

from typing import Callable, Sequence

from core.constants import TARGET_SCORE
from core.exceptions import AmbiguousAnswer, InvalidPlayerCount
from core.game.table import CardTable
from core.player import Player, PlayerStatus

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})


def parse_player_count(raw: str, max_players: int) -> int:
    """
    Parse a player count typed at the prompt.

    Args:
        raw: Text the user entered
        max_players: Largest count the table accepts

    Returns:
        The player count

    Raises:
        InvalidPlayerCount: If the text is not a whole number from 1 to max_players
    """
    try:
        count = int(raw.strip())
    except ValueError:
        raise InvalidPlayerCount(raw, max_players) from None
    if not 1 <= count <= max_players:
        raise InvalidPlayerCount(count, max_players)
    return count


def parse_yes_no(raw: str) -> bool:
    """Parse a yes/no answer, raising AmbiguousAnswer for anything else."""
    answer = raw.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise AmbiguousAnswer(raw)


class ConsoleCardTable(CardTable):
    """
    Card table that talks to people through a terminal.

    Every question re-prompts until the answer is valid, so the engine only
    ever sees resolved values. Input and output functions can be swapped out
    for testing.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
        max_players: int = 8,
    ) -> None:
        self._input = input_func or input
        self._output = output_func or print
        self.max_players = max_players

    def _ask_yes_no(self, prompt: str) -> bool:
        while True:
            try:
                return parse_yes_no(self._input(prompt))
            except AmbiguousAnswer:
                self._output("Please answer Y or N.")

    def get_number_of_players(self) -> int:
        while True:
            raw = self._input(f"How many players? (1-{self.max_players}) ")
            try:
                return parse_player_count(raw, self.max_players)
            except InvalidPlayerCount as exc:
                self._output(str(exc))

    def get_player_name(self, ordinal: int) -> str:
        while True:
            name = self._input(f"What is the name of player# {ordinal}? ").strip()
            if name:
                return name
            self._output("Names cannot be blank.")

    def show_players(self, players: Sequence[Player]) -> None:
        self._output("================================")
        for seat, player in enumerate(players, start=1):
            self._output(f"Player {seat}: {player.name}")

    def offer_card(self, player: Player) -> bool:
        return self._ask_yes_no(f"{player.name}, do you want a card? (Y/N) ")

    def show_hand(self, player: Player) -> None:
        if not player.cards:
            self._output(f"{player.name} has no cards ({player.status})")
            return
        cards = ", ".join(card.display_name for card in player.cards)
        line = f"{player.name} has: {cards} = {player.score}/{TARGET_SCORE}"
        if player.status != PlayerStatus.ACTIVE:
            line += f" ({player.status})"
        self._output(line)

    def announce_winner(self, player: Player | None) -> None:
        if player is None:
            self._output("Nobody wins this round.")
        else:
            self._output(f"{player.name} wins!")

    def ask_continue(self, player: Player) -> bool:
        return self._ask_yes_no(f"{player.name}, do you want to keep playing? (Y/N) ")

    def ask_restart(self) -> bool:
        return self._ask_yes_no("Start a new game with new players? (Y/N) ")
