"""Abstract card table: the only channel between the game and its players."""

from abc import ABC, abstractmethod
from typing import Sequence

from core.player import Player


class CardTable(ABC):
    """
    Interaction boundary for a Race to 21 session.

    The engine never reads input or prints; it asks the table. Implementations
    must validate their own input and only ever hand back resolved values: a
    positive player count, a name, or a plain bool for yes/no questions.
    """

    @abstractmethod
    def get_number_of_players(self) -> int:
        """Ask how many players are joining. Must return a positive integer."""
        ...

    @abstractmethod
    def get_player_name(self, ordinal: int) -> str:
        """
        Ask for a player's name.

        Args:
            ordinal: 1-based position of the player, for display only
        """
        ...

    @abstractmethod
    def show_players(self, players: Sequence[Player]) -> None:
        """Display the roster at the start of a round."""
        ...

    @abstractmethod
    def offer_card(self, player: Player) -> bool:
        """Offer the player a card. True means draw, False means stay."""
        ...

    @abstractmethod
    def show_hand(self, player: Player) -> None:
        """Display a player's cards, score and status."""
        ...

    @abstractmethod
    def announce_winner(self, player: Player | None) -> None:
        """Announce the round winner, or that nobody won."""
        ...

    @abstractmethod
    def ask_continue(self, player: Player) -> bool:
        """Ask a player whether they want to play another round."""
        ...

    @abstractmethod
    def ask_restart(self) -> bool:
        """Ask whether to start over with a new table of players."""
        ...
