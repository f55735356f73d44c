"""Players and their per-round status."""

from dataclasses import dataclass, field
from enum import Enum, auto

from core.cards import Card
from core.hand import Hand


class PlayerStatus(Enum):
    """Where a player stands in the current round."""

    ACTIVE = auto()
    STAY = auto()
    BUST = auto()
    WIN = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(eq=False)
class Player:
    """
    A player in the session.

    The name persists across rounds; the hand and status are reset at the
    start of every new round. Players compare by identity so they can be
    collected in sets.
    """

    name: str
    hand: Hand = field(default_factory=Hand)
    status: PlayerStatus = PlayerStatus.ACTIVE

    @property
    def cards(self) -> list[Card]:
        """Cards currently held."""
        return self.hand.cards

    @property
    def score(self) -> int:
        """Score derived from the held cards."""
        return self.hand.value

    @property
    def is_active(self) -> bool:
        """Check if the player may still draw this round."""
        return self.status == PlayerStatus.ACTIVE

    def take_card(self, card: Card) -> None:
        """Add a dealt card to the player's hand."""
        self.hand.add_card(card)

    def reset_for_round(self) -> None:
        """Empty the hand and make the player active again."""
        self.hand.clear()
        self.status = PlayerStatus.ACTIVE

    def __str__(self) -> str:
        return f"{self.name}: {self.hand} ({self.status})"

    def __repr__(self) -> str:
        return f"Player({self.name!r}, status={self.status.name}, score={self.score})"
