"""Hand scoring for Race to 21."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card
from core.constants import TARGET_SCORE


def score_cards(cards: Iterable[Card]) -> int:
    """Sum the point values of a collection of cards."""
    return sum(card.points for card in cards)


@dataclass
class Hand:
    """The cards a player holds during a round."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """
        Calculate the hand score.

        Always derived from the held cards, so it can never drift out of sync
        with the hand.
        """
        return score_cards(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has gone over the target."""
        return self.value > TARGET_SCORE

    @property
    def is_target(self) -> bool:
        """Check if the hand scores exactly the target."""
        return self.value == TARGET_SCORE

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        if not self.cards:
            return "(no cards)"
        cards_str = ", ".join(card.id for card in self.cards)
        return f"{cards_str} = {self.value}/{TARGET_SCORE}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
