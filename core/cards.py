"""Card and Deck classes - immutable cards and the card supply they are dealt from."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from core.constants import ACE_VALUE, FACE_CARD_VALUE
from core.exceptions import SupplyExhausted


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def letter(self) -> str:
        """Return the single-letter suit code used in card ids."""
        return self.name[0]


class Rank(Enum):
    """Card ranks with Race to 21 point values."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def points(self) -> int:
        """Return the point value (Ace = 1, face cards = 10)."""
        if self == Rank.ACE:
            return ACE_VALUE
        if self.is_face:
            return FACE_CARD_VALUE
        return self.value

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def points(self) -> int:
        """Return the Race to 21 point value."""
        return self.rank.points

    @property
    def id(self) -> str:
        """Short token such as 'KH' or '10S'."""
        return f"{self.rank}{self.suit.letter}"

    @property
    def display_name(self) -> str:
        """Long name such as 'King of Hearts'."""
        return f"{self.rank.name.title()} of {self.suit.name.title()}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10D'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def standard_cards() -> list[Card]:
    """Return the 52 standard cards in suit-then-rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A standard 52-card deck dealt from the top.

    The top of the deck is the end of the internal list, so dealing is a pop.
    Iteration goes from the top card down.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck with all 52 cards in order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a deck stacked in a known order.

        Args:
            cards: Cards to stack; the first one is dealt first
            rng: Random number generator used by later shuffles

        Returns:
            A deck that deals the given cards in order
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = list(reversed(standard_cards()))

    def shuffle(self) -> None:
        """Restore all 52 cards and shuffle them."""
        self.reset()
        self._rng.shuffle(self._cards)

    def deal_top(self) -> Card:
        """Deal the top card of the deck."""
        if not self._cards:
            raise SupplyExhausted()
        return self._cards.pop()

    def peek(self) -> Card | None:
        """Return the top card without dealing it."""
        if not self._cards:
            return None
        return self._cards[-1]

    def count(self) -> int:
        """Return the number of cards left to deal."""
        return len(self._cards)

    def describe(self) -> list[str]:
        """Return the display names of the remaining cards, top first."""
        return [card.display_name for card in self]

    @property
    def is_empty(self) -> bool:
        """Check if no cards are left to deal."""
        return not self._cards

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return reversed(self._cards)
