"""Race to 21 game core - no input or output of its own."""

from core.cards import Card, Deck, Rank, Suit
from core.exceptions import AmbiguousAnswer, InvalidPlayerCount, RaceTo21Error, SupplyExhausted
from core.hand import Hand, score_cards
from core.player import Player, PlayerStatus

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "score_cards",
    "Player",
    "PlayerStatus",
    "RaceTo21Error",
    "InvalidPlayerCount",
    "SupplyExhausted",
    "AmbiguousAnswer",
]
