"""Pytest fixtures for Race to 21 tests."""

import pytest
from collections import defaultdict
from random import Random
from typing import Sequence

from core.cards import Card, Deck
from core.game.events import EventEmitter
from core.game.table import CardTable
from core.player import Player


class ScriptedCardTable(CardTable):
    """
    Card table that replays scripted answers and records every call.

    Draw decisions and continue answers are queued per player name. When a
    player's queue runs dry they stay / leave.
    """

    __test__ = False

    def __init__(
        self,
        names: Sequence[str] = (),
        player_count: int | Sequence[int] | None = None,
        draws: dict[str, list[bool]] | None = None,
        keep_playing: dict[str, list[bool]] | None = None,
        restarts: Sequence[bool] = (),
    ) -> None:
        self.names = list(names)
        if player_count is None:
            self.player_counts = [len(self.names)]
        elif isinstance(player_count, int):
            self.player_counts = [player_count]
        else:
            # One count per table collected, for restarted sessions
            self.player_counts = list(player_count)
        self.draws = defaultdict(list, {k: list(v) for k, v in (draws or {}).items()})
        self.keep_playing = defaultdict(
            list, {k: list(v) for k, v in (keep_playing or {}).items()}
        )
        self.restarts = list(restarts)
        self.calls: list[tuple] = []

    def get_number_of_players(self) -> int:
        self.calls.append(("get_number_of_players",))
        if len(self.player_counts) > 1:
            return self.player_counts.pop(0)
        return self.player_counts[0]

    def get_player_name(self, ordinal: int) -> str:
        self.calls.append(("get_player_name", ordinal))
        return self.names.pop(0)

    def show_players(self, players: Sequence[Player]) -> None:
        self.calls.append(("show_players", tuple(p.name for p in players)))

    def offer_card(self, player: Player) -> bool:
        self.calls.append(("offer_card", player.name))
        queue = self.draws[player.name]
        return queue.pop(0) if queue else False

    def show_hand(self, player: Player) -> None:
        self.calls.append(("show_hand", player.name, player.score, player.status))

    def announce_winner(self, player: Player | None) -> None:
        self.calls.append(("announce_winner", player.name if player else None))

    def ask_continue(self, player: Player) -> bool:
        self.calls.append(("ask_continue", player.name))
        queue = self.keep_playing[player.name]
        return queue.pop(0) if queue else False

    def ask_restart(self) -> bool:
        self.calls.append(("ask_restart",))
        return self.restarts.pop(0) if self.restarts else False

    def calls_named(self, method: str) -> list[tuple]:
        """Return recorded calls of one method, in order."""
        return [c for c in self.calls if c[0] == method]

    @property
    def offers(self) -> list[str]:
        """Names of players offered a card, in order."""
        return [c[1] for c in self.calls_named("offer_card")]

    @property
    def announced(self) -> list[str | None]:
        """Announced winners, in order."""
        return [c[1] for c in self.calls_named("announce_winner")]


def stacked_deck(*tokens: str) -> Deck:
    """A deck that deals the given cards in order, e.g. stacked_deck('KH', '10S')."""
    return Deck.from_cards((Card.from_string(t) for t in tokens), rng=Random(7))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def make_table():
    """Factory for scripted card tables."""
    return ScriptedCardTable


@pytest.fixture
def make_deck():
    """Factory for stacked decks."""
    return stacked_deck


@pytest.fixture
def alice_and_bob():
    """A two-player roster in seating order."""
    return [Player("Alice"), Player("Bob")]
