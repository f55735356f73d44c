"""Session controller: what happens between rounds."""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random

from core.cards import Deck
from core.game.events import EventEmitter, EventType
from core.game.round import RoundEngine, RoundOutcome
from core.game.table import CardTable
from core.player import Player
from core.shuffling import next_seed, permuted

logger = logging.getLogger(__name__)


class Continuation(Enum):
    """What the session does after a round."""

    NEXT_ROUND = auto()
    RESTART = auto()
    END = auto()


@dataclass
class SessionSummary:
    """Record of a finished session."""

    rounds_played: int = 0
    restarts: int = 0
    outcomes: list[RoundOutcome] = field(default_factory=list)

    @property
    def last_outcome(self) -> RoundOutcome | None:
        """Outcome of the final round, if any round was played."""
        return self.outcomes[-1] if self.outcomes else None


class SessionController:
    """
    Runs rounds back to back until the players stop.

    After each round every player is asked whether to continue. Players who
    decline leave; with two or more left the deck is reshuffled, hands are
    cleared and the seating order is shuffled before the next round.
    """

    def __init__(
        self,
        table: CardTable,
        deck: Deck | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
        show_deck: bool = False,
    ) -> None:
        """
        Initialize a session.

        Args:
            table: Interaction boundary shared with every round
            deck: Card supply; a deck sharing ``rng`` is created if omitted
            rng: Random source for shuffles and seating order
            events: Event emitter to publish to
            show_deck: Log the full deck order at debug level after each shuffle
        """
        self.table = table
        self.rng = rng or Random()
        self.deck = deck or Deck(rng=self.rng)
        self.events = events or EventEmitter()
        self.show_deck = show_deck

        self.players: list[Player] = []
        self.last_outcome: RoundOutcome | None = None
        self.summary = SessionSummary()

    @property
    def rounds_played(self) -> int:
        """Number of rounds finished so far."""
        return self.summary.rounds_played

    def run(self) -> SessionSummary:
        """Play rounds until the session ends and return a summary."""
        self.events.emit_new(EventType.SESSION_STARTED)
        self._shuffle_deck()

        while True:
            outcome = self.play_round()
            decision = self.resolve_continuation(outcome)
            if decision == Continuation.END:
                break
            if decision == Continuation.RESTART:
                self._restart()

        self.events.emit_new(EventType.SESSION_ENDED, rounds_played=self.rounds_played)
        logger.info("Session ended after %d rounds", self.rounds_played)
        return self.summary

    def play_round(self) -> RoundOutcome:
        """Run one round with the current roster (collecting one if empty)."""
        engine = RoundEngine(
            table=self.table,
            deck=self.deck,
            players=self.players,
            events=self.events,
            round_number=self.rounds_played + 1,
        )
        outcome = engine.play()
        self.players = engine.players
        self.last_outcome = outcome
        self.summary.rounds_played += 1
        self.summary.outcomes.append(outcome)
        return outcome

    def resolve_continuation(self, outcome: RoundOutcome) -> Continuation:
        """
        Decide what happens after a round.

        Every player is asked to continue, winner and busted players alike.
        Leavers are gathered first and the roster is rebuilt afterwards.

        Args:
            outcome: Outcome of the round just played

        Returns:
            NEXT_ROUND with the roster ready to play, RESTART when a lone
            survivor asked for a new table, or END
        """
        self.last_outcome = outcome

        leaving = {p for p in self.players if not self.table.ask_continue(p)}
        survivors = [p for p in self.players if p not in leaving]

        for player in self.players:
            if player in leaving:
                self.events.emit_new(EventType.PLAYER_LEFT, player=player.name)
                logger.info("%s left the table", player.name)
        self.players = survivors

        if not survivors:
            logger.info("Nobody wants to continue")
            return Continuation.END

        if len(survivors) == 1:
            last = survivors[0]
            logger.info("%s is the only player left and wins by default", last.name)
            self.events.emit_new(EventType.PLAYER_WINS, player=last.name, reason="DEFAULT")
            self.table.announce_winner(last)
            if self.table.ask_restart():
                return Continuation.RESTART
            return Continuation.END

        self._prepare_next_round(survivors)
        return Continuation.NEXT_ROUND

    def _prepare_next_round(self, survivors: list[Player]) -> None:
        self._shuffle_deck()
        for player in survivors:
            player.reset_for_round()

        self.players = permuted(survivors, next_seed(self.rng))
        self.events.emit_new(
            EventType.PLAYERS_REORDERED,
            players=[p.name for p in self.players],
        )
        logger.info("Next round seating: %s", ", ".join(p.name for p in self.players))

    def _restart(self) -> None:
        """Drop the roster so the next round collects a new one."""
        self.players = []
        self.summary.restarts += 1
        self._shuffle_deck()
        self.events.emit_new(EventType.SESSION_RESTARTED)
        logger.info("Starting over with a new table")

    def _shuffle_deck(self) -> None:
        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=self.deck.count())
        if self.show_deck:
            logger.debug("Deck order: %s", ", ".join(self.deck.describe()))
