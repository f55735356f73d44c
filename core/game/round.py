"""Race to 21 round engine with state machine."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Sequence

from transitions import Machine

from core.cards import Deck
from core.exceptions import InvalidPlayerCount, SupplyExhausted
from core.game.events import EventEmitter, EventType
from core.game.state import RoundTask, machine_transitions
from core.game.table import CardTable
from core.player import Player, PlayerStatus

logger = logging.getLogger(__name__)


class RoundEndReason(Enum):
    """How a round came to an end."""

    # A player drew to exactly 21
    HIT_TARGET = auto()

    # Everyone else busted
    LAST_STANDING = auto()

    # Nobody could act any more; highest stay score wins
    FINAL_SCORING = auto()

    # Every player stayed without anyone drawing a card
    NOBODY_DREW = auto()


@dataclass(frozen=True)
class RoundOutcome:
    """Result of a finished round. ``winner`` is None when nobody won."""

    winner: Player | None
    reason: RoundEndReason
    round_number: int = 1

    @property
    def has_winner(self) -> bool:
        """Check if the round produced a winner."""
        return self.winner is not None


def determine_winner(players: Sequence[Player]) -> Player | None:
    """
    Pick the winner of a round that ended without a shortcut.

    A player already marked as the winner wins outright. Otherwise the highest
    score among players who stayed wins, with ties going to whoever comes first
    in roster order. If no staying player scored anything, nobody wins.

    Args:
        players: Roster in turn order

    Returns:
        The winning player, or None
    """
    high_score = 0
    for player in players:
        if player.status == PlayerStatus.WIN:
            return player
        if player.status == PlayerStatus.STAY and player.score > high_score:
            high_score = player.score

    if high_score > 0:
        return next(
            p for p in players
            if p.status == PlayerStatus.STAY and p.score == high_score
        )
    return None


class RoundEngine:
    """
    Runs a single round of Race to 21.

    Each state has one handler which does its work and returns the next
    state. The transitions machine rejects any jump that the state table does
    not allow. The engine never decides whether another round follows; it
    hands its outcome back to the caller.
    """

    # State machine states
    STATES = [task.machine_name for task in RoundTask]

    # State machine transitions
    TRANSITIONS = machine_transitions()

    def __init__(
        self,
        table: CardTable,
        deck: Deck,
        players: list[Player] | None = None,
        events: EventEmitter | None = None,
        round_number: int = 1,
    ) -> None:
        """
        Initialize a round.

        Args:
            table: Interaction boundary used for every question and display
            deck: Card supply to deal from (shuffled by the caller)
            players: Existing roster; when empty the round starts by collecting
                a player count and names
            events: Event emitter to publish to
            round_number: 1-based round counter within the session
        """
        self.table = table
        self.deck = deck
        self.players: list[Player] = players if players is not None else []
        self.events = events or EventEmitter()
        self.round_number = round_number

        self.number_of_players = len(self.players)
        self.current_player_index = 0
        self.any_card_drawn = False
        self.outcome: RoundOutcome | None = None

        initial = RoundTask.INTRODUCE_PLAYERS if self.players else RoundTask.COLLECT_PLAYER_COUNT

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=initial.machine_name,
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self._handlers: dict[RoundTask, Callable[[], RoundTask]] = {
            RoundTask.COLLECT_PLAYER_COUNT: self._collect_player_count,
            RoundTask.COLLECT_NAMES: self._collect_names,
            RoundTask.INTRODUCE_PLAYERS: self._introduce_players,
            RoundTask.PLAYER_TURN: self._player_turn,
            RoundTask.CHECK_ROUND_END: self._check_round_end,
        }

    @property
    def task(self) -> RoundTask:
        """Get current round state as enum."""
        return RoundTask[self._machine_state.upper()]  # type: ignore

    @property
    def current_player(self) -> Player:
        """Player whose turn it is."""
        return self.players[self.current_player_index]

    @property
    def is_over(self) -> bool:
        """Check if the round has finished."""
        return self.task == RoundTask.ROUND_OVER

    def play(self) -> RoundOutcome:
        """Run the round to completion and return its outcome."""
        while not self.is_over:
            self.step()
        assert self.outcome is not None
        return self.outcome

    def step(self) -> RoundTask:
        """Run the handler for the current state and move to the next one."""
        current = self.task
        next_task = self._handlers[current]()
        logger.debug("Round %d: %s -> %s", self.round_number, current, next_task)
        self.trigger(f"enter_{next_task.machine_name}")  # type: ignore[attr-defined]
        return next_task

    def _collect_player_count(self) -> RoundTask:
        count = self.table.get_number_of_players()
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidPlayerCount(count)
        self.number_of_players = count
        return RoundTask.COLLECT_NAMES

    def _collect_names(self) -> RoundTask:
        for ordinal in range(1, self.number_of_players + 1):
            name = self.table.get_player_name(ordinal)
            self.players.append(Player(name))
            self.events.emit_new(EventType.PLAYER_JOINED, player=name, seat=ordinal)
        logger.info("Players joined: %s", ", ".join(p.name for p in self.players))
        return RoundTask.INTRODUCE_PLAYERS

    def _introduce_players(self) -> RoundTask:
        self.table.show_players(self.players)
        self.any_card_drawn = False
        self.current_player_index = 0
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round_number=self.round_number,
            players=[p.name for p in self.players],
        )
        logger.info("Round %d started with %d players", self.round_number, len(self.players))
        return RoundTask.PLAYER_TURN

    def _player_turn(self) -> RoundTask:
        player = self.current_player
        if player.is_active:
            if self.table.offer_card(player):
                try:
                    card = self.deck.deal_top()
                except SupplyExhausted:
                    self._stop_all_drawing(player)
                else:
                    player.take_card(card)
                    self.any_card_drawn = True
                    self.events.emit_new(
                        EventType.CARD_DEALT,
                        player=player.name,
                        card=card.id,
                        score=player.score,
                    )
                    logger.debug("%s drew %s (score %d)", player.name, card.id, player.score)

                    if player.hand.is_busted:
                        player.status = PlayerStatus.BUST
                        self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name, score=player.score)
                    elif player.hand.is_target:
                        player.status = PlayerStatus.WIN
                        self.events.emit_new(EventType.PLAYER_HITS_TARGET, player=player.name)
                        return self._finish(player, RoundEndReason.HIT_TARGET)
            else:
                player.status = PlayerStatus.STAY
                self.events.emit_new(EventType.PLAYER_STAYS, player=player.name, score=player.score)

        self.table.show_hand(player)
        return RoundTask.CHECK_ROUND_END

    def _stop_all_drawing(self, player: Player) -> None:
        """Deck ran out: nobody can draw again this round."""
        logger.warning(
            "Deck exhausted on %s's draw in round %d; remaining players stay",
            player.name,
            self.round_number,
        )
        self.events.emit_new(EventType.SUPPLY_EXHAUSTED, player=player.name)
        for p in self.players:
            if p.is_active:
                p.status = PlayerStatus.STAY

    def _check_round_end(self) -> RoundTask:
        anyone_active = any(p.is_active for p in self.players)

        if not self.any_card_drawn and not anyone_active:
            return self._finish(determine_winner(self._reveal_hands()), RoundEndReason.NOBODY_DREW)

        standing = [p for p in self.players if p.status != PlayerStatus.BUST]
        if len(standing) == 1:
            return self._finish(standing[0], RoundEndReason.LAST_STANDING)

        if not anyone_active:
            return self._finish(determine_winner(self._reveal_hands()), RoundEndReason.FINAL_SCORING)

        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        return RoundTask.PLAYER_TURN

    def _reveal_hands(self) -> list[Player]:
        for player in self.players:
            self.table.show_hand(player)
        return self.players

    def _finish(self, winner: Player | None, reason: RoundEndReason) -> RoundTask:
        if winner is not None:
            winner.status = PlayerStatus.WIN
            self.events.emit_new(
                EventType.PLAYER_WINS,
                player=winner.name,
                score=winner.score,
                reason=reason.name,
            )
            logger.info(
                "Round %d won by %s with %d (%s)",
                self.round_number,
                winner.name,
                winner.score,
                reason.name,
            )
        else:
            self.events.emit_new(EventType.NO_WINNER, reason=reason.name)
            logger.info("Round %d ended with no winner (%s)", self.round_number, reason.name)

        self.table.announce_winner(winner)
        self.outcome = RoundOutcome(winner=winner, reason=reason, round_number=self.round_number)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            round_number=self.round_number,
            winner=winner.name if winner else None,
            reason=reason.name,
        )
        return RoundTask.ROUND_OVER
