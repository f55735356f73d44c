"""Round engine, session controller and state management."""

from core.game.events import GameEvent, EventEmitter, EventType
from core.game.state import RoundTask
from core.game.table import CardTable
from core.game.round import RoundEngine, RoundEndReason, RoundOutcome, determine_winner
from core.game.session import Continuation, SessionController, SessionSummary

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundTask",
    "CardTable",
    "RoundEngine",
    "RoundEndReason",
    "RoundOutcome",
    "determine_winner",
    "Continuation",
    "SessionController",
    "SessionSummary",
]
