"""Round engine and state management."""

from blackjack.round.events import EventEmitter, EventType, GameEvent
from blackjack.round.state import RoundState
from blackjack.round.table import Table

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "RoundState",
    "Table",
]
