"""Round orchestration and events."""

from blackjack.game.events import GameEvent, EventType, EventEmitter
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackGame

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameState",
    "BlackjackGame",
]
