from tileswap.board import Board, BoardListener, PieceGenerator
from tileswap.components.match import Match
from tileswap.components.position import Position
from tileswap.components.rules import BoardRules
from tileswap.events.bus import EVENT_MATCH_FOUND, EVENT_REFILL_COMPLETED, EventBus
from tileswap.events.types import BoardEvent, MatchEvent, RefillEvent

__all__ = [
    "Board",
    "BoardEvent",
    "BoardListener",
    "BoardRules",
    "EVENT_MATCH_FOUND",
    "EVENT_REFILL_COMPLETED",
    "EventBus",
    "Match",
    "MatchEvent",
    "PieceGenerator",
    "Position",
    "RefillEvent",
]
