from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from tileswap.components.match import Match
from tileswap.components.position import Position
from tileswap.events.bus import EVENT_MATCH_FOUND, EVENT_REFILL_COMPLETED


@dataclass(frozen=True, slots=True)
class MatchEvent:
    kind: ClassVar[str] = EVENT_MATCH_FOUND
    match: Match


@dataclass(frozen=True, slots=True)
class RefillEvent:
    """Fired once per refill step that generated at least one piece.

    positions lists the generator-filled cells in fill order (top row first).
    """
    kind: ClassVar[str] = EVENT_REFILL_COMPLETED
    positions: Tuple[Position, ...]


BoardEvent = Union[MatchEvent, RefillEvent]
