"""Board engine for the tile-swap puzzle.

The Board owns a fixed-size grid of pieces, validates swaps and resolves the
match -> clear -> refill cascade until no run remains, publishing MatchEvent
and RefillEvent objects to its listeners as it goes.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, List, Optional, Protocol, Tuple, TypeVar

from tileswap.components.cell import Cell, Grid
from tileswap.components.match import Match
from tileswap.components.position import Position, try_position
from tileswap.components.rules import BoardRules
from tileswap.events.bus import BOARD_EVENTS, EventBus
from tileswap.events.types import BoardEvent, MatchEvent, RefillEvent
from tileswap.systems.board_ops import clear_with_cascade
from tileswap.systems.match import find_all_matches, find_valid_swaps, is_legal_swap, swap_cells

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PieceGenerator(Protocol[T_co]):
    def next(self) -> T_co: ...


BoardListener = Callable[[BoardEvent], object]


class Board(Generic[T]):
    def __init__(
        self,
        generator: PieceGenerator[T],
        width: int,
        height: int,
        *,
        rules: BoardRules | None = None,
        event_bus: EventBus | None = None,
    ):
        self.generator = generator
        self._width = max(width, 0)
        self._height = max(height, 0)
        self.rules = rules or BoardRules()
        self.event_bus = event_bus or EventBus()
        self._listeners: List[BoardListener] = []
        self._pending: List[Match] = []
        self._grid: Grid = [
            [Cell(piece=generator.next()) for _ in range(self._width)]
            for _ in range(self._height)
        ]
        passes = self._resolve()
        _LOGGER.debug("Board %dx%d settled after %d resolution passes", self._width, self._height, passes)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def add_listener(self, listener: BoardListener) -> None:
        """Register listener to receive this board's events, after previously added listeners.

        Registering a listener that is already registered does nothing. Listeners
        only hear this board, even when the event bus is shared with other boards.
        """
        if listener in self._listeners:
            return
        self._listeners.append(listener)

        def receiver(sender, event):
            listener(event)

        for name in BOARD_EVENTS:
            self.event_bus.subscribe(name, receiver, sender=self)

    def positions(self) -> List[Position]:
        return [Position(r, c) for r in range(self._height) for c in range(self._width)]

    def in_bounds(self, p) -> bool:
        pos = try_position(p)
        if pos is None:
            return False
        return 0 <= pos.row < self._height and 0 <= pos.col < self._width

    def piece(self, p) -> Optional[T]:
        """Return the piece at p, or None when p lies outside the board or is not a (row, col) pair."""
        pos = try_position(p)
        if pos is None or not self.in_bounds(pos):
            return None
        cell = self._grid[pos.row][pos.col]
        return cell.piece if cell.active else None

    def rows(self) -> Tuple[Tuple[T, ...], ...]:
        return tuple(tuple(cell.piece for cell in row) for row in self._grid)

    def can_move(self, first, second) -> bool:
        src, dst = try_position(first), try_position(second)
        if src is None or dst is None:
            return False
        return is_legal_swap(
            self._grid,
            src,
            dst,
            same=self.rules.same,
            adjacent_only=self.rules.adjacent_only,
        )

    def move(self, first, second) -> bool:
        """Swap first and second and resolve the board, if the swap is legal.

        Returns False and leaves the board untouched otherwise. A legal move
        returns True even when rules.max_passes stopped the cascade early; in
        that case runs remain on the board, so check is_stable().
        """
        src, dst = try_position(first), try_position(second)
        if src is None or dst is None or not self.can_move(src, dst):
            _LOGGER.debug("Rejected move %s -> %s", src, dst)
            return False
        swap_cells(self._grid, src, dst)
        passes = self._resolve()
        _LOGGER.debug("Move %s -> %s resolved in %d passes", src, dst, passes)
        return True

    def find_matches(self) -> List[Match]:
        """Runs currently on the board, in detection order. Does not fire events."""
        return find_all_matches(self._grid, same=self.rules.same)

    def is_stable(self) -> bool:
        return not self.find_matches()

    def valid_moves(self) -> List[Tuple[Position, Position]]:
        return find_valid_swaps(self._grid, same=self.rules.same, adjacent_only=self.rules.adjacent_only)

    def has_valid_moves(self) -> bool:
        return bool(self.valid_moves())

    def _fire(self, event: BoardEvent) -> None:
        self.event_bus.emit(event.kind, sender=self, event=event)

    def _detect(self) -> List[Match]:
        matches = self.find_matches()
        for match in matches:
            self._pending.append(match)
            self._fire(MatchEvent(match=match))
        return matches

    def _refill(self) -> None:
        pending, self._pending = self._pending, []
        _, _, spawned = clear_with_cascade(self._grid, pending, self.generator.next)
        if spawned:
            self._fire(RefillEvent(positions=tuple(spawned)))

    def _resolve(self) -> int:
        """Run detect/clear/refill passes until a pass finds nothing; return the number of passes with matches.

        When rules.max_passes is reached first the loop stops and the board may
        still hold runs; a warning is logged and is_stable() reports False.
        """
        self._pending = []
        limit = self.rules.max_passes
        passes = 0
        while True:
            matches = self._detect()
            self._refill()
            if not matches:
                return passes
            passes += 1
            _LOGGER.debug("Resolution pass %d cleared %d runs", passes, len(matches))
            if limit is not None and passes >= limit:
                if self.find_matches():
                    _LOGGER.warning("Resolution stopped after %d passes with runs still on the board", passes)
                return passes
