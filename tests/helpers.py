from __future__ import annotations

import itertools
import random
from typing import Any, Iterable, Sequence

from tileswap.board import Board
from tileswap.components.cell import Cell, Grid


class ConstantGenerator:
    def __init__(self, piece: Any):
        self.piece = piece
        self.calls = 0

    def next(self):
        self.calls += 1
        return self.piece


class CycleGenerator:
    def __init__(self, pieces: Iterable[Any]):
        self._pieces = itertools.cycle(list(pieces))

    def next(self):
        return next(self._pieces)


class SequenceGenerator:
    """Yield pieces in order, then defer to the fallback generator."""

    def __init__(self, pieces: Iterable[Any], fallback):
        self._pieces = iter(list(pieces))
        self.fallback = fallback

    def next(self):
        for piece in self._pieces:
            return piece
        return self.fallback.next()


class RandomGenerator:
    def __init__(self, types: Sequence[Any], seed: int = 1234):
        self.types = list(types)
        self.rng = random.Random(seed)

    def next(self):
        return self.rng.choice(self.types)


def board_from_rows(rows: Sequence[str], fallback, **kwargs) -> Board:
    """Build a board whose initial fill is rows (one character per piece), refilled by fallback."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    pieces = [piece for row in rows for piece in row]
    return Board(SequenceGenerator(pieces, fallback), width, height, **kwargs)


def grid_from_rows(rows: Sequence[str]) -> Grid:
    """Build a raw grid; '.' marks an empty cell."""
    return [
        [Cell(active=False) if ch == '.' else Cell(piece=ch) for ch in row]
        for row in rows
    ]


def grid_pieces(grid: Grid) -> list[str]:
    return [''.join(cell.piece if cell.active else '.' for cell in row) for row in grid]


def has_run(rows: Sequence[Sequence[Any]]) -> bool:
    """Independent scan for any horizontal or vertical run of three or more."""
    height = len(rows)
    width = len(rows[0]) if height else 0
    for r in range(height):
        run = 1
        for c in range(1, width):
            run = run + 1 if rows[r][c] == rows[r][c - 1] else 1
            if run >= 3:
                return True
    for c in range(width):
        run = 1
        for r in range(1, height):
            run = run + 1 if rows[r][c] == rows[r - 1][c] else 1
            if run >= 3:
                return True
    return False
