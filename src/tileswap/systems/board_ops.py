from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Tuple

from tileswap.components.cell import Grid
from tileswap.components.match import Match
from tileswap.components.position import Position
from tileswap.systems.match import grid_dimensions


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    piece: Any


def clear_matched_cells(grid: Grid, matches: Iterable[Match]) -> List[Position]:
    """Empty every cell referenced by matches and return the cleared positions.

    Runs may share cells; each cell is cleared (and reported) once.
    """
    cleared: List[Position] = []
    for match in matches:
        for pos in match.positions:
            cell = grid[pos.row][pos.col]
            if not cell.active:
                continue
            cell.clear()
            cleared.append(pos)
    return cleared


def compute_gravity_moves(grid: Grid) -> List[GravityMove]:
    """Plan the fall of every surviving piece toward the bottom row.

    Columns are handled independently, bottom-up: each empty slot takes the
    nearest occupied cell above it, so survivors keep their relative order.
    """
    rows, cols = grid_dimensions(grid)
    moves: List[GravityMove] = []
    for col in range(cols):
        target = rows - 1
        for row in range(rows - 1, -1, -1):
            cell = grid[row][col]
            if not cell.active:
                continue
            if row != target:
                moves.append(GravityMove(source=Position(row, col), target=Position(target, col), piece=cell.piece))
            target -= 1
    return moves


def apply_gravity_moves(grid: Grid, moves: Iterable[GravityMove]) -> None:
    # Moves are ordered bottom-up per column, so a target is always vacated before it is filled.
    for move in moves:
        src = grid[move.source.row][move.source.col]
        dst = grid[move.target.row][move.target.col]
        dst.put(src.piece)
        src.clear()


def refill_inactive_cells(grid: Grid, spawn: Callable[[], Any]) -> List[Position]:
    """Fill every empty cell with spawn(), top row first, left to right."""
    spawned: List[Position] = []
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell.active:
                continue
            cell.put(spawn())
            spawned.append(Position(row_index, col_index))
    return spawned


def clear_with_cascade(
    grid: Grid, matches: Iterable[Match], spawn: Callable[[], Any]
) -> Tuple[List[Position], List[GravityMove], List[Position]]:
    """Clear matched cells, apply gravity and refill; return the board change metadata."""
    cleared = clear_matched_cells(grid, matches)
    moves = compute_gravity_moves(grid)
    apply_gravity_moves(grid, moves)
    spawned = refill_inactive_cells(grid, spawn)
    return cleared, moves, spawned
