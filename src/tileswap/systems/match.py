from __future__ import annotations

from typing import Any, Callable, List, Tuple
import operator

from tileswap.components.cell import Grid
from tileswap.components.match import Match
from tileswap.components.position import Position
from tileswap.constants import MATCH_LENGTH

Equality = Callable[[Any, Any], bool]

# Offsets from an anchor cell for the window to its right and the window below it.
_ROW_WINDOW = tuple((0, step) for step in range(MATCH_LENGTH))
_COL_WINDOW = tuple((step, 0) for step in range(MATCH_LENGTH))


def grid_dimensions(grid: Grid) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def _window_match(
    grid: Grid, row: int, col: int, offsets, same: Equality
) -> Match | None:
    """Return the run anchored at (row, col) along offsets, or None."""
    rows, cols = grid_dimensions(grid)
    positions: List[Position] = []
    anchor = None
    for d_row, d_col in offsets:
        r, c = row + d_row, col + d_col
        if not (0 <= r < rows and 0 <= c < cols):
            return None
        cell = grid[r][c]
        if not cell.active:
            return None
        if not positions:
            anchor = cell.piece
        elif not same(anchor, cell.piece):
            return None
        positions.append(Position(r, c))
    return Match(matched=anchor, positions=tuple(positions))


def find_all_matches(grid: Grid, *, same: Equality = operator.eq) -> List[Match]:
    """Detect every minimal run of MATCH_LENGTH identical pieces.

    Each cell is an anchor, scanned row-major; the window to its right is
    checked before the window below it. Longer lines yield overlapping runs.
    """
    rows, cols = grid_dimensions(grid)
    matches: List[Match] = []
    for r in range(rows):
        for c in range(cols):
            horizontal = _window_match(grid, r, c, _ROW_WINDOW, same)
            if horizontal is not None:
                matches.append(horizontal)
            vertical = _window_match(grid, r, c, _COL_WINDOW, same)
            if vertical is not None:
                matches.append(vertical)
    return matches


def has_line_match(grid: Grid, pos: Position, *, same: Equality = operator.eq) -> bool:
    """Return True if any run passes through pos, horizontally or vertically."""
    for back in range(MATCH_LENGTH):
        if _window_match(grid, pos.row, pos.col - back, _ROW_WINDOW, same) is not None:
            return True
        if _window_match(grid, pos.row - back, pos.col, _COL_WINDOW, same) is not None:
            return True
    return False


def swap_cells(grid: Grid, a: Position, b: Position) -> None:
    cell_a = grid[a.row][a.col]
    cell_b = grid[b.row][b.col]
    cell_a.piece, cell_b.piece = cell_b.piece, cell_a.piece
    cell_a.active, cell_b.active = cell_b.active, cell_a.active


def predict_swap_creates_match(
    grid: Grid, src: Position, dst: Position, *, same: Equality = operator.eq
) -> bool:
    """Return True if swapping src/dst would create a run through either cell.

    The swap is applied in place and always reverted before returning.
    """
    swap_cells(grid, src, dst)
    try:
        return has_line_match(grid, src, same=same) or has_line_match(grid, dst, same=same)
    finally:
        swap_cells(grid, src, dst)


def is_legal_swap(
    grid: Grid,
    src: Position,
    dst: Position,
    *,
    same: Equality = operator.eq,
    adjacent_only: bool = False,
) -> bool:
    """Return True if swapping src and dst is a legal move on grid."""
    if src == dst:
        return False
    rows, cols = grid_dimensions(grid)
    for pos in (src, dst):
        if not (0 <= pos.row < rows and 0 <= pos.col < cols):
            return False
        if not grid[pos.row][pos.col].active:
            return False
    if not src.shares_line(dst):
        return False
    if adjacent_only and not src.is_adjacent(dst):
        return False
    return predict_swap_creates_match(grid, src, dst, same=same)


def find_valid_swaps(
    grid: Grid, *, same: Equality = operator.eq, adjacent_only: bool = False
) -> List[Tuple[Position, Position]]:
    """Enumerate legal swaps, each pair once with the first cell earlier in row-major order."""
    rows, cols = grid_dimensions(grid)
    swaps: List[Tuple[Position, Position]] = []
    for r in range(rows):
        for c in range(cols):
            pos = Position(r, c)
            candidates = [Position(r, other) for other in range(c + 1, cols)]
            candidates += [Position(other, c) for other in range(r + 1, rows)]
            for other in candidates:
                if is_legal_swap(grid, pos, other, same=same, adjacent_only=adjacent_only):
                    swaps.append((pos, other))
    return swaps
