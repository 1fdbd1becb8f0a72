from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A cell address on the board. Row 0 is the top row."""
    row: int
    col: int

    def is_adjacent(self, other: "Position") -> bool:
        return (abs(self.row - other.row) == 1 and self.col == other.col) or (
            abs(self.col - other.col) == 1 and self.row == other.row
        )

    def shares_line(self, other: "Position") -> bool:
        return self.row == other.row or self.col == other.col


def as_position(value) -> Position:
    """Accept a Position or a (row, col) pair."""
    if isinstance(value, Position):
        return value
    row, col = value
    return Position(row, col)


def try_position(value) -> Position | None:
    """Like as_position, but None for anything that is not a pair of ints."""
    try:
        pos = as_position(value)
    except (TypeError, ValueError):
        return None
    if not (isinstance(pos.row, int) and isinstance(pos.col, int)):
        return None
    return pos
