from dataclasses import dataclass
from typing import Any, List


@dataclass(slots=True)
class Cell:
    """Per-cell piece slot.

    active: True if the cell currently holds a piece; False if cleared/empty.
    The piece value is meaningless while the cell is inactive, so any value
    (None included) can be a real piece.
    """
    piece: Any = None
    active: bool = True

    def clear(self) -> None:
        self.piece = None
        self.active = False

    def put(self, piece: Any) -> None:
        self.piece = piece
        self.active = True


Grid = List[List[Cell]]
