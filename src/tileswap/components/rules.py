from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable

from tileswap.constants import MAX_RESOLUTION_PASSES


@dataclass(slots=True)
class BoardRules:
    """Per-board configuration.

    same: equality capability for pieces; match detection relies on it entirely.
    adjacent_only: restrict swaps to orthogonal neighbours instead of any same-line pair.
    max_passes: cap on match-finding passes per resolution; None means unbounded.
    """
    same: Callable[[Any, Any], bool] = operator.eq
    adjacent_only: bool = False
    max_passes: int | None = MAX_RESOLUTION_PASSES

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be positive or None, got {self.max_passes}")
