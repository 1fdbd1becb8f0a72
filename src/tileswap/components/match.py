from dataclasses import dataclass
from typing import Any, Tuple

from tileswap.components.position import Position


@dataclass(frozen=True, slots=True)
class Match:
    """A run of identical pieces found in one detection pass."""
    matched: Any
    positions: Tuple[Position, ...]
