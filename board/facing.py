from __future__ import annotations

from enum import IntEnum


class Facing(IntEnum):
    """Ship facing (0..5), counter-clockwise from east.

    Offset-coordinate board, odd rows shifted right. Direction deltas live in
    board.hexgrid (EVEN_ROW_DELTAS / ODD_ROW_DELTAS / CUBE_DELTAS) and share
    this index order.
    """

    E = 0
    NE = 1
    NW = 2
    W = 3
    SW = 4
    SE = 5

    def port(self, steps: int = 1) -> "Facing":
        """Rotate to port (counter-clockwise) by `steps`."""
        return Facing((int(self) + (steps % 6)) % 6)

    def starboard(self, steps: int = 1) -> "Facing":
        """Rotate to starboard (clockwise) by `steps`."""
        return Facing((int(self) - (steps % 6)) % 6)

    def opposite(self) -> "Facing":
        return self.port(3)

    @staticmethod
    def from_int(value: int) -> "Facing":
        """Explicit constructor for clarity at boundaries (protocol/HTTP)."""
        if value < 0 or value > 5:
            raise ValueError(f"Facing must be in 0..5, got {value}")
        return Facing(value)
