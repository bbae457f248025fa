# board/hexgrid.py
from __future__ import annotations

import math

BOARD_WIDTH = 23
BOARD_HEIGHT = 21


class Cell:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return isinstance(other, Cell) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"({self.x},{self.y})"

    def in_bounds(self) -> bool:
        return 0 <= self.x < BOARD_WIDTH and 0 <= self.y < BOARD_HEIGHT


# Offset-coordinate neighbor deltas (dx, dy) per facing 0..5, split by row parity.
# Odd rows are shifted half a cell to the right.
EVEN_ROW_DELTAS: tuple[tuple[int, int], ...] = (
    (1, 0),     # E
    (0, -1),    # NE
    (-1, -1),   # NW
    (-1, 0),    # W
    (-1, 1),    # SW
    (0, 1),     # SE
)
ODD_ROW_DELTAS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (0, 1),
    (1, 1),
)

# Cube deltas (x, y, z) per facing; x + y + z == 0.
CUBE_DELTAS: tuple[tuple[int, int, int], ...] = (
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
)


def _check_direction(direction: int) -> int:
    d = int(direction)
    if d < 0 or d > 5:
        raise ValueError(f"direction must be in 0..5, got {direction}")
    return d


def to_cube(cell: Cell) -> tuple[int, int, int]:
    x = cell.x - (cell.y - (cell.y & 1)) // 2
    z = cell.y
    return x, -x - z, z


def from_cube(x: int, y: int, z: int) -> Cell:
    return Cell(x + (z - (z & 1)) // 2, z)


def distance(a: Cell, b: Cell) -> int:
    ax, ay, az = to_cube(a)
    bx, by, bz = to_cube(b)
    return (abs(ax - bx) + abs(ay - by) + abs(az - bz)) // 2


def neighbor(cell: Cell, direction: int) -> Cell:
    """One step toward `direction`.

    Off-board results return `cell` itself, so callers can read
    `neighbor(c, d) == c` as "blocked by the board edge".
    """
    d = _check_direction(direction)
    dx, dy = (ODD_ROW_DELTAS if cell.y & 1 else EVEN_ROW_DELTAS)[d]
    out = Cell(cell.x + dx, cell.y + dy)
    if not out.in_bounds():
        return cell
    return out


def clamp(cell: Cell) -> Cell:
    x = min(max(cell.x, 0), BOARD_WIDTH - 1)
    y = min(max(cell.y, 0), BOARD_HEIGHT - 1)
    return Cell(x, y)


def offset(cell: Cell, direction: int, steps: int) -> Cell:
    """Cell reached after `steps` straight moves toward `direction`, clamped to the board."""
    d = _check_direction(direction)
    cx, cy, cz = to_cube(cell)
    dx, dy, dz = CUBE_DELTAS[d]
    return clamp(from_cube(cx + dx * steps, cy + dy * steps, cz + dz * steps))


def bearing(origin: Cell, target: Cell) -> float:
    """Direction from `origin` to `target` in facing units, normalized to [0, 6)."""
    dy = (target.y - origin.y) * math.sqrt(3) / 2
    dx = (target.x + 0.5 * (target.y & 1)) - (origin.x + 0.5 * (origin.y & 1))
    angle = -math.atan2(dy, dx) * 3 / math.pi
    if angle < 0:
        angle += 6
    if angle >= 6:
        angle -= 6
    return angle


def angle_gap(facing: int, angle: float) -> float:
    """Circular gap in [0, 3] between a facing and a bearing."""
    gap = abs(int(facing) - angle) % 6
    return min(gap, 6 - gap)
