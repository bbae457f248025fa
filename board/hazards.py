from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from board.entities import Mine
from board.hexgrid import Cell
from board.world import World


@dataclass(frozen=True, slots=True)
class HazardField:
    """Per-tick threat/opportunity view of the board (read-only).

    fire: impact cell -> fewest ticks until a cannonball lands there
    mines / mines_under_fire / barrels: occupied cells
    """

    fire: Mapping[Cell, int] = field(hash=False)
    mines: frozenset[Cell]
    mines_under_fire: frozenset[Cell]
    barrels: frozenset[Cell]

    def impact_in(self, cell: Cell) -> int | None:
        return self.fire.get(cell)

    def is_under_fire(self, cell: Cell) -> bool:
        return cell in self.fire

    def mine_under_fire(self, mine: Mine) -> bool:
        return mine.cell in self.mines_under_fire


EMPTY_FIELD = HazardField(MappingProxyType({}), frozenset(), frozenset(), frozenset())


def build_hazard_field(world: World) -> HazardField:
    """Rebuild the field from the world's live entities.

    Pure: the same world always yields an equal field.
    """
    fire: dict[Cell, int] = {}
    for ball in world.live_cannonballs():
        prev = fire.get(ball.target)
        if prev is None or ball.impact_ticks < prev:
            fire[ball.target] = ball.impact_ticks

    mines: set[Cell] = set()
    under_fire: set[Cell] = set()
    for mine in world.live_mines():
        if mine.cell in fire:
            under_fire.add(mine.cell)
        mines.add(mine.cell)

    barrels = {b.cell for b in world.live_barrels()}

    return HazardField(
        fire=MappingProxyType(fire),
        mines=frozenset(mines),
        mines_under_fire=frozenset(under_fire),
        barrels=frozenset(barrels),
    )
