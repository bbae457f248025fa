from __future__ import annotations

from dataclasses import dataclass

from board.facing import Facing
from board.hexgrid import Cell, neighbor

EntityID = int

MAX_SPEED = 2


@dataclass(slots=True)
class Ship:
    """A ship as last reported by the host.

    Footprint: three cells (stern, center, bow) along the facing.
    Cooldowns and waypoint index are agent-side state and survive refreshes.
    """

    entity_id: EntityID
    cell: Cell
    facing: Facing
    speed: int
    rum: int
    mine: bool  # controlled by us

    seen_tick: int = 0
    cooldown: int = 0
    mine_cooldown: int = 0
    waypoint_index: int = 0

    def is_alive(self, tick: int) -> bool:
        return self.seen_tick == tick

    def bow(self) -> Cell:
        return neighbor(self.cell, self.facing)

    def stern(self) -> Cell:
        return neighbor(self.cell, self.facing.opposite())

    def footprint(self) -> tuple[Cell, Cell, Cell]:
        return self.stern(), self.cell, self.bow()


@dataclass(slots=True)
class Barrel:
    entity_id: EntityID
    cell: Cell
    quantity: int
    seen_tick: int = 0

    def is_alive(self, tick: int) -> bool:
        return self.seen_tick == tick


@dataclass(slots=True)
class Mine:
    entity_id: EntityID
    cell: Cell
    seen_tick: int = 0

    def is_alive(self, tick: int) -> bool:
        return self.seen_tick == tick


@dataclass(slots=True)
class Cannonball:
    entity_id: EntityID
    owner_id: EntityID
    target: Cell
    impact_ticks: int
    seen_tick: int = 0

    def is_alive(self, tick: int) -> bool:
        return self.seen_tick == tick
