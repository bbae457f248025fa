from __future__ import annotations

import logging
from typing import Iterable

from board.entities import Barrel, Cannonball, EntityID, Mine, Ship
from board.facing import Facing
from board.records import BarrelRecord, CannonballRecord, EntityRecord, MineRecord, ShipRecord

logger = logging.getLogger(__name__)


class World:
    """Everything the agent knows, as of the current tick.

    Liveness is tick-stamped: an entity is alive only during the tick in
    which it was last observed. Entities that stop being reported are never
    removed; if their id shows up again the stored record is refreshed in
    place.
    """

    def __init__(self):
        self.tick = 0
        self.my_ships: dict[EntityID, Ship] = {}
        self.enemy_ships: dict[EntityID, Ship] = {}
        self.barrels: dict[EntityID, Barrel] = {}
        self.mines: dict[EntityID, Mine] = {}
        self.cannonballs: dict[EntityID, Cannonball] = {}

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def begin_tick(self) -> int:
        self.tick += 1
        return self.tick

    def observe(self, record: EntityRecord) -> None:
        if isinstance(record, ShipRecord):
            self._observe_ship(record)
        elif isinstance(record, BarrelRecord):
            barrel = self.barrels.get(record.entity_id)
            if barrel is None:
                barrel = Barrel(record.entity_id, record.cell, record.quantity)
                self.barrels[record.entity_id] = barrel
            barrel.cell = record.cell
            barrel.quantity = record.quantity
            barrel.seen_tick = self.tick
        elif isinstance(record, MineRecord):
            mine = self.mines.get(record.entity_id)
            if mine is None:
                mine = Mine(record.entity_id, record.cell)
                self.mines[record.entity_id] = mine
            mine.cell = record.cell
            mine.seen_tick = self.tick
        elif isinstance(record, CannonballRecord):
            ball = self.cannonballs.get(record.entity_id)
            if ball is None:
                ball = Cannonball(record.entity_id, record.owner_id, record.cell, record.impact_ticks)
                self.cannonballs[record.entity_id] = ball
            ball.owner_id = record.owner_id
            ball.target = record.cell
            ball.impact_ticks = record.impact_ticks
            ball.seen_tick = self.tick
        else:
            raise TypeError(f"Unsupported record: {record!r}")

    def _observe_ship(self, record: ShipRecord) -> None:
        table = self.my_ships if record.mine else self.enemy_ships
        ship = table.get(record.entity_id)
        if ship is None:
            ship = Ship(
                entity_id=record.entity_id,
                cell=record.cell,
                facing=Facing.from_int(record.facing),
                speed=record.speed,
                rum=record.rum,
                mine=record.mine,
            )
            table[record.entity_id] = ship
        else:
            ship.cell = record.cell
            ship.facing = Facing.from_int(record.facing)
            ship.speed = record.speed
            ship.rum = record.rum
            ship.cooldown = max(0, ship.cooldown - 1)
            ship.mine_cooldown = max(0, ship.mine_cooldown - 1)
        ship.seen_tick = self.tick

    def apply_turn(self, records: Iterable[EntityRecord], my_ship_count: int | None = None) -> int:
        """Start a new tick and observe every record of it. Returns the new tick."""
        tick = self.begin_tick()
        for record in records:
            self.observe(record)
        if my_ship_count is not None:
            live = len(self.live_my_ships())
            if live != my_ship_count:
                logger.warning("tick %d: host reports %d own ships, saw %d", tick, my_ship_count, live)
        return tick

    # ------------------------------------------------------------------
    # Live views (first-seen order)
    # ------------------------------------------------------------------

    def live_my_ships(self) -> list[Ship]:
        return [s for s in self.my_ships.values() if s.is_alive(self.tick)]

    def live_enemy_ships(self) -> list[Ship]:
        return [s for s in self.enemy_ships.values() if s.is_alive(self.tick)]

    def live_ships(self) -> list[Ship]:
        return self.live_my_ships() + self.live_enemy_ships()

    def live_barrels(self) -> list[Barrel]:
        return [b for b in self.barrels.values() if b.is_alive(self.tick)]

    def live_mines(self) -> list[Mine]:
        return [m for m in self.mines.values() if m.is_alive(self.tick)]

    def live_cannonballs(self) -> list[Cannonball]:
        return [c for c in self.cannonballs.values() if c.is_alive(self.tick)]
