from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TypeVar

from board.entities import Barrel, Mine, Ship
from board.hazards import HazardField
from board.hexgrid import Cell, distance, neighbor, offset
from board.world import World
from config import MINE_SHOT_MAX, MINE_SHOT_MIN

T = TypeVar("T", Barrel, Mine, Ship)


@dataclass(frozen=True, slots=True)
class FiringSolution:
    target: Ship
    cell: Cell  # predicted impact cell
    distance: int  # from the shooter's center to `cell`


def _nearest(origin: Cell, candidates: Iterable[T]) -> Optional[T]:
    """Closest candidate by hex distance.

    Ties keep the first candidate seen, so the answer depends on iteration
    order (World views iterate in first-seen order).
    """
    best = None
    best_dist = None
    for c in candidates:
        d = distance(origin, c.cell)
        if best_dist is None or d < best_dist:
            best, best_dist = c, d
    return best


def nearest_barrel(ship: Ship, world: World) -> Optional[Barrel]:
    return _nearest(ship.cell, world.live_barrels())


def nearest_enemy(ship: Ship, world: World) -> Optional[Ship]:
    return _nearest(ship.cell, world.live_enemy_ships())


def safe_mines(world: World, field: HazardField) -> list[Mine]:
    """Live mines no cannonball is about to set off."""
    return [m for m in world.live_mines() if not field.mine_under_fire(m)]


def nearest_safe_mine(ship: Ship, world: World, field: HazardField) -> Optional[Mine]:
    return _nearest(ship.cell, safe_mines(world, field))


def _projected_cells(ship: Ship) -> set[Cell]:
    """Our current footprint plus the footprint after one full move at current speed."""
    cells = set(ship.footprint())
    center = ship.cell
    for _ in range(ship.speed):
        center = neighbor(center, ship.facing)
    cells.add(center)
    cells.add(neighbor(center, ship.facing))
    cells.add(neighbor(center, ship.facing.opposite()))
    return cells


def collision_course_target(ship: Ship, world: World) -> Optional[Ship]:
    """First live enemy whose bow will run into us within its current speed.

    Such an enemy cannot dodge this tick, which makes it a free shot.
    """
    ours = _projected_cells(ship)
    for enemy in world.live_enemy_ships():
        bow = enemy.bow()
        for _ in range(enemy.speed):
            nxt = neighbor(bow, enemy.facing)
            if nxt == bow:
                break
            bow = nxt
            if bow in ours:
                return enemy
    return None


def lead_distance(shooter: Cell, enemy: Ship) -> int:
    if enemy.speed == 0:
        return 0
    return 1 + distance(shooter, enemy.cell) // 3


def intercept_solution(ship: Ship, world: World) -> Optional[FiringSolution]:
    enemy = nearest_enemy(ship, world)
    if enemy is None:
        return None
    cell = offset(enemy.cell, enemy.facing, lead_distance(ship.cell, enemy))
    return FiringSolution(target=enemy, cell=cell, distance=distance(ship.cell, cell))


def mine_shot(ship: Ship, world: World, field: HazardField) -> Optional[Cell]:
    """A safe mine in the stand-off window that sits next to a live enemy."""
    enemy_cells: set[Cell] = set()
    for enemy in world.live_enemy_ships():
        enemy_cells.update(enemy.footprint())
    if not enemy_cells:
        return None

    candidates = []
    for mine in safe_mines(world, field):
        if not MINE_SHOT_MIN <= distance(ship.cell, mine.cell) <= MINE_SHOT_MAX:
            continue
        if any(distance(mine.cell, c) <= 1 for c in enemy_cells):
            candidates.append(mine)

    best = _nearest(ship.cell, candidates)
    return None if best is None else best.cell
