from __future__ import annotations

import logging

from board.entities import Ship
from board.hazards import HazardField, build_hazard_field
from board.hexgrid import Cell, distance, neighbor
from board.world import World
from config import WAYPOINT_REACHED, WAYPOINTS, Settings
from tactics.actions import Action, Command
from tactics.planner import plan_move
from tactics.targeting import collision_course_target, intercept_solution, mine_shot, nearest_barrel

logger = logging.getLogger(__name__)

MINE_TRIGGER_RANGE = 2


def current_waypoint(ship: Ship) -> Cell:
    """Patrol point for `ship`, advancing its index once it is close enough."""
    x, y = WAYPOINTS[ship.waypoint_index % len(WAYPOINTS)]
    wp = Cell(x, y)
    if distance(ship.cell, wp) <= WAYPOINT_REACHED:
        ship.waypoint_index = (ship.waypoint_index + 1) % len(WAYPOINTS)
        x, y = WAYPOINTS[ship.waypoint_index]
        wp = Cell(x, y)
    return wp


def _fire(ship: Ship, target: Cell, settings: Settings) -> Command:
    ship.cooldown = settings.fire_cooldown
    return Command(ship.entity_id, Action.FIRE, target)


def _should_drop_mine(ship: Ship, world: World) -> bool:
    if ship.mine_cooldown > 0:
        return False
    behind = neighbor(ship.stern(), ship.facing.opposite())
    return any(distance(e.bow(), behind) <= MINE_TRIGGER_RANGE for e in world.live_enemy_ships())


def decide_ship(ship: Ship, world: World, field: HazardField, settings: Settings) -> Command:
    """Pick one command for a single live ship.

    Priority: free shot at an enemy on a collision course, otherwise move
    toward the nearest barrel (or patrol), then let an in-range shot or a
    mine detonation replace the move.
    """
    if ship.cooldown == 0:
        rammer = collision_course_target(ship, world)
        if rammer is not None:
            logger.debug("ship %d: enemy %d on collision course", ship.entity_id, rammer.entity_id)
            return _fire(ship, rammer.cell, settings)

    barrel = nearest_barrel(ship, world)
    destination = barrel.cell if barrel is not None else current_waypoint(ship)
    plan = plan_move(ship, destination, world, field, max_depth=settings.search_depth)

    if ship.cooldown == 0:
        solution = intercept_solution(ship, world)
        if solution is not None and solution.distance <= settings.fire_range:
            logger.debug("ship %d: intercept %d at %s", ship.entity_id, solution.target.entity_id, solution.cell)
            return _fire(ship, solution.cell, settings)

        mine_cell = mine_shot(ship, world, field)
        if mine_cell is not None:
            logger.debug("ship %d: detonating mine at %s", ship.entity_id, mine_cell)
            return _fire(ship, mine_cell, settings)

    if plan.action is Action.WAIT and _should_drop_mine(ship, world):
        ship.mine_cooldown = settings.mine_cooldown
        return Command(ship.entity_id, Action.MINE)

    return Command(ship.entity_id, plan.action)


def decide_turn(world: World, settings: Settings | None = None) -> list[Command]:
    """One command per live own ship, in first-seen order."""
    settings = settings or Settings()
    field = build_hazard_field(world)
    commands = [decide_ship(ship, world, field, settings) for ship in world.live_my_ships()]
    logger.info("tick %d: %s", world.tick, " | ".join(c.render() for c in commands))
    return commands
