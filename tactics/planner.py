from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from board.entities import MAX_SPEED, Ship
from board.facing import Facing
from board.hazards import HazardField
from board.hexgrid import Cell, angle_gap, bearing, distance, neighbor
from board.world import World
from config import DEFAULT_SEARCH_DEPTH
from tactics.actions import Action, MOVE_ACTIONS

logger = logging.getLogger(__name__)

BARREL_BONUS = 10
MINE_PENALTY = 25
# Cannonball impact penalty by footprint role.
STERN_FIRE_PENALTY = 25
CENTER_FIRE_PENALTY = 50
BOW_FIRE_PENALTY = 25

CLOSER_BONUS = 1
ALIGNED_BONUS = 1


@dataclass(frozen=True, slots=True)
class SimState:
    """Simulated ship pose; a plain value so search branches never share state."""

    cell: Cell
    facing: Facing
    speed: int

    @staticmethod
    def of(ship: Ship) -> SimState:
        return SimState(ship.cell, ship.facing, ship.speed)


@dataclass(frozen=True, slots=True)
class StepResult:
    state: SimState
    score: float
    collided: bool


@dataclass(frozen=True, slots=True)
class MovePlan:
    action: Action
    score: float
    scores: dict[Action, float]  # non-colliding root candidates only
    blocked: bool = False  # every candidate collided


def eligible_actions(speed: int) -> list[Action]:
    out = []
    for a in MOVE_ACTIONS:
        if a is Action.FASTER and speed >= MAX_SPEED:
            continue
        if a is Action.SLOWER and speed <= 0:
            continue
        out.append(a)
    return out


def obstacle_cells(world: World, *, exclude: int) -> frozenset[Cell]:
    """Cells another live ship holds now or will hold after its next bow step."""
    cells: set[Cell] = set()
    for other in world.live_ships():
        if other.entity_id == exclude:
            continue
        cells.update(other.footprint())
        if other.speed > 0:
            cells.add(neighbor(other.bow(), other.facing))
    return frozenset(cells)


def position_value(cell: Cell, facing: Facing, field: HazardField) -> float:
    """Static value of a ship footprint: barrels attract, mines and impacts repel."""
    value = 0.0
    roles = (
        (neighbor(cell, facing.opposite()), STERN_FIRE_PENALTY),
        (cell, CENTER_FIRE_PENALTY),
        (neighbor(cell, facing), BOW_FIRE_PENALTY),
    )
    seen: set[Cell] = set()
    for c, fire_penalty in roles:
        # bow/stern fold onto the center at the board edge
        if c in seen:
            continue
        seen.add(c)
        if c in field.barrels:
            value += BARREL_BONUS
        if c in field.mines:
            value -= MINE_PENALTY
        if field.is_under_fire(c):
            value -= fire_penalty
    return value


def next_speed(action: Action, speed: int) -> int:
    if action is Action.FASTER:
        return min(speed + 1, MAX_SPEED)
    if action is Action.SLOWER:
        return max(speed - 1, 0)
    return speed


def next_facing(action: Action, facing: Facing) -> Facing:
    if action is Action.PORT:
        return facing.port()
    if action is Action.STARBOARD:
        return facing.starboard()
    return facing


class MovePlanner:
    """Depth-limited lookahead over the five movement actions.

    Each ply: translate at the new speed, then turn, then score the pose.
    Child plies contribute half of their best non-colliding score.
    """

    def __init__(
        self,
        destination: Cell,
        field: HazardField,
        obstacles: Iterable[Cell] = (),
        *,
        max_depth: int = DEFAULT_SEARCH_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.destination = destination
        self.field = field
        self.obstacles = frozenset(obstacles)
        self.max_depth = max_depth

    def _progress(self, before: SimState, after: SimState) -> float:
        bonus = 0.0
        if distance(after.cell, self.destination) < distance(before.cell, self.destination):
            bonus += CLOSER_BONUS
        gap_before = angle_gap(before.facing, bearing(before.cell, self.destination))
        gap_after = angle_gap(after.facing, bearing(after.cell, self.destination))
        if gap_after < gap_before:
            bonus += ALIGNED_BONUS
        return bonus

    def simulate(self, state: SimState, action: Action) -> StepResult:
        """Apply one action to `state` without recursion."""
        speed = next_speed(action, state.speed)
        cell = state.cell
        for _ in range(speed):
            nxt = neighbor(cell, state.facing)
            bow = neighbor(nxt, state.facing)
            if nxt == cell or bow == nxt or nxt in self.obstacles or bow in self.obstacles:
                stopped = SimState(cell, state.facing, 0)
                return StepResult(stopped, position_value(cell, state.facing, self.field), True)
            cell = nxt

        facing = next_facing(action, state.facing)
        if facing != state.facing:
            bow = neighbor(cell, facing)
            stern = neighbor(cell, facing.opposite())
            if bow in self.obstacles or stern in self.obstacles:
                stopped = SimState(cell, state.facing, 0)
                return StepResult(stopped, position_value(cell, state.facing, self.field), True)

        after = SimState(cell, facing, speed)
        score = position_value(cell, facing, self.field) + self._progress(state, after)
        return StepResult(after, score, False)

    def evaluate(self, state: SimState, action: Action, depth: int = 1) -> tuple[float, bool]:
        """Score of `action` from `state`, including discounted deeper plies."""
        step = self.simulate(state, action)
        if step.collided:
            return step.score, True

        score = step.score
        if depth < self.max_depth:
            best = None
            for child in eligible_actions(step.state.speed):
                s, collided = self.evaluate(step.state, child, depth + 1)
                if collided:
                    continue
                if best is None or s > best:
                    best = s
            if best is not None:
                score += best / 2
        return score, False

    def plan(self, state: SimState) -> MovePlan:
        scores: dict[Action, float] = {}
        best_action = None
        best_score = 0.0
        for action in eligible_actions(state.speed):
            s, collided = self.evaluate(state, action)
            if collided:
                continue
            scores[action] = s
            if best_action is None or s > best_score:
                best_action, best_score = action, s

        if best_action is None:
            return MovePlan(Action.WAIT, 0.0, scores, blocked=True)
        return MovePlan(best_action, best_score, scores)


def plan_move(
    ship: Ship,
    destination: Cell,
    world: World,
    field: HazardField,
    *,
    max_depth: int = DEFAULT_SEARCH_DEPTH,
) -> MovePlan:
    planner = MovePlanner(
        destination,
        field,
        obstacle_cells(world, exclude=ship.entity_id),
        max_depth=max_depth,
    )
    plan = planner.plan(SimState.of(ship))
    logger.debug("ship %d -> %s: %s scores=%s", ship.entity_id, destination, plan.action.value,
                 {a.value: round(s, 2) for a, s in plan.scores.items()})
    return plan
