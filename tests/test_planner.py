from board.facing import Facing
from board.hazards import EMPTY_FIELD, build_hazard_field
from board.hexgrid import Cell
from tactics.actions import Action
from tactics.planner import (
    MovePlanner,
    SimState,
    eligible_actions,
    obstacle_cells,
    plan_move,
)
from tests.conftest import barrel, enemy_ship, my_ship


def test_eligible_actions_respect_speed_limits():
    assert eligible_actions(0) == [Action.WAIT, Action.PORT, Action.STARBOARD, Action.FASTER]
    assert eligible_actions(1) == [Action.WAIT, Action.PORT, Action.STARBOARD, Action.FASTER, Action.SLOWER]
    assert eligible_actions(2) == [Action.WAIT, Action.PORT, Action.STARBOARD, Action.SLOWER]


def test_simulate_translates_then_turns():
    planner = MovePlanner(Cell(20, 5), EMPTY_FIELD, max_depth=1)
    start = SimState(Cell(5, 5), Facing.E, 1)

    port = planner.simulate(start, Action.PORT)
    assert port.state == SimState(Cell(6, 5), Facing.NE, 1)

    faster = planner.simulate(start, Action.FASTER)
    assert faster.state == SimState(Cell(7, 5), Facing.E, 2)

    slower = planner.simulate(start, Action.SLOWER)
    assert slower.state == SimState(Cell(5, 5), Facing.E, 0)


def test_open_water_prefers_holding_course_toward_destination(make_world):
    world = make_world(my_ship(0, 5, 5, facing=0, speed=1))
    plan = plan_move(world.my_ships[0], Cell(10, 5), world, build_hazard_field(world))

    assert plan.action in (Action.WAIT, Action.FASTER)
    assert plan.scores[plan.action] >= plan.scores[Action.PORT]
    assert plan.scores[plan.action] >= plan.scores[Action.STARBOARD]
    assert not plan.blocked


def test_board_edge_is_a_collision():
    planner = MovePlanner(Cell(22, 5), EMPTY_FIELD, max_depth=1)
    step = planner.simulate(SimState(Cell(21, 5), Facing.E, 1), Action.WAIT)
    assert step.collided
    assert step.state.cell == Cell(21, 5)


def test_never_picks_colliding_action_when_one_is_free(make_world):
    # enemy parked across our bow: every move that translates hits it
    world = make_world(my_ship(0, 5, 5, facing=0, speed=1), enemy_ship(1, 8, 5, facing=3, speed=0))
    obstacles = obstacle_cells(world, exclude=0)
    assert Cell(7, 5) in obstacles
    assert Cell(5, 5) not in obstacles

    plan = plan_move(world.my_ships[0], Cell(15, 5), world, build_hazard_field(world))
    assert plan.action is Action.SLOWER
    assert set(plan.scores) == {Action.SLOWER}


def test_all_blocked_falls_back_to_wait():
    planner = MovePlanner(Cell(15, 5), EMPTY_FIELD, obstacles=[Cell(7, 5)])
    plan = planner.plan(SimState(Cell(5, 5), Facing.E, 2))
    assert plan.blocked
    assert plan.action is Action.WAIT
    assert plan.scores == {}


def test_moving_ship_blocks_the_cell_ahead_of_its_bow(make_world):
    world = make_world(my_ship(0, 5, 5), enemy_ship(1, 10, 10, facing=0, speed=1))
    obstacles = obstacle_cells(world, exclude=0)
    assert obstacles == {Cell(9, 10), Cell(10, 10), Cell(11, 10), Cell(12, 10)}


def test_barrel_straight_ahead_pulls_the_ship_forward(make_world):
    world = make_world(my_ship(0, 5, 5, facing=0, speed=0), barrel(40, 7, 5))
    plan = plan_move(world.my_ships[0], Cell(7, 5), world, build_hazard_field(world))
    assert plan.action is Action.FASTER


def test_deeper_search_adds_discounted_future():
    start = SimState(Cell(5, 5), Facing.E, 1)
    shallow = MovePlanner(Cell(10, 5), EMPTY_FIELD, max_depth=1).evaluate(start, Action.WAIT)
    deep = MovePlanner(Cell(10, 5), EMPTY_FIELD, max_depth=3).evaluate(start, Action.WAIT)
    assert shallow == (1.0, False)
    assert deep == (1.75, False)
