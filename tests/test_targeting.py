from board.hazards import build_hazard_field
from board.hexgrid import Cell
from board.world import World
from tactics.targeting import (
    collision_course_target,
    intercept_solution,
    lead_distance,
    mine_shot,
    nearest_barrel,
    nearest_enemy,
    nearest_safe_mine,
    safe_mines,
)
from tests.conftest import barrel, cannonball, enemy_ship, mine, my_ship


def test_nearest_barrel_and_enemy(make_world):
    world = make_world(
        my_ship(0, 5, 5),
        barrel(40, 12, 5),
        barrel(41, 7, 5),
        enemy_ship(1, 15, 15),
        enemy_ship(2, 9, 6),
    )
    me = world.my_ships[0]
    assert nearest_barrel(me, world).entity_id == 41
    assert nearest_enemy(me, world).entity_id == 2


def test_ties_keep_first_seen(make_world):
    world = make_world(my_ship(0, 10, 10), barrel(41, 12, 10), barrel(40, 8, 10))
    assert nearest_barrel(world.my_ships[0], world).entity_id == 41


def test_nothing_live_returns_none():
    world = World()
    world.apply_turn([my_ship(0, 5, 5), barrel(40, 6, 5), enemy_ship(1, 8, 8)])
    world.apply_turn([my_ship(0, 5, 5)])
    me = world.my_ships[0]

    assert nearest_barrel(me, world) is None
    assert nearest_enemy(me, world) is None
    assert intercept_solution(me, world) is None
    assert collision_course_target(me, world) is None


def test_enemy_on_collision_course(make_world):
    # enemy heading west at speed 2; its bow reaches our bow at (11,10)
    world = make_world(my_ship(0, 10, 10), enemy_ship(1, 13, 10, facing=3, speed=2))
    assert collision_course_target(world.my_ships[0], world).entity_id == 1


def test_stopped_or_diverging_enemy_is_not_a_collision(make_world):
    world = make_world(
        my_ship(0, 10, 10),
        enemy_ship(1, 13, 10, facing=3, speed=0),
        enemy_ship(2, 13, 14, facing=0, speed=2),
    )
    assert collision_course_target(world.my_ships[0], world) is None


def test_intercept_leads_moving_targets(make_world):
    world = make_world(my_ship(0, 5, 10), enemy_ship(1, 11, 10, facing=0, speed=1))
    me = world.my_ships[0]
    enemy = world.enemy_ships[1]

    assert lead_distance(me.cell, enemy) == 1 + 6 // 3
    sol = intercept_solution(me, world)
    assert sol.target is enemy
    assert sol.cell == Cell(14, 10)
    assert sol.distance == 9


def test_intercept_stopped_target_has_no_lead(make_world):
    world = make_world(my_ship(0, 5, 10), enemy_ship(1, 9, 10, facing=0, speed=0))
    sol = intercept_solution(world.my_ships[0], world)
    assert sol.cell == Cell(9, 10)
    assert sol.distance == 4


def test_nearest_safe_mine_skips_mines_under_fire(make_world):
    world = make_world(my_ship(0, 5, 5), mine(30, 6, 5), mine(31, 9, 5), cannonball(20, 6, 5, 2))
    field = build_hazard_field(world)
    assert nearest_safe_mine(world.my_ships[0], world, field).entity_id == 31


def test_mine_shot_needs_enemy_next_to_mine_in_standoff_window(make_world):
    world = make_world(my_ship(0, 10, 10), mine(30, 15, 10), mine(31, 11, 10), enemy_ship(1, 17, 10))
    field = build_hazard_field(world)
    # (11,10) is too close, (15,10) touches the enemy stern at (16,10)
    assert mine_shot(world.my_ships[0], world, field) == Cell(15, 10)

    lonely = make_world(my_ship(0, 10, 10), mine(30, 15, 10), enemy_ship(1, 20, 3))
    assert mine_shot(lonely.my_ships[0], lonely, build_hazard_field(lonely)) is None


def test_mine_under_fire_is_neither_safe_nor_shot(make_world):
    world = make_world(
        my_ship(0, 10, 10),
        mine(30, 15, 10),
        mine(31, 2, 2),
        enemy_ship(1, 17, 10),
        cannonball(20, 15, 10, 2),
    )
    field = build_hazard_field(world)
    assert [m.entity_id for m in safe_mines(world, field)] == [31]
    assert nearest_safe_mine(world.my_ships[0], world, field).entity_id == 31
    assert mine_shot(world.my_ships[0], world, field) is None
