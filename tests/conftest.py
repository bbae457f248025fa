import pytest

from board.hexgrid import Cell
from board.records import BarrelRecord, CannonballRecord, MineRecord, ShipRecord
from board.world import World


def my_ship(eid, x, y, facing=0, speed=0, rum=100):
    return ShipRecord(eid, Cell(x, y), facing=facing, speed=speed, rum=rum, mine=True)


def enemy_ship(eid, x, y, facing=0, speed=0, rum=100):
    return ShipRecord(eid, Cell(x, y), facing=facing, speed=speed, rum=rum, mine=False)


def barrel(eid, x, y, quantity=15):
    return BarrelRecord(eid, Cell(x, y), quantity=quantity)


def mine(eid, x, y):
    return MineRecord(eid, Cell(x, y))


def cannonball(eid, x, y, impact_ticks, owner_id=99):
    return CannonballRecord(eid, Cell(x, y), owner_id=owner_id, impact_ticks=impact_ticks)


def _build_world(*records):
    world = World()
    world.apply_turn(records)
    return world


@pytest.fixture
def make_world():
    """World after one tick in which exactly `records` were reported."""
    return _build_world


@pytest.fixture
def empty_world():
    return _build_world()
