from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from board.hexgrid import Cell


class EntityKind(str, Enum):
    SHIP = "SHIP"
    BARREL = "BARREL"
    MINE = "MINE"
    CANNONBALL = "CANNONBALL"


class UnknownEntityType(ValueError):
    """Raised for a type tag outside EntityKind."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown entity type: {tag!r}")
        self.tag = tag


@dataclass(frozen=True, slots=True)
class ShipRecord:
    entity_id: int
    cell: Cell
    facing: int
    speed: int
    rum: int
    mine: bool


@dataclass(frozen=True, slots=True)
class BarrelRecord:
    entity_id: int
    cell: Cell
    quantity: int


@dataclass(frozen=True, slots=True)
class MineRecord:
    entity_id: int
    cell: Cell


@dataclass(frozen=True, slots=True)
class CannonballRecord:
    entity_id: int
    cell: Cell  # impact cell
    owner_id: int
    impact_ticks: int


EntityRecord = Union[ShipRecord, BarrelRecord, MineRecord, CannonballRecord]


def make_record(entity_id: int, tag: str, x: int, y: int, args: Sequence[int]) -> EntityRecord:
    """Build the record variant for `tag`.

    `args` are the four type-dependent integers of the host line.
    """
    try:
        kind = EntityKind(tag)
    except ValueError:
        raise UnknownEntityType(tag) from None

    if len(args) < 4:
        raise ValueError(f"Entity {entity_id} needs 4 arguments, got {len(args)}")

    cell = Cell(x, y)
    if kind is EntityKind.SHIP:
        if args[0] < 0 or args[0] > 5:
            raise ValueError(f"Ship {entity_id} has facing {args[0]} outside 0..5")
        return ShipRecord(entity_id, cell, facing=args[0], speed=args[1], rum=args[2], mine=args[3] == 1)
    if kind is EntityKind.BARREL:
        return BarrelRecord(entity_id, cell, quantity=args[0])
    if kind is EntityKind.MINE:
        return MineRecord(entity_id, cell)
    return CannonballRecord(entity_id, cell, owner_id=args[0], impact_ticks=args[1])
