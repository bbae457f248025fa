from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from board.hexgrid import Cell


class Action(str, Enum):
    WAIT = "WAIT"
    PORT = "PORT"
    STARBOARD = "STARBOARD"
    FASTER = "FASTER"
    SLOWER = "SLOWER"
    FIRE = "FIRE"
    MINE = "MINE"


# Planner candidates in tie-break order.
MOVE_ACTIONS: tuple[Action, ...] = (
    Action.WAIT,
    Action.PORT,
    Action.STARBOARD,
    Action.FASTER,
    Action.SLOWER,
)


@dataclass(frozen=True, slots=True)
class Command:
    """One ship's order for the tick."""

    ship_id: int
    action: Action
    target: Cell | None = None

    def __post_init__(self):
        if self.action is Action.FIRE and self.target is None:
            raise ValueError("FIRE needs a target cell")

    def render(self) -> str:
        if self.action is Action.FIRE:
            return f"FIRE {self.target.x} {self.target.y}"
        return self.action.value
