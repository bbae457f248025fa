from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_FIRE_RANGE = 5
DEFAULT_FIRE_COOLDOWN = 2
DEFAULT_MINE_COOLDOWN = 4
DEFAULT_SEARCH_DEPTH = 3
DEFAULT_LOG_LEVEL = "WARNING"

# Stand-off window for shooting mines next to enemies.
MINE_SHOT_MIN = 3
MINE_SHOT_MAX = 5

# Patrol points visited in order when there is nothing to collect.
WAYPOINTS: tuple[tuple[int, int], ...] = ((5, 5), (17, 5), (17, 15), (5, 15))
WAYPOINT_REACHED = 2


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    fire_range: int = DEFAULT_FIRE_RANGE
    fire_cooldown: int = DEFAULT_FIRE_COOLDOWN
    mine_cooldown: int = DEFAULT_MINE_COOLDOWN
    search_depth: int = DEFAULT_SEARCH_DEPTH
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env() -> Settings:
        s = Settings(
            fire_range=_env_int("NAVAL_BOT_FIRE_RANGE", DEFAULT_FIRE_RANGE),
            fire_cooldown=_env_int("NAVAL_BOT_FIRE_COOLDOWN", DEFAULT_FIRE_COOLDOWN),
            mine_cooldown=_env_int("NAVAL_BOT_MINE_COOLDOWN", DEFAULT_MINE_COOLDOWN),
            search_depth=_env_int("NAVAL_BOT_SEARCH_DEPTH", DEFAULT_SEARCH_DEPTH),
            log_level=os.environ.get("NAVAL_BOT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
        if s.search_depth < 1:
            raise ValueError("NAVAL_BOT_SEARCH_DEPTH must be >= 1")
        if logging.getLevelName(s.log_level) == f"Level {s.log_level}":
            raise ValueError(f"NAVAL_BOT_LOG_LEVEL is not a logging level: {s.log_level!r}")
        return s
