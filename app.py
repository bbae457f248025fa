from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from board.entities import Ship
from board.hazards import build_hazard_field
from board.render_ascii import render_board_ascii
from board.world import World
from config import Settings
from protocol import ProtocolError, parse_turn_text, render_commands
from tactics.orchestrator import decide_turn


app = FastAPI(title="Naval Bot decision service")

# Read once at import; every session shares it.
SETTINGS = Settings.from_env()


@dataclass
class BotSession:
    world: World
    settings: Settings


# In-memory only; sessions end with the process.
_sessions: dict[str, BotSession] = {}


def _load_session(bot_id: str) -> BotSession:
    session = _sessions.get(bot_id)
    if session is None:
        raise HTTPException(status_code=404, detail="No such bot")
    return session


def _ship_summary(ship: Ship) -> dict[str, Any]:
    return {
        "id": ship.entity_id,
        "x": ship.cell.x,
        "y": ship.cell.y,
        "facing": int(ship.facing),
        "speed": ship.speed,
        "rum": ship.rum,
        "cooldown": ship.cooldown,
    }


def _state(bot_id: str, session: BotSession) -> dict[str, Any]:
    world = session.world
    field = build_hazard_field(world)
    return {
        "bot_id": bot_id,
        "tick": world.tick,
        "my_ships": [_ship_summary(s) for s in world.live_my_ships()],
        "enemy_ships": [_ship_summary(s) for s in world.live_enemy_ships()],
        "barrels": len(field.barrels),
        "mines": len(field.mines),
        "impacts": {f"{c.x},{c.y}": t for c, t in field.fire.items()},
        "map_text": render_board_ascii(world, field),
    }


@app.post("/bots")
def create_bot():
    bot_id = str(uuid.uuid4())
    _sessions[bot_id] = BotSession(world=World(), settings=SETTINGS)
    return {"bot_id": bot_id}


@app.get("/bots")
def list_bots():
    return {"bots": list(_sessions)}


@app.post("/bots/{bot_id}/turn")
def post_turn(bot_id: str, payload: Dict[str, Any]):
    session = _load_session(bot_id)
    text = payload.get("turn")
    if not isinstance(text, str) or not text.strip():
        raise HTTPException(status_code=400, detail="turn text is required")

    try:
        turn = parse_turn_text(text)
    except (ProtocolError, EOFError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    session.world.apply_turn(turn.records, turn.my_ship_count)
    commands = decide_turn(session.world, session.settings)
    return {"tick": session.world.tick, "commands": render_commands(commands)}


@app.get("/bots/{bot_id}/state")
def get_state(bot_id: str):
    return _state(bot_id, _load_session(bot_id))


@app.delete("/bots/{bot_id}")
def delete_bot(bot_id: str):
    _load_session(bot_id)
    del _sessions[bot_id]
    return {"deleted": bot_id}
