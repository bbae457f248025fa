from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from board.records import EntityRecord, make_record
from tactics.actions import Command


class ProtocolError(ValueError):
    """Host input that does not follow the turn format."""


@dataclass(frozen=True, slots=True)
class Turn:
    my_ship_count: int
    records: tuple[EntityRecord, ...]


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProtocolError(f"{what} must be an integer, got {token!r}") from None


def parse_entity(line: str) -> EntityRecord:
    """Parse `id TYPE x y a1 a2 a3 a4`."""
    parts = line.split()
    if len(parts) != 8:
        raise ProtocolError(f"Entity line needs 8 fields, got {len(parts)}: {line!r}")

    entity_id = _int(parts[0], "entity id")
    tag = parts[1]
    x = _int(parts[2], "x")
    y = _int(parts[3], "y")
    args = [_int(p, "argument") for p in parts[4:]]
    try:
        return make_record(entity_id, tag, x, y, args)
    except ValueError as exc:
        raise ProtocolError(str(exc)) from exc


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise EOFError("host closed input") from None


def read_turn(lines: Iterator[str]) -> Turn:
    """Consume exactly one turn from `lines`."""
    my_ship_count = _int(_next_line(lines).strip(), "ship count")
    entity_count = _int(_next_line(lines).strip(), "entity count")
    if entity_count < 0:
        raise ProtocolError(f"entity count must be >= 0, got {entity_count}")
    records = tuple(parse_entity(_next_line(lines)) for _ in range(entity_count))
    return Turn(my_ship_count=my_ship_count, records=records)


def parse_turn_text(text: str) -> Turn:
    """Parse a whole turn given as one block of text (HTTP service)."""
    lines = iter([ln for ln in text.splitlines() if ln.strip()])
    turn = read_turn(lines)
    leftover = next(lines, None)
    if leftover is not None:
        raise ProtocolError(f"Unexpected trailing line: {leftover!r}")
    return turn


def render_commands(commands: Iterable[Command]) -> list[str]:
    return [c.render() for c in commands]
