from __future__ import annotations

import logging
import sys
from typing import Iterator, TextIO

from board.hazards import build_hazard_field
from board.render_ascii import render_board_ascii
from board.world import World
from config import Settings
from protocol import read_turn, render_commands
from tactics.orchestrator import decide_turn

logger = logging.getLogger("naval_bot")


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\n")


def run(stdin: TextIO, stdout: TextIO, settings: Settings) -> int:
    """Play until the host closes stdin. Returns the number of ticks played."""
    world = World()
    lines = _lines(stdin)

    while True:
        try:
            turn = read_turn(lines)
        except EOFError:
            logger.info("input closed after %d ticks", world.tick)
            return world.tick

        world.apply_turn(turn.records, turn.my_ship_count)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("tick %d\n%s", world.tick, render_board_ascii(world, build_hazard_field(world)))

        for out in render_commands(decide_turn(world, settings)):
            print(out, file=stdout)
        stdout.flush()


def main() -> None:
    settings = Settings.from_env()
    # stdout carries commands; diagnostics go to stderr.
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(sys.stdin, sys.stdout, settings)


if __name__ == "__main__":
    main()
