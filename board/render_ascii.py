from __future__ import annotations

from board.facing import Facing
from board.hazards import HazardField
from board.hexgrid import BOARD_HEIGHT, BOARD_WIDTH, Cell
from board.world import World


def facing_glyph(facing: Facing) -> str:
    return {
        Facing.E: ">",
        Facing.NE: "/",
        Facing.NW: "\\",
        Facing.W: "<",
        Facing.SW: "L",
        Facing.SE: "J",
    }[Facing(int(facing))]


def render_board_ascii(world: World, field: HazardField, *, empty: str = "..") -> str:
    """Render the whole board (2-char cells), fixed-width.

    Legend:
      M<glyph> / E<glyph>  own / enemy ship center with facing
      m. / e.              own / enemy bow or stern
      B#                   barrel (last digit of rum)
      X.                   mine
      !n                   cannonball lands in n ticks
    Odd rows are indented one column to show the half-cell shift.
    """
    if len(empty) != 2:
        raise ValueError("empty must be exactly 2 characters")

    marks: dict[Cell, str] = {}
    for cell, ticks in field.fire.items():
        marks[cell] = "!" + (str(ticks) if ticks < 10 else "+")
    for cell in field.mines:
        marks[cell] = "X."
    for barrel in world.live_barrels():
        marks[barrel.cell] = "B" + str(barrel.quantity % 10)
    for ship in world.live_ships():
        side = "M" if ship.mine else "E"
        for cell in (ship.stern(), ship.bow()):
            marks.setdefault(cell, side.lower() + ".")
        marks[ship.cell] = side + facing_glyph(ship.facing)

    lines: list[str] = []
    header_nums = [f"{x:>3}" for x in range(BOARD_WIDTH)]
    lines.append("      " + "".join(header_nums))
    for y in range(BOARD_HEIGHT):
        indent = " " if y & 1 else ""
        row = [f"y={y:>2} " + indent]
        for x in range(BOARD_WIDTH):
            row.append(f" {marks.get(Cell(x, y), empty)}")
        lines.append("".join(row))
    return "\n".join(lines)
