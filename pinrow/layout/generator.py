"""Coordinate generation: walk the pin grid and assign pin numbers.

Each numbering scheme is a generator of ``(row, col)`` grid cells in pin
order.  ``place_pins`` numbers the cells 1..N, converts them to mm and
checks every position against the ones already taken.

Grid conventions:
  - columns are centred on x = 0, ``pitch`` apart
  - row 0 is at y = 0, rows advance towards negative Y
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from .models import (
    LayoutPlan, Pin, Scheme,
    PositionCollisionError, PinCountMismatchError,
)


log = logging.getLogger(__name__)

Cell = tuple[int, int]      # (row, col)


# ── Cell walks, one per scheme ─────────────────────────────────────


def single_row_cells(plan: LayoutPlan) -> Iterator[Cell]:
    """Pins 1..N left to right along row 0."""
    for col in range(plan.num_pins):
        yield 0, col


def grid_cells(plan: LayoutPlan) -> Iterator[Cell]:
    """Row-major: left to right within a row, rows top to bottom.

    The caller stops consuming after ``num_pins`` cells, so a partial
    last row stays left-aligned.
    """
    for row in range(plan.rows):
        for col in range(plan.pins_per_row):
            yield row, col


def spiral_cells(plan: LayoutPlan) -> Iterator[Cell]:
    """Counter-clockwise perimeter walk, peeling the grid inward.

    Each lap runs four phases over the boundary registers
    ``top``/``bottom``/``left``/``right``, shrinking one edge after each
    phase.  The right-column and top-row phases are skipped once the
    boundaries have crossed, so no cell is visited twice.
    """
    top, bottom = 0, plan.rows - 1
    left, right = 0, plan.pins_per_row - 1

    while top <= bottom and left <= right:
        # Left column, top to bottom
        for row in range(top, bottom + 1):
            yield row, left
        left += 1

        # Bottom row, left to right
        for col in range(left, right + 1):
            yield bottom, col
        bottom -= 1

        # Right column, bottom to top
        if left <= right:
            for row in range(bottom, top - 1, -1):
                yield row, right
            right -= 1

        # Top row, right to left
        if top <= bottom:
            for col in range(right, left - 1, -1):
                yield top, col
            top += 1


_CELL_WALKS: dict[Scheme, Callable[[LayoutPlan], Iterator[Cell]]] = {
    Scheme.SINGLE_ROW: single_row_cells,
    Scheme.GRID: grid_cells,
    Scheme.SPIRAL: spiral_cells,
}


# ── Overlap tracking ───────────────────────────────────────────────


class PositionSet:
    """Positions already taken during one ``place_pins`` call.

    Equality is exact; two pins only collide if both coordinates match.
    """

    def __init__(self) -> None:
        self._taken: set[tuple[float, float]] = set()

    def claim(self, x: float, y: float) -> None:
        """Reserve ``(x, y)`` or raise ``PositionCollisionError``."""
        key = (x, y)
        if key in self._taken:
            raise PositionCollisionError(x, y)
        self._taken.add(key)

    def __contains__(self, xy: tuple[float, float]) -> bool:
        return xy in self._taken

    def __len__(self) -> int:
        return len(self._taken)


# ── Main entry ─────────────────────────────────────────────────────


def place_pins(plan: LayoutPlan, pitch: float) -> list[Pin]:
    """Return all pins of ``plan`` in pin-number order.

    Raises
    ------
    PositionCollisionError
        If two pins land on the same coordinate.
    PinCountMismatchError
        If the walk runs out of cells before ``num_pins`` pins are placed.
    """
    x_start = -((plan.pins_per_row - 1) / 2) * pitch
    row_spacing = -pitch

    positions = PositionSet()
    pins: list[Pin] = []
    cells = _CELL_WALKS[plan.scheme](plan)

    # zip() exhausts the range first, so the walk is never advanced
    # past the last pin.
    for number, (row, col) in zip(range(1, plan.num_pins + 1), cells):
        # + 0.0 turns the -0.0 of row 0 into 0.0
        x = x_start + col * pitch + 0.0
        y = row * row_spacing + 0.0
        positions.claim(x, y)
        pins.append(Pin(number=number, x=x, y=y))

    if len(pins) < plan.num_pins:
        raise PinCountMismatchError(len(pins), plan.num_pins)

    log.debug("Placed %d pins (%s, %d×%d grid)",
              len(pins), plan.scheme.value, plan.rows, plan.pins_per_row)
    return pins
