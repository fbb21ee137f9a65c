"""Scheme selection: pick a numbering convention from the pin grid shape."""

from __future__ import annotations

import math

from .models import LayoutPlan, Scheme


def pins_per_row(num_pins: int, rows: int) -> int:
    """Column count of the logical pin grid."""
    return math.ceil(num_pins / rows)


def select_scheme(num_pins: int, rows: int) -> LayoutPlan:
    """Choose how pins are numbered for a ``rows``-row footprint.

    A single row counts left to right.  Wide and deep grids (array
    packages) count row-major.  Everything else, including every
    two-row header, counts around the perimeter: down the left side,
    along the bottom, up the right side and back along the top.
    """
    cols = pins_per_row(num_pins, rows)
    if rows == 1:
        scheme = Scheme.SINGLE_ROW
    elif rows > 2 and cols > 2:
        scheme = Scheme.GRID
    else:
        scheme = Scheme.SPIRAL
    return LayoutPlan(scheme=scheme, num_pins=num_pins, rows=rows, pins_per_row=cols)
