"""Copper geometry checks for generated footprints.

These are informational design-rule helpers.  The layout engine itself
only rejects pins at identical coordinates; pads that are merely too
close (outer diameter larger than the pitch) are reported here.
"""

from __future__ import annotations

from typing import Iterable

from shapely.geometry import Point, Polygon
from shapely.ops import unary_union

from pinrow.elements import Element, PlatedHole


def hole_outline(hole: PlatedHole) -> Polygon:
    """Copper disc of a plated hole."""
    return Point(hole.x, hole.y).buffer(hole.outer_diameter / 2)


def _holes(elements: Iterable[Element]) -> list[PlatedHole]:
    return [e for e in elements if isinstance(e, PlatedHole)]


def footprint_bounds(
    elements: Iterable[Element],
) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) of all copper in mm.

    Raises ``ValueError`` if there are no holes.
    """
    holes = _holes(elements)
    if not holes:
        raise ValueError("Footprint has no plated holes")
    return unary_union([hole_outline(h) for h in holes]).bounds


def copper_overlaps(elements: Iterable[Element]) -> list[tuple[int, int]]:
    """Return pin-number pairs whose copper rings touch or overlap.

    Pairs are ordered (lower pin first) and sorted.
    """
    holes = _holes(elements)
    outlines = [hole_outline(h) for h in holes]
    pairs: list[tuple[int, int]] = []
    for i in range(len(holes)):
        for j in range(i + 1, len(holes)):
            # Cheap centre-distance reject before the polygon test
            reach = (holes[i].outer_diameter + holes[j].outer_diameter) / 2
            if (abs(holes[i].x - holes[j].x) > reach
                    or abs(holes[i].y - holes[j].y) > reach):
                continue
            if outlines[i].intersects(outlines[j]):
                a, b = holes[i].pin_number, holes[j].pin_number
                pairs.append((min(a, b), max(a, b)))
    return sorted(pairs)
