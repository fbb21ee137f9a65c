"""Footprint primitives: plated holes and silkscreen text.

The layout engine never builds these by hand; it goes through the
factory functions below so every element of a given kind is shaped the
same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pinrow.config import LAYOUT_RULES
from pinrow.layout.models import LabelAnchor


@dataclass(frozen=True)
class PlatedHole:
    """A circular through-hole pad."""

    pin_number: int
    x: float
    y: float
    hole_diameter: float
    outer_diameter: float
    shape: str = "circle"
    layers: tuple[str, ...] = ("top", "bottom")

    @property
    def port_hints(self) -> list[str]:
        return [str(self.pin_number)]


@dataclass(frozen=True)
class SilkscreenText:
    """A text element on the top silkscreen, anchored at its centre."""

    text: str
    x: float
    y: float
    font_size: float
    ccw_rotation: int = 0
    anchor_alignment: str = "center"
    layer: str = "top"


Element = Union[PlatedHole, SilkscreenText]


def plated_hole(
    pin_number: int,
    x: float, y: float,
    hole_diameter: float,
    outer_diameter: float,
) -> PlatedHole:
    """Build the copper pad for one pin."""
    return PlatedHole(
        pin_number=pin_number,
        x=x, y=y,
        hole_diameter=hole_diameter,
        outer_diameter=outer_diameter,
    )


def silkscreen_pin(anchor: LabelAnchor) -> SilkscreenText:
    """Build the number label for one pin from its computed anchor."""
    return SilkscreenText(
        text=f"{{pin{anchor.pin_number}}}",
        x=anchor.x,
        y=anchor.y,
        font_size=anchor.font_size,
        ccw_rotation=anchor.rotation,
    )


def silkscreen_ref(
    x: float, y: float,
    font_size: float = LAYOUT_RULES.ref_font_size,
) -> SilkscreenText:
    """Build the reference designator label."""
    return SilkscreenText(
        text=LAYOUT_RULES.ref_text,
        x=x, y=y,
        font_size=font_size,
    )
