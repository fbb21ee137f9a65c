"""Label anchors: where each pin's number label sits relative to the pin."""

from __future__ import annotations

from pinrow.config import LAYOUT_RULES
from pinrow.params import LabelPosition

from .models import LabelAnchor, Pin


# Unit offset per label position.  "Up" is negative Y, matching the
# direction rows advance in.
_DIRECTIONS: dict[LabelPosition, tuple[int, int]] = {
    LabelPosition.RIGHT: (1, 0),
    LabelPosition.LEFT: (-1, 0),
    LabelPosition.UP: (0, -1),
    LabelPosition.DOWN: (0, 1),
}


def anchor_offset(
    label_position: LabelPosition, outer_diameter: float,
) -> tuple[float, float]:
    """Return (dx, dy) from a pin centre to its label anchor."""
    offset = LAYOUT_RULES.label_offset(outer_diameter)
    ux, uy = _DIRECTIONS[LabelPosition(label_position)]
    return ux * offset, uy * offset


def label_anchor(
    pin: Pin,
    outer_diameter: float,
    label_position: LabelPosition,
    rotation: int = 0,
) -> LabelAnchor:
    """Compute the label anchor for ``pin``."""
    dx, dy = anchor_offset(label_position, outer_diameter)
    return LabelAnchor(
        pin_number=pin.number,
        x=pin.x + dx,
        y=pin.y + dy,
        rotation=rotation,
        font_size=LAYOUT_RULES.label_font_size(outer_diameter),
    )
