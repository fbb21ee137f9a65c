"""Layout: positions, numbers and labels every pin of a pin-row footprint.

Submodules:
  models        Value types (Scheme, LayoutPlan, Pin, LabelAnchor) and errors.
  schemes       Numbering scheme selection from the pin grid shape.
  generator     Cell walks per scheme, overlap tracking, pin placement.
  anchors       Label anchor offsets.
  engine        Main entry (pinrow) assembling holes and labels.
  serialization JSON conversion (footprint_to_dict, parse_footprint).
"""

from .models import (
    Scheme, LayoutPlan, Pin, LabelAnchor,
    PinLayoutError, PositionCollisionError, PinCountMismatchError,
)
from .schemes import select_scheme, pins_per_row
from .generator import place_pins, PositionSet
from .anchors import label_anchor, anchor_offset
from .engine import pinrow, layout_pins, FootprintResult
from .serialization import (
    element_to_dict, footprint_to_dict, parse_element, parse_footprint,
)

__all__ = [
    # Models
    "Scheme", "LayoutPlan", "Pin", "LabelAnchor",
    "PinLayoutError", "PositionCollisionError", "PinCountMismatchError",
    # Schemes
    "select_scheme", "pins_per_row",
    # Generator
    "place_pins", "PositionSet",
    # Anchors
    "label_anchor", "anchor_offset",
    # Engine
    "pinrow", "layout_pins", "FootprintResult",
    # Serialization
    "element_to_dict", "footprint_to_dict", "parse_element", "parse_footprint",
]
