"""pinrow: pin header footprint generator.

Stages, in order:

  params   validate and normalise raw parameters
  layout   choose a numbering scheme, place pins, compute label anchors
  elements plated holes and silkscreen text built from the layout
  geometry optional copper clearance checks on the result
"""

from .params import PinRowParams, LabelPosition, parse_params, parse_length
from .layout import (
    pinrow, FootprintResult,
    PinLayoutError, PositionCollisionError, PinCountMismatchError,
    footprint_to_dict, parse_footprint,
)

__all__ = [
    "PinRowParams", "LabelPosition", "parse_params", "parse_length",
    "pinrow", "FootprintResult",
    "PinLayoutError", "PositionCollisionError", "PinCountMismatchError",
    "footprint_to_dict", "parse_footprint",
]
