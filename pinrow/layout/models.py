"""Layout value types and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Scheme(Enum):
    """Pin numbering convention."""

    SINGLE_ROW = "single_row"   # 1..N left to right
    GRID = "grid"               # row-major, array packages
    SPIRAL = "spiral"           # down one side, up the other (DIP style)


@dataclass(frozen=True)
class LayoutPlan:
    """Scheme and grid dimensions chosen for one footprint."""

    scheme: Scheme
    num_pins: int
    rows: int
    pins_per_row: int


@dataclass(frozen=True)
class Pin:
    """A numbered pin at its footprint-local position (mm)."""

    number: int
    x: float
    y: float


@dataclass(frozen=True)
class LabelAnchor:
    """Where and how a pin's number label is drawn."""

    pin_number: int
    x: float
    y: float
    rotation: int       # 0, 90, 180, 270
    font_size: float


# ── Errors ─────────────────────────────────────────────────────────


class PinLayoutError(Exception):
    """Base class for fatal pin layout failures."""


class PositionCollisionError(PinLayoutError):
    """Raised when two pins resolve to the same coordinate."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Overlap at {x},{y}")


class PinCountMismatchError(PinLayoutError):
    """Raised when the traversal ends before every pin has a position."""

    def __init__(self, assigned: int, expected: int) -> None:
        self.assigned = assigned
        self.expected = expected
        super().__init__(f"Missing pins: assigned {assigned}, expected {expected}")
