"""Shared layout constants for the pin-row footprint generator.

These values describe how pin labels and the reference designator are
sized and positioned relative to the copper, plus the defaults the
parameter layer falls back to.  Both the **parameter** layer and the
**layout** engine read from this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LayoutRules:
    """Label placement rules and parameter defaults.

    All distances are in millimetres unless they are length strings,
    which are parsed by ``pinrow.params.parse_length``.
    """

    label_offset_factor: float = 0.75
    """Distance from pin centre to label anchor, as a fraction of the
    outer (copper) diameter."""

    label_font_divisor: float = 5.0
    """Pin label font size is ``outer_diameter / label_font_divisor``."""

    ref_font_size: float = 0.5
    """Font size of the reference designator text."""

    ref_text: str = "{REF}"

    # ── Parameter defaults ─────────────────────────────────────────

    default_num_pins: int = 6
    default_rows: int = 1
    default_pitch: str = "0.1in"
    default_inner_diameter: str = "1.0mm"
    default_outer_diameter: str = "1.5mm"

    length_units_mm: dict[str, float] = field(default_factory=lambda: {
        "mm": 1.0,
        "cm": 10.0,
        "in": 25.4,
        "mil": 0.0254,
    })
    """Millimetres per unit for suffixed length strings."""

    # ── Derived helpers ────────────────────────────────────────────

    def label_offset(self, outer_diameter: float) -> float:
        """Distance from a pin centre to its label anchor."""
        return outer_diameter * self.label_offset_factor

    def label_font_size(self, outer_diameter: float) -> float:
        """Font size used for a pin's number label."""
        return outer_diameter / self.label_font_divisor


# Module-level singleton, importable everywhere.
LAYOUT_RULES = LayoutRules()
