"""Footprint engine: turn pin-row parameters into footprint elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pinrow.config import LAYOUT_RULES
from pinrow.elements import (
    Element, PlatedHole, plated_hole, silkscreen_pin, silkscreen_ref,
)
from pinrow.params import PinRowParams, parse_params

from .anchors import label_anchor
from .generator import place_pins
from .models import Pin
from .schemes import select_scheme


log = logging.getLogger(__name__)


@dataclass
class FootprintResult:
    """Generated elements plus the normalised parameters they came from."""

    elements: list[Element]
    parameters: PinRowParams

    @property
    def holes(self) -> list[PlatedHole]:
        return [e for e in self.elements if isinstance(e, PlatedHole)]


def layout_pins(params: PinRowParams) -> list[Pin]:
    """Number and position every pin of a pin-row footprint."""
    plan = select_scheme(params.num_pins, params.rows)
    log.debug("pinrow: %d pins in %d rows -> %s",
              params.num_pins, params.rows, plan.scheme.value)
    return place_pins(plan, params.p)


def pinrow(raw_params: PinRowParams | dict | None = None) -> FootprintResult:
    """Generate a pin header / pin row footprint.

    Parameters
    ----------
    raw_params : dict or PinRowParams
        Raw or already-validated parameters.  See ``PinRowParams`` for
        the fields and defaults.

    Returns
    -------
    FootprintResult
        For each pin a plated hole followed by its number label, then
        a single reference designator label.

    Raises
    ------
    pydantic.ValidationError
        If the parameters are malformed.
    PinLayoutError
        If pin placement is inconsistent (overlap or missing pins).
    """
    params = parse_params(raw_params)
    elements: list[Element] = []

    for pin in layout_pins(params):
        elements.append(plated_hole(pin.number, pin.x, pin.y, params.id, params.od))
        anchor = label_anchor(
            pin, params.od, params.labelposition, params.labelrotation,
        )
        elements.append(silkscreen_pin(anchor))

    elements.append(silkscreen_ref(0, params.p, LAYOUT_RULES.ref_font_size))

    return FootprintResult(elements=elements, parameters=params)
