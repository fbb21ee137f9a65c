"""Footprint serialization: JSON conversion in circuit-json shape."""

from __future__ import annotations

from typing import Any

from pinrow.elements import Element, PlatedHole, SilkscreenText
from pinrow.params import PinRowParams

from .engine import FootprintResult


def element_to_dict(e: Element) -> dict:
    """Serialize one footprint element to a JSON-safe dict."""
    if isinstance(e, PlatedHole):
        return {
            "type": "pcb_plated_hole",
            "shape": e.shape,
            "x": e.x,
            "y": e.y,
            "hole_diameter": e.hole_diameter,
            "outer_diameter": e.outer_diameter,
            "port_hints": e.port_hints,
            "layers": list(e.layers),
        }
    if isinstance(e, SilkscreenText):
        return {
            "type": "pcb_silkscreen_text",
            "layer": e.layer,
            "text": e.text,
            "font_size": e.font_size,
            "anchor_position": {"x": e.x, "y": e.y},
            "anchor_alignment": e.anchor_alignment,
            "ccw_rotation": e.ccw_rotation,
        }
    raise TypeError(f"Unknown footprint element {type(e).__name__}")


def footprint_to_dict(result: FootprintResult) -> dict:
    """Serialize a FootprintResult to a JSON-safe dict."""
    return {
        "circuitJson": [element_to_dict(e) for e in result.elements],
        "parameters": result.parameters.model_dump(mode="json"),
    }


def parse_element(data: dict) -> Element:
    """Parse one element dict back into a footprint element."""
    kind = data.get("type")
    if kind == "pcb_plated_hole":
        return PlatedHole(
            pin_number=int(data["port_hints"][0]),
            x=float(data["x"]),
            y=float(data["y"]),
            hole_diameter=float(data["hole_diameter"]),
            outer_diameter=float(data["outer_diameter"]),
            shape=data.get("shape", "circle"),
            layers=tuple(data.get("layers", ("top", "bottom"))),
        )
    if kind == "pcb_silkscreen_text":
        anchor: dict[str, Any] = data["anchor_position"]
        return SilkscreenText(
            text=data["text"],
            x=float(anchor["x"]),
            y=float(anchor["y"]),
            font_size=float(data["font_size"]),
            ccw_rotation=int(data.get("ccw_rotation", 0)),
            anchor_alignment=data.get("anchor_alignment", "center"),
            layer=data.get("layer", "top"),
        )
    raise ValueError(f"Unknown element type {kind!r}")


def parse_footprint(data: dict) -> FootprintResult:
    """Parse a ``footprint_to_dict`` dict back into a FootprintResult."""
    return FootprintResult(
        elements=[parse_element(e) for e in data["circuitJson"]],
        parameters=PinRowParams.model_validate(data["parameters"]),
    )
