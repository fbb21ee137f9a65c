"""Parameter layer: validate, default and normalise raw footprint parameters.

Raw parameters arrive as a plain dict (from JSON, the CLI, or a caller)
and may mix numbers and strings: ``rows`` can be ``"2"``, lengths can be
``"0.1in"`` or ``2.54``, and ``labelrotation`` can be ``"90"``.  The
``PinRowParams`` model resolves all of that into one immutable record
with millimetre floats and integer degrees, which is what the layout
engine consumes.

Usage:
    params = parse_params({"num_pins": 8, "rows": "2", "p": "2.54mm"})
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pinrow.config import LAYOUT_RULES


_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([a-zA-Z]*)\s*$")


def parse_length(value: Any) -> float:
    """Convert a length (number in mm, or a string with unit) to mm.

    >>> parse_length("0.1in")
    2.54
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid length {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid length {value!r}")

    m = _LENGTH_RE.match(value)
    if m is None:
        raise ValueError(f"Invalid length {value!r}")
    number, unit = m.groups()
    unit = unit.lower() or "mm"
    units = LAYOUT_RULES.length_units_mm
    if unit not in units:
        raise ValueError(
            f"Unknown length unit '{unit}' in {value!r}, expected one of {sorted(units)}"
        )
    # Round off binary noise such as 0.1 * 25.4 = 2.5400000000000005
    return round(float(number) * units[unit], 9)


class LabelPosition(str, Enum):
    """Side of the pin on which its number label is drawn."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


class PinRowParams(BaseModel):
    """Normalised pin-row footprint parameters.

    Field names follow the footprint parameter vocabulary
    (``p`` = pitch, ``id`` / ``od`` = inner / outer diameter).
    """

    model_config = ConfigDict(frozen=True)

    fn: str = "pinrow"
    num_pins: int = Field(default=LAYOUT_RULES.default_num_pins, ge=1)
    rows: int = Field(
        default=LAYOUT_RULES.default_rows, ge=1, description="number of rows",
    )
    p: float = Field(
        default=LAYOUT_RULES.default_pitch, gt=0,
        validate_default=True, description="pitch",
    )
    id: float = Field(
        default=LAYOUT_RULES.default_inner_diameter, gt=0,
        validate_default=True, description="inner diameter",
    )
    od: float = Field(
        default=LAYOUT_RULES.default_outer_diameter, gt=0,
        validate_default=True, description="outer diameter",
    )
    male: bool = Field(default=True, description="for male pin headers")
    female: bool = Field(default=False, description="for female pin headers")
    labelrotation: Literal[0, 90, 180, 270] = 0
    labelposition: LabelPosition = LabelPosition.UP

    # ── Coercions ──────────────────────────────────────────────────

    @field_validator("rows", mode="before")
    @classmethod
    def _coerce_rows(cls, v: Any) -> Any:
        if isinstance(v, str):
            return float(v.strip())
        return v

    @field_validator("p", "id", "od", mode="before")
    @classmethod
    def _coerce_length(cls, v: Any) -> float:
        return parse_length(v)

    @field_validator("labelrotation", mode="before")
    @classmethod
    def _coerce_rotation(cls, v: Any) -> Any:
        if isinstance(v, str):
            return int(v.strip())
        return v

    @model_validator(mode="before")
    @classmethod
    def _resolve_gender(cls, data: Any) -> Any:
        """Fill in whichever of male/female was left unset."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        male = data.get("male")
        female = data.get("female")
        if male is None:
            data["male"] = not female
        if female is None:
            data["female"] = False
        return data

    @model_validator(mode="after")
    def _check_gender(self) -> PinRowParams:
        if self.male and self.female:
            raise ValueError(
                "'male' and 'female' cannot both be true; it should be male or female."
            )
        return self

    # ── Readable aliases ───────────────────────────────────────────

    @property
    def pitch(self) -> float:
        return self.p

    @property
    def inner_diameter(self) -> float:
        return self.id

    @property
    def outer_diameter(self) -> float:
        return self.od


def parse_params(raw: PinRowParams | dict | None = None) -> PinRowParams:
    """Validate raw parameters, returning a normalised ``PinRowParams``.

    Raises ``pydantic.ValidationError`` on malformed input.
    """
    if isinstance(raw, PinRowParams):
        return raw
    return PinRowParams.model_validate(raw or {})
