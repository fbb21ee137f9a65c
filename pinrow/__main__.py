"""
pinrow command-line entry point.

Usage:
    python -m pinrow --num-pins 8 --rows 2
    python -m pinrow --num-pins 10 --pitch 2mm --od 1.8 --label-position Right --female
    python -m pinrow --num-pins 6 --pitch 1mm --check-clearance
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from pinrow.geometry import copper_overlaps
from pinrow.layout import PinLayoutError, footprint_to_dict, pinrow
from pinrow.params import LabelPosition


log = logging.getLogger("pinrow")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pinrow", description="Generate a pin header footprint as circuit JSON",
    )
    p.add_argument("--num-pins", type=int, default=None, help="Total pin count (default 6)")
    p.add_argument("--rows", default=None, help="Number of rows (default 1)")
    p.add_argument("--pitch", default=None, help="Pin pitch, e.g. 2.54mm or 0.1in")
    p.add_argument("--id", dest="inner_diameter", default=None, help="Hole (inner) diameter")
    p.add_argument("--od", dest="outer_diameter", default=None, help="Pad (outer) diameter")

    gender = p.add_mutually_exclusive_group()
    gender.add_argument("--male", action="store_true", default=None, help="Male pin header")
    gender.add_argument("--female", action="store_true", default=None, help="Female pin header")

    p.add_argument("--label-rotation", choices=["0", "90", "180", "270"], default=None,
                   help="Pin label rotation in degrees")
    p.add_argument("--label-position", choices=[lp.value for lp in LabelPosition], default=None,
                   help="Side of each pin its label is drawn on")
    p.add_argument("--check-clearance", action="store_true",
                   help="Warn about pads whose copper rings overlap")
    p.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def params_from_args(args: argparse.Namespace) -> dict:
    """Collect the parameters that were given on the command line."""
    raw = {
        "num_pins": args.num_pins,
        "rows": args.rows,
        "p": args.pitch,
        "id": args.inner_diameter,
        "od": args.outer_diameter,
        "male": args.male,
        "female": args.female,
        "labelrotation": args.label_rotation,
        "labelposition": args.label_position,
    }
    return {k: v for k, v in raw.items() if v is not None}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = pinrow(params_from_args(args))
    except ValidationError as e:
        print(f"Invalid parameters:\n{e}", file=sys.stderr)
        return 2
    except PinLayoutError as e:
        print(f"Layout failed: {e}", file=sys.stderr)
        return 2

    if args.check_clearance:
        for a, b in copper_overlaps(result.elements):
            log.warning("Copper of pins %d and %d overlaps", a, b)

    print(json.dumps(footprint_to_dict(result), indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
