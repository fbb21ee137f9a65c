"""Tests for the footprint engine, label anchors and element factories."""

from __future__ import annotations

import unittest

from pinrow import pinrow, LabelPosition
from pinrow.elements import (
    PlatedHole, SilkscreenText, plated_hole, silkscreen_pin, silkscreen_ref,
)
from pinrow.layout import Pin, LabelAnchor, label_anchor, anchor_offset, layout_pins
from pinrow.params import parse_params


class TestLabelAnchors(unittest.TestCase):

    def setUp(self):
        self.pin = Pin(number=3, x=2.0, y=-1.0)

    def test_right(self):
        a = label_anchor(self.pin, 1.5, LabelPosition.RIGHT)
        self.assertAlmostEqual(a.x, 3.125)
        self.assertAlmostEqual(a.y, -1.0)

    def test_up_is_negative_y(self):
        a = label_anchor(self.pin, 1.5, LabelPosition.UP)
        self.assertAlmostEqual(a.x, 2.0)
        self.assertAlmostEqual(a.y, -2.125)

    def test_left_and_down(self):
        self.assertEqual(anchor_offset(LabelPosition.LEFT, 1.5), (-1.125, 0))
        self.assertEqual(anchor_offset(LabelPosition.DOWN, 1.5), (0, 1.125))

    def test_accepts_plain_string(self):
        self.assertEqual(anchor_offset("Right", 2.0), (1.5, 0))

    def test_font_size_and_passthrough(self):
        a = label_anchor(self.pin, 1.5, LabelPosition.UP, rotation=270)
        self.assertEqual(a.pin_number, 3)
        self.assertEqual(a.rotation, 270)
        self.assertAlmostEqual(a.font_size, 0.3)


class TestElementFactories(unittest.TestCase):

    def test_plated_hole(self):
        h = plated_hole(7, 1.0, -2.0, 1.0, 1.5)
        self.assertEqual(h.shape, "circle")
        self.assertEqual(h.port_hints, ["7"])
        self.assertEqual(h.layers, ("top", "bottom"))

    def test_silkscreen_pin_text(self):
        t = silkscreen_pin(LabelAnchor(pin_number=12, x=0.5, y=0.25, rotation=90, font_size=0.3))
        self.assertEqual(t.text, "{pin12}")
        self.assertEqual(t.ccw_rotation, 90)
        self.assertEqual((t.x, t.y), (0.5, 0.25))
        self.assertEqual(t.anchor_alignment, "center")

    def test_silkscreen_ref(self):
        t = silkscreen_ref(0, 2.54)
        self.assertEqual(t.text, "{REF}")
        self.assertEqual(t.font_size, 0.5)
        self.assertEqual(t.layer, "top")


class TestPinrowEngine(unittest.TestCase):

    def test_defaults(self):
        result = pinrow()
        self.assertEqual(len(result.elements), 13)
        self.assertEqual(result.parameters.num_pins, 6)
        self.assertEqual(result.parameters.rows, 1)
        self.assertAlmostEqual(result.parameters.p, 2.54)

    def test_element_order(self):
        """Hole, its label, hole, its label, ..., then the reference."""
        result = pinrow({"num_pins": 3})
        kinds = [type(e) for e in result.elements]
        self.assertEqual(kinds, [
            PlatedHole, SilkscreenText,
            PlatedHole, SilkscreenText,
            PlatedHole, SilkscreenText,
            SilkscreenText,
        ])
        for i, hole in enumerate(result.holes, start=1):
            self.assertEqual(hole.pin_number, i)
            self.assertEqual(result.elements[2 * i - 1].text, f"{{pin{i}}}")
        self.assertEqual(result.elements[-1].text, "{REF}")

    def test_element_count(self):
        for n in (1, 2, 5, 16, 33):
            for rows in (1, 2, 3, 4):
                result = pinrow({"num_pins": n, "rows": rows})
                self.assertEqual(len(result.elements), 2 * n + 1, (n, rows))

    def test_hole_dimensions_from_params(self):
        result = pinrow({"num_pins": 2, "id": "0.8mm", "od": 1.2})
        for hole in result.holes:
            self.assertAlmostEqual(hole.hole_diameter, 0.8)
            self.assertAlmostEqual(hole.outer_diameter, 1.2)

    def test_label_follows_pin(self):
        result = pinrow({
            "num_pins": 8, "rows": 2, "p": 1, "od": 1.5,
            "labelposition": "Right", "labelrotation": "90",
        })
        for hole, label in zip(result.elements[0:-1:2], result.elements[1:-1:2]):
            self.assertAlmostEqual(label.x, hole.x + 1.125)
            self.assertAlmostEqual(label.y, hole.y)
            self.assertEqual(label.ccw_rotation, 90)
            self.assertAlmostEqual(label.font_size, 0.3)

    def test_reference_above_pins(self):
        result = pinrow({"num_pins": 20, "rows": 4, "p": "2mm"})
        ref = result.elements[-1]
        self.assertEqual((ref.x, ref.y), (0, 2.0))
        self.assertEqual(ref.font_size, 0.5)

    def test_parameters_returned_normalised(self):
        result = pinrow({"num_pins": 4, "rows": "2", "labelrotation": "180", "female": True})
        params = result.parameters
        self.assertEqual(params.rows, 2)
        self.assertEqual(params.labelrotation, 180)
        self.assertFalse(params.male)
        self.assertTrue(params.female)

    def test_accepts_params_object(self):
        params = parse_params({"num_pins": 4})
        self.assertIs(pinrow(params).parameters, params)

    def test_layout_pins_matches_holes(self):
        params = parse_params({"num_pins": 9, "rows": 3, "p": 1})
        pins = layout_pins(params)
        holes = pinrow(params).holes
        self.assertEqual(
            [(p.number, p.x, p.y) for p in pins],
            [(h.pin_number, h.x, h.y) for h in holes],
        )

    def test_deterministic(self):
        a = pinrow({"num_pins": 11, "rows": 3})
        b = pinrow({"num_pins": 11, "rows": 3})
        self.assertEqual(a.elements, b.elements)


if __name__ == "__main__":
    unittest.main()
