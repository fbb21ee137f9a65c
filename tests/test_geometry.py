"""Tests for copper geometry checks."""

from __future__ import annotations

import unittest

from pinrow import pinrow
from pinrow.elements import plated_hole
from pinrow.geometry import copper_overlaps, footprint_bounds, hole_outline


class TestCopperGeometry(unittest.TestCase):

    def test_hole_outline_area(self):
        disc = hole_outline(plated_hole(1, 0, 0, 1.0, 2.0))
        self.assertAlmostEqual(disc.area, 3.14159, places=1)
        self.assertTrue(disc.contains(hole_outline(plated_hole(1, 0, 0, 0.5, 1.0))))

    def test_bounds_single_row(self):
        result = pinrow({"num_pins": 3, "p": 2, "od": 1.5})
        xmin, ymin, xmax, ymax = footprint_bounds(result.elements)
        self.assertAlmostEqual(xmin, -2.75, places=6)
        self.assertAlmostEqual(xmax, 2.75, places=6)
        self.assertAlmostEqual(ymin, -0.75, places=6)
        self.assertAlmostEqual(ymax, 0.75, places=6)

    def test_bounds_dual_row(self):
        result = pinrow({"num_pins": 6, "rows": 2, "p": 2, "od": 1.0})
        _, ymin, _, ymax = footprint_bounds(result.elements)
        self.assertAlmostEqual(ymin, -2.5, places=6)
        self.assertAlmostEqual(ymax, 0.5, places=6)

    def test_bounds_requires_holes(self):
        with self.assertRaises(ValueError):
            footprint_bounds([])

    def test_default_header_is_clear(self):
        self.assertEqual(copper_overlaps(pinrow().elements), [])

    def test_tight_pitch_overlaps(self):
        result = pinrow({"num_pins": 4, "p": 1, "od": 1.5})
        self.assertEqual(copper_overlaps(result.elements), [(1, 2), (2, 3), (3, 4)])

    def test_tight_dual_row_overlaps(self):
        """Spiral numbering: pin 1 sits above pin 2 and beside pin 4."""
        result = pinrow({"num_pins": 4, "rows": 2, "p": 1, "od": 1.2})
        self.assertEqual(copper_overlaps(result.elements), [(1, 2), (1, 4), (2, 3), (3, 4)])


if __name__ == "__main__":
    unittest.main()
