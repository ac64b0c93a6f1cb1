from __future__ import annotations

import dataclasses
import math
import unittest

import numpy as np

from scalegraph.errors import GraphConfigError
from scalegraph.scales import ContinuousScale, OrdinalScale, build_scale


class ContinuousScaleTests(unittest.TestCase):
    def test_linear_maps_and_inverts(self) -> None:
        scale = build_scale("linear", (0.0, 10.0), (0.0, 100.0))
        self.assertIsInstance(scale, ContinuousScale)
        self.assertEqual(scale(5.0), 50.0)
        self.assertEqual(scale.invert(25.0), 2.5)
        self.assertTrue(np.allclose(scale(np.asarray([0.0, 2.0, 10.0])), [0.0, 20.0, 100.0]))

    def test_vertical_range_is_inverted(self) -> None:
        scale = build_scale("linear", (0.0, 10.0), (100.0, 0.0))
        self.assertEqual(scale(0.0), 100.0)
        self.assertEqual(scale(10.0), 0.0)
        self.assertEqual(scale.invert(75.0), 2.5)

    def test_power_scale_uses_cubic_exponent(self) -> None:
        scale = build_scale("power", (0.0, 2.0), (0.0, 80.0))
        self.assertAlmostEqual(scale(1.0), 10.0)
        self.assertAlmostEqual(scale.invert(10.0), 1.0)

    def test_log_scale_maps_decades_evenly(self) -> None:
        scale = build_scale("log", (1.0, 100.0), (0.0, 200.0))
        self.assertAlmostEqual(scale(10.0), 100.0)
        self.assertAlmostEqual(scale.invert(100.0), 10.0)

    def test_logarithmic_alias(self) -> None:
        self.assertEqual(build_scale("logarithmic", (1.0, 10.0), (0.0, 1.0)).scale_type, "log")

    def test_degenerate_domain_maps_to_range_start(self) -> None:
        scale = build_scale("linear", (5.0, 5.0), (0.0, 100.0))
        self.assertEqual(scale(5.0), 0.0)
        self.assertEqual(scale.invert(50.0), 5.0)

    def test_non_numeric_values_map_to_nan(self) -> None:
        scale = build_scale("linear", (0.0, 10.0), (0.0, 100.0))
        self.assertTrue(math.isnan(scale("a")))
        out = scale(np.asarray([5, "b", None], dtype=object))
        self.assertEqual(out[0], 50.0)
        self.assertTrue(np.isnan(out[1:]).all())

    def test_continuous_scale_has_no_bands(self) -> None:
        self.assertEqual(build_scale("linear", (0.0, 1.0), (0.0, 1.0)).band_width(), 0.0)

    def test_unknown_scale_type_fails_fast(self) -> None:
        with self.assertRaisesRegex(GraphConfigError, "invalid scale type"):
            build_scale("sqrt", (0.0, 1.0), (0.0, 1.0))

    def test_scales_are_immutable_values(self) -> None:
        scale = build_scale("linear", (0.0, 1.0), (0.0, 10.0))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            scale.domain = (0.0, 2.0)  # type: ignore[misc]
        self.assertEqual(scale, build_scale("linear", (0.0, 1.0), (0.0, 10.0)))


class OrdinalScaleTests(unittest.TestCase):
    def test_contiguous_bands_without_padding(self) -> None:
        scale = build_scale("ordinal", ("a", "b", "c"), (0.0, 300.0), padding=0.0, outer_padding=0.0)
        self.assertIsInstance(scale, OrdinalScale)
        self.assertEqual(scale.band_starts(), (0.0, 100.0, 200.0))
        self.assertEqual(scale.band_width(), 100.0)
        self.assertEqual(scale("b"), 100.0)
        self.assertFalse(scale.invertible)

    def test_padded_bands_are_rounded_to_whole_pixels(self) -> None:
        scale = build_scale("ordinal", ("a", "b", "c"), (0.0, 300.0), padding=0.1, outer_padding=0.1)
        self.assertEqual(scale.band_starts(), (11.0, 107.0, 203.0))
        self.assertEqual(scale.band_width(), 86.0)

    def test_reversed_range_reverses_bands(self) -> None:
        scale = build_scale("ordinal", ("a", "b", "c"), (300.0, 0.0), padding=0.0, outer_padding=0.0)
        self.assertEqual(scale("a"), 200.0)
        self.assertEqual(scale("c"), 0.0)

    def test_unknown_category_maps_to_nan(self) -> None:
        scale = build_scale("ordinal", ("a",), (0.0, 10.0))
        self.assertTrue(math.isnan(scale("z")))

    def test_sequences_map_elementwise(self) -> None:
        scale = build_scale("ordinal", ("a", "b"), (0.0, 200.0), padding=0.0, outer_padding=0.0)
        self.assertTrue(np.array_equal(scale(["b", "a"]), np.asarray([100.0, 0.0])))

    def test_duplicate_categories_each_take_a_band(self) -> None:
        # Duplicates are not collapsed: three entries give three bands, and a
        # repeated category resolves to its first band.
        scale = build_scale("ordinal", ("a", "b", "a"), (0.0, 300.0), padding=0.0, outer_padding=0.0)
        self.assertEqual(len(scale.band_starts()), 3)
        self.assertEqual(scale.band_width(), 100.0)
        self.assertEqual(scale("a"), 0.0)

    def test_empty_domain_has_no_bands(self) -> None:
        scale = build_scale("ordinal", (), (0.0, 300.0))
        self.assertEqual(scale.band_width(), 0.0)
        self.assertEqual(scale.band_starts(), ())

    def test_padding_must_be_a_fraction(self) -> None:
        with self.assertRaises(GraphConfigError):
            OrdinalScale(domain=("a",), range=(0.0, 10.0), padding=1.0)


if __name__ == "__main__":
    unittest.main()
