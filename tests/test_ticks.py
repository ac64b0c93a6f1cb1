from __future__ import annotations

import unittest

import numpy as np

from scalegraph.scales import build_scale
from scalegraph.ticks import axis_ticks, format_tick, log_tick_values, tick_values


class TickTests(unittest.TestCase):
    def test_tick_values_stay_inside_domain(self) -> None:
        self.assertTrue(np.array_equal(tick_values(0.0, 100.0, 5), [0.0, 20.0, 40.0, 60.0, 80.0, 100.0]))
        self.assertTrue(np.array_equal(tick_values(3.0, 93.0, 5), [20.0, 40.0, 60.0, 80.0]))

    def test_tick_formatting_uses_step_decimals(self) -> None:
        self.assertEqual(format_tick(0.30000000000000004, step=0.1), "0.3")
        self.assertEqual(format_tick(20.0, step=20.0), "20")
        self.assertEqual(format_tick(-4.4409e-16, step=1.0), "0")
        self.assertEqual(format_tick(2.5e7, step=5e6), "2.5000e+07")
        self.assertEqual(format_tick(0.05, step=0.05), "0.05")

    def test_log_ticks_are_decades(self) -> None:
        self.assertTrue(np.array_equal(log_tick_values(1.0, 1000.0), [1.0, 10.0, 100.0, 1000.0]))
        self.assertEqual(log_tick_values(-1.0, 10.0).size, 0)

    def test_log_axis_tick_labels(self) -> None:
        ticks = axis_ticks(build_scale("log", (0.01, 100.0), (0.0, 400.0)), 5)
        self.assertEqual([t.label for t in ticks], ["0.01", "0.1", "1", "10", "100"])

    def test_linear_axis_ticks_carry_pixel_positions(self) -> None:
        ticks = axis_ticks(build_scale("linear", (0.0, 100.0), (0.0, 200.0)), 5)
        self.assertEqual([t.position for t in ticks], [0.0, 40.0, 80.0, 120.0, 160.0, 200.0])
        self.assertEqual(ticks[1].label, "20")

    def test_ordinal_axis_ticks_sit_mid_band(self) -> None:
        scale = build_scale("ordinal", ("a", "b", "c"), (0.0, 300.0), padding=0.0, outer_padding=0.0)
        ticks = axis_ticks(scale, 5)
        self.assertEqual([t.position for t in ticks], [50.0, 150.0, 250.0])
        self.assertEqual([t.label for t in ticks], ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
