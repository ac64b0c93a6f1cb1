from __future__ import annotations

import unittest

from scalegraph.pointer import OUTSIDE, PointerPosition, hover_point, hover_value
from scalegraph.scales import build_scale


class PointerMapperTests(unittest.TestCase):
    def setUp(self) -> None:
        self.linear = build_scale("linear", (0.0, 10.0), (0.0, 100.0))
        self.ordinal = build_scale("ordinal", ("a", "b"), (0.0, 100.0))

    def test_inverts_continuous_scale(self) -> None:
        self.assertEqual(hover_value(self.linear, 25.0), 2.5)

    def test_outside_sentinel_reports_nothing(self) -> None:
        self.assertIsNone(hover_value(self.linear, OUTSIDE))
        self.assertEqual(hover_point(PointerPosition(), self.linear, self.linear), (None, None))

    def test_one_outside_coordinate_clears_both(self) -> None:
        self.assertEqual(hover_point(PointerPosition(x=OUTSIDE, y=40.0), self.linear, self.linear), (None, None))

    def test_ordinal_axis_never_hovers(self) -> None:
        self.assertEqual(hover_point(PointerPosition(x=50.0, y=50.0), self.ordinal, self.linear), (None, 5.0))

    def test_non_finite_inversion_is_dropped(self) -> None:
        self.assertIsNone(hover_value(self.linear, float("nan")))
        log = build_scale("log", (1.0, 1e300), (0.0, 1.0))
        self.assertIsNone(hover_value(log, 1e6))

    def test_missing_scale(self) -> None:
        self.assertIsNone(hover_value(None, 10.0))


if __name__ == "__main__":
    unittest.main()
