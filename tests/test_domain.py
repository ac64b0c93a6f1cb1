from __future__ import annotations

import unittest

from scalegraph.domain import nice_domain, nice_step, resolve_bound, resolve_domain, validate_mode
from scalegraph.errors import GraphConfigError
from scalegraph.extent import Extent


class NiceRoundingTests(unittest.TestCase):
    def test_step_comes_from_one_two_five_family(self) -> None:
        self.assertEqual(nice_step(0.0, 93.0, 5), 20.0)
        self.assertEqual(nice_step(0.0, 100.0, 10), 10.0)
        self.assertEqual(nice_step(0.0, 1000.0, 2), 500.0)

    def test_zero_span_has_no_step(self) -> None:
        self.assertEqual(nice_step(4.0, 4.0, 5), 0.0)
        self.assertEqual(nice_domain(4.0, 4.0, 5), (4.0, 4.0))

    def test_nice_domain_rounds_outward(self) -> None:
        self.assertEqual(nice_domain(0.0, 93.0, 5), (0.0, 100.0))
        self.assertEqual(nice_domain(-7.0, 93.0, 5), (-20.0, 100.0))

    def test_nice_domain_avoids_float_drift(self) -> None:
        self.assertEqual(nice_domain(0.05, 0.93, 5), (0.0, 1.0))

    def test_log_nice_domain_uses_powers_of_ten(self) -> None:
        self.assertEqual(nice_domain(3.0, 450.0, 5, "log"), (1.0, 1000.0))


class ResolveBoundTests(unittest.TestCase):
    def test_auto_tracks_extent(self) -> None:
        extent = Extent(1.0, 5.0)
        self.assertEqual(resolve_bound(100.0, side="min", mode="auto", extent=extent), 1.0)
        self.assertEqual(resolve_bound(-100.0, side="max", mode="auto", extent=extent), 5.0)

    def test_auto_without_data_falls_back(self) -> None:
        self.assertEqual(resolve_bound(7.0, side="min", mode="auto", extent=None), 0.0)
        self.assertEqual(resolve_bound(7.0, side="max", mode="auto", extent=None), 1.0)

    def test_fixed_ignores_extent(self) -> None:
        self.assertEqual(resolve_bound(2.0, side="max", mode="fixed", extent=Extent(0.0, 50.0)), 2.0)

    def test_push_only_widens(self) -> None:
        self.assertEqual(resolve_bound(5.0, side="max", mode="push", extent=Extent(0.0, 3.0)), 5.0)
        self.assertEqual(resolve_bound(5.0, side="max", mode="push", extent=Extent(0.0, 9.0)), 9.0)

    def test_push_max_is_monotonic_over_updates(self) -> None:
        bound = 5.0
        seen = []
        for new_max in (3.0, 9.0, 4.0, 12.0, 7.0):
            bound = resolve_bound(bound, side="max", mode="push", extent=Extent(0.0, new_max))
            seen.append(bound)
        self.assertEqual(seen, [5.0, 9.0, 9.0, 12.0, 12.0])

    def test_push_min_is_monotonic_over_updates(self) -> None:
        bound = 0.0
        seen = []
        for new_min in (2.0, -1.0, 0.5, -4.0):
            bound = resolve_bound(bound, side="min", mode="push", extent=Extent(new_min, 10.0))
            seen.append(bound)
        self.assertEqual(seen, [0.0, -1.0, -1.0, -4.0])

    def test_push_without_committed_value_takes_extent(self) -> None:
        self.assertEqual(resolve_bound(None, side="min", mode="push", extent=Extent(2.0, 3.0)), 2.0)
        self.assertIsNone(resolve_bound(None, side="min", mode="push", extent=None))

    def test_push_tick_snaps_to_nice_value(self) -> None:
        bound = resolve_bound(50.0, side="max", mode="push-tick", extent=Extent(0.0, 93.0), tick_count=5)
        self.assertEqual(bound, 100.0)
        self.assertGreaterEqual(bound, 93.0)
        self.assertEqual(bound % 20.0, 0.0)

    def test_push_tick_keeps_bound_unless_crossed(self) -> None:
        bound = resolve_bound(100.0, side="max", mode="push-tick", extent=Extent(0.0, 95.0), tick_count=5)
        self.assertEqual(bound, 100.0)

    def test_push_tick_min_rounds_down(self) -> None:
        bound = resolve_bound(10.0, side="min", mode="push-tick", extent=Extent(-7.0, 93.0), tick_count=5)
        self.assertEqual(bound, -20.0)

    def test_unknown_mode_rejected(self) -> None:
        with self.assertRaises(GraphConfigError):
            validate_mode("sticky")
        with self.assertRaises(GraphConfigError):
            resolve_bound(1.0, side="min", mode="sticky", extent=Extent(0.0, 1.0))


class ResolveDomainTests(unittest.TestCase):
    def test_log_domain_is_clamped_positive(self) -> None:
        self.assertEqual(resolve_domain([], -2.0, 50.0, "log"), (1.0, 50.0))
        self.assertEqual(resolve_domain([], -2.0, 0.0, "logarithmic"), (1.0, 1.0))

    def test_missing_bounds_use_defaults(self) -> None:
        self.assertEqual(resolve_domain([], None, None, "linear"), (0.0, 1.0))

    def test_ordinal_domain_keeps_duplicates(self) -> None:
        self.assertEqual(resolve_domain(["a", "b", "a"], None, None, "ordinal"), ("a", "b", "a"))

    def test_inverted_bounds_are_collapsed_with_warning(self) -> None:
        with self.assertLogs("scalegraph.domain", level="WARNING"):
            domain = resolve_domain([], 10.0, 5.0, "linear")
        self.assertEqual(domain, (10.0, 10.0))


if __name__ == "__main__":
    unittest.main()
