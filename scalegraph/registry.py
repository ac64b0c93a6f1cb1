from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Literal

import numpy as np

from scalegraph.adapters import normalize_values
from scalegraph.errors import PlotDataError


LOGGER = logging.getLogger(__name__)

AxisName = Literal["x", "y"]


@dataclass(frozen=True, eq=False)
class PlotContribution:
    """The x/y values one plot element feeds into the shared scales."""

    name: str
    x_values: np.ndarray
    y_values: np.ndarray

    @classmethod
    def from_values(cls, name: str, x_values: Any, y_values: Any) -> "PlotContribution":
        x_arr = normalize_values(x_values, label="x")
        y_arr = normalize_values(y_values, label="y")
        if x_arr.shape != y_arr.shape:
            raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        return cls(name=name, x_values=x_arr, y_values=y_arr)

    def values(self, axis: AxisName) -> np.ndarray:
        return self.x_values if axis == "x" else self.y_values


class PlotRegistry:
    """Set of mounted plot contributions, kept in registration order."""

    def __init__(self, on_change: Callable[[], None] | None = None) -> None:
        self._contributions: dict[int, PlotContribution] = {}
        self._on_change = on_change or (lambda: None)

    def __len__(self) -> int:
        return len(self._contributions)

    def __contains__(self, contribution: object) -> bool:
        return id(contribution) in self._contributions

    def contributions(self) -> tuple[PlotContribution, ...]:
        return tuple(self._contributions.values())

    def register(self, contribution: PlotContribution) -> None:
        key = id(contribution)
        if key in self._contributions:
            return
        self._contributions[key] = contribution
        LOGGER.debug("registered plot %r (%d mounted)", contribution.name, len(self._contributions))
        self._on_change()

    def unregister(self, contribution: PlotContribution) -> None:
        if self._contributions.pop(id(contribution), None) is None:
            return
        LOGGER.debug("unregistered plot %r (%d mounted)", contribution.name, len(self._contributions))
        self._on_change()

    def replace(self, old: PlotContribution, new: PlotContribution) -> None:
        """Swap ``old`` for ``new`` keeping its registration slot."""
        if id(old) not in self._contributions:
            raise KeyError(f"plot {old.name!r} is not registered")
        self._contributions = {
            (id(new) if key == id(old) else key): (new if key == id(old) else value)
            for key, value in self._contributions.items()
        }
        self._on_change()

    def aggregated(self, axis: AxisName) -> np.ndarray:
        arrays = [c.values(axis) for c in self._contributions.values()]
        if not arrays:
            return np.empty(0, dtype=np.float64)
        if any(arr.dtype == object for arr in arrays):
            return np.concatenate([arr.astype(object) for arr in arrays])
        return np.concatenate(arrays)

    def aggregated_x_data(self) -> np.ndarray:
        return self.aggregated("x")

    def aggregated_y_data(self) -> np.ndarray:
        return self.aggregated("y")
