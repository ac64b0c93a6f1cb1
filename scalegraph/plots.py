from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from scalegraph.adapters import normalize_xy
from scalegraph.errors import GraphConfigError
from scalegraph.graph import Graph
from scalegraph.registry import PlotContribution


@dataclass(frozen=True)
class BarRect:
    x: float
    y: float
    width: float
    height: float
    datum: tuple[Any, Any]


class PlotElement:
    """Base for data-carrying plot elements."""

    def __init__(self, graph: Graph, y: Any = None, *, x: Any = None, data: Any = None, name: str | None = None) -> None:
        self.graph = graph
        self.name = name or type(self).__name__.lower()
        self.selected = False
        self.contribution = self._contribution(y, x=x, data=data)

    def _contribution(self, y: Any, *, x: Any, data: Any) -> PlotContribution:
        x_arr, y_arr = normalize_xy(y, x=x, data=data)
        return PlotContribution(name=self.name, x_values=x_arr, y_values=y_arr)

    @property
    def mounted(self) -> bool:
        return self.contribution in self.graph.registry

    def mount(self) -> "PlotElement":
        self.graph.register(self.contribution)
        return self

    def unmount(self) -> "PlotElement":
        self.graph.unregister(self.contribution)
        return self

    def set_data(self, y: Any = None, *, x: Any = None, data: Any = None) -> "PlotElement":
        new = self._contribution(y, x=x, data=data)
        if self.mounted:
            self.graph.registry.replace(self.contribution, new)
        self.contribution = new
        return self

    def _pixels(self) -> tuple[np.ndarray, np.ndarray]:
        px = np.asarray(self.graph.x_scale(self.contribution.x_values), dtype=np.float64)
        py = np.asarray(self.graph.y_scale(self.contribution.y_values), dtype=np.float64)
        return px, py


class Line(PlotElement):
    def points(self) -> tuple[np.ndarray, np.ndarray]:
        """Pixel coordinates of the points that map to finite positions."""
        px, py = self._pixels()
        mask = np.isfinite(px) & np.isfinite(py)
        return px[mask], py[mask]


class Bars(PlotElement):
    """Vertical bars; expects an ordinal x axis for their width."""

    def bar_width(self) -> float:
        return self.graph.x_scale.band_width()

    def bars(self, *, strict: bool = False) -> list[BarRect]:
        if strict and self.graph.scale_type("x") != "ordinal":
            raise GraphConfigError("bars require an ordinal x scale")
        width = self.bar_width()
        bottom = self.graph.graph_height
        px, py = self._pixels()
        xs = self.contribution.x_values.tolist()
        ys = self.contribution.y_values.tolist()
        out: list[BarRect] = []
        for x, y, datum in zip(px.tolist(), py.tolist(), zip(xs, ys)):
            if not (np.isfinite(x) and np.isfinite(y)):
                continue
            out.append(BarRect(x=x, y=y, width=width, height=bottom - y, datum=datum))
        return out


class RangeMarkerGroup:
    """Stack of range markers along the top or bottom of the plot area."""

    def __init__(self, graph: Graph, *, orient: str = "bottom") -> None:
        if orient not in ("bottom", "top"):
            raise GraphConfigError(f"invalid range marker orient: {orient!r}")
        self.graph = graph
        self.orient = orient
        self.markers: list[RangeMarker] = []

    def register_marker(self, marker: "RangeMarker") -> None:
        if marker not in self.markers:
            self.markers.append(marker)

    def unregister_marker(self, marker: "RangeMarker") -> None:
        if marker in self.markers:
            self.markers.remove(marker)

    def previous(self, marker: "RangeMarker") -> Optional["RangeMarker"]:
        i = self.markers.index(marker)
        return self.markers[i - 1] if i > 0 else None


class RangeMarker:
    """A labelled strip covering ``[x_min, x_max]`` on the x axis."""

    def __init__(
        self,
        group: RangeMarkerGroup,
        x_min: float = 0.0,
        x_max: float = 0.0,
        *,
        height: float = 10.0,
        margin_top: float = 10.0,
        margin_bottom: float = 3.0,
    ) -> None:
        self.group = group
        self.x_min = x_min
        self.x_max = x_max
        self.height = height
        self.margin_top = margin_top
        self.margin_bottom = margin_bottom
        group.register_marker(self)

    def remove(self) -> None:
        self.group.unregister_marker(self)

    @property
    def x(self) -> float:
        return float(self.group.graph.x_scale(self.x_min))

    @property
    def width(self) -> float:
        scale = self.group.graph.x_scale
        return float(scale(self.x_max)) - float(scale(self.x_min))

    @property
    def total_height(self) -> float:
        return self.height + self.margin_top + self.margin_bottom

    @property
    def y(self) -> float:
        prev = self.group.previous(self)
        if self.group.orient == "bottom":
            base = prev.y if prev is not None else self.group.graph.graph_height
            return base - self.total_height
        return prev.bottom if prev is not None else 0.0

    @property
    def bottom(self) -> float:
        return self.y + self.total_height
