from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from scalegraph.axis import (
    AxisConfig,
    AxisGutter,
    AxisName,
    effective_tick_count,
    validate_axis,
    validate_padding,
    validate_tick_count,
)
from scalegraph.domain import BoundSide, resolve_bound, resolve_domain, validate_mode
from scalegraph.errors import GraphConfigError
from scalegraph.extent import Extent, compute_extent
from scalegraph.layout import Padding, PlotArea, plot_area
from scalegraph.pointer import OUTSIDE, PointerPosition, hover_point
from scalegraph.reactive import ValueGraph
from scalegraph.registry import PlotContribution, PlotRegistry
from scalegraph.scales import Scale, build_scale
from scalegraph.ticks import Tick, axis_ticks


LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()
_SIDES: tuple[BoundSide, ...] = ("min", "max")


class Graph:
    """Container that owns the shared x/y scales of a Cartesian chart."""

    def __init__(
        self,
        width: float = 300,
        height: float = 100,
        *,
        padding: Padding | float | tuple[float, float, float, float] = 0.0,
        x: AxisConfig | None = None,
        y: AxisConfig | None = None,
        select_multiple: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise GraphConfigError("width and height must be > 0")
        self._values = ValueGraph()
        self._registry = PlotRegistry(on_change=lambda: self._values.touch("plots"))
        self.select_multiple = bool(select_multiple)
        self._selected: list[Any] = []

        v = self._values
        v.leaf("plots", None)
        v.leaf("size", (float(width), float(height)))
        v.leaf("padding", Padding.coerce(padding))
        v.leaf("x_axis", AxisGutter(size=0, orient="bottom"))
        v.leaf("y_axis", AxisGutter(size=0, orient="left"))
        v.leaf("pointer", PointerPosition())
        v.derived("area", ("size", "padding", "x_axis", "y_axis"), self._compute_area)
        v.derived("x_range", ("area",), lambda area: area.x_range)
        v.derived("y_range", ("area",), lambda area: area.y_range)
        for axis, config in (("x", x or AxisConfig()), ("y", y or AxisConfig())):
            self._declare_axis(axis, config)
        v.derived("hover", ("pointer", "x_scale", "y_scale"), hover_point)
        v.check()

    def _declare_axis(self, axis: AxisName, config: AxisConfig) -> None:
        v = self._values
        v.leaf(f"{axis}_scale_type", config.scale_type)
        v.leaf(f"{axis}_min_mode", config.min_mode)
        v.leaf(f"{axis}_max_mode", config.max_mode)
        v.leaf(f"{axis}_tick_count", config.tick_count)
        v.leaf(f"{axis}_ordinal_padding", config.ordinal_padding)
        v.leaf(f"{axis}_ordinal_outer_padding", config.ordinal_outer_padding)
        v.derived(f"{axis}_data", ("plots",), lambda _: self._registry.aggregated(axis))
        v.derived(f"{axis}_extent", (f"{axis}_data",), compute_extent)
        for side, seed in (("min", config.min), ("max", config.max)):
            v.cell(
                f"{axis}_{side}",
                (f"{axis}_{side}_mode", f"{axis}_extent", f"{axis}_scale_type", f"{axis}_tick_count"),
                self._bound_updater(axis, side),
                initial=None if seed is None else float(seed),
            )
        v.derived(
            f"{axis}_domain",
            (f"{axis}_data", f"{axis}_min", f"{axis}_max", f"{axis}_scale_type"),
            resolve_domain,
        )
        v.derived(
            f"{axis}_scale",
            (
                f"{axis}_scale_type",
                f"{axis}_domain",
                f"{axis}_range",
                f"{axis}_ordinal_padding",
                f"{axis}_ordinal_outer_padding",
            ),
            lambda scale_type, domain, pixel_range, pad, outer: build_scale(
                scale_type, domain, pixel_range, padding=pad, outer_padding=outer
            ),
        )
        v.derived(
            f"{axis}_ticks",
            (f"{axis}_scale", f"{axis}_tick_count"),
            lambda scale, count: axis_ticks(scale, effective_tick_count(axis, count)),
        )

    @staticmethod
    def _bound_updater(axis: AxisName, side: BoundSide):
        def update(
            previous: Optional[float],
            mode: str,
            extent: Optional[Extent],
            scale_type: str,
            tick_count: Optional[int],
        ) -> Optional[float]:
            return resolve_bound(
                previous,
                side=side,
                mode=mode,
                extent=extent,
                scale_type=scale_type,
                tick_count=effective_tick_count(axis, tick_count),
            )

        return update

    @staticmethod
    def _compute_area(
        size: tuple[float, float],
        padding: Padding,
        x_axis: AxisGutter,
        y_axis: AxisGutter,
    ) -> PlotArea:
        width, height = size
        return plot_area(
            width,
            height,
            padding,
            x_axis_height=x_axis.size,
            x_axis_orient=x_axis.orient,
            y_axis_width=y_axis.size,
            y_axis_orient=y_axis.orient,
        )

    # -- plot registry -------------------------------------------------

    @property
    def registry(self) -> PlotRegistry:
        return self._registry

    def register(self, contribution: PlotContribution) -> None:
        self._registry.register(contribution)

    def unregister(self, contribution: PlotContribution) -> None:
        self._registry.unregister(contribution)

    @property
    def has_data(self) -> bool:
        return len(self._registry) > 0

    def data(self, axis: str) -> np.ndarray:
        return self._values.get(f"{validate_axis(axis)}_data")

    def extent(self, axis: str) -> Optional[Extent]:
        return self._values.get(f"{validate_axis(axis)}_extent")

    # -- configuration -------------------------------------------------

    def set_axis(
        self,
        axis: str,
        *,
        scale_type: str = _UNSET,
        min_mode: str = _UNSET,
        max_mode: str = _UNSET,
        min: Optional[float] = _UNSET,
        max: Optional[float] = _UNSET,
        tick_count: Optional[int] = _UNSET,
        ordinal_padding: float = _UNSET,
        ordinal_outer_padding: float = _UNSET,
    ) -> "Graph":
        """Change any subset of one axis's configuration."""
        a = validate_axis(axis)
        writes: list[tuple[str, Any]] = []
        if scale_type is not _UNSET:
            writes.append((f"{a}_scale_type", scale_type))
        if min_mode is not _UNSET:
            writes.append((f"{a}_min_mode", validate_mode(min_mode)))
        if max_mode is not _UNSET:
            writes.append((f"{a}_max_mode", validate_mode(max_mode)))
        if tick_count is not _UNSET:
            writes.append((f"{a}_tick_count", validate_tick_count(tick_count)))
        if ordinal_padding is not _UNSET:
            writes.append((f"{a}_ordinal_padding", validate_padding(ordinal_padding, "ordinal_padding")))
        if ordinal_outer_padding is not _UNSET:
            writes.append(
                (f"{a}_ordinal_outer_padding", validate_padding(ordinal_outer_padding, "ordinal_outer_padding"))
            )
        for name, value in writes:
            self._values.set(name, value)
        if min is not _UNSET:
            self._write_bound(a, "min", min)
        if max is not _UNSET:
            self._write_bound(a, "max", max)
        return self

    def _write_bound(self, axis: AxisName, side: BoundSide, value: Optional[float]) -> None:
        mode = self._values.get(f"{axis}_{side}_mode")
        if mode == "auto":
            LOGGER.debug("ignoring %s_%s=%s while mode is auto", axis, side, value)
            return
        self._values.set(f"{axis}_{side}", None if value is None else float(value))

    def set_x_min(self, value: Optional[float]) -> "Graph":
        self._write_bound("x", "min", value)
        return self

    def set_x_max(self, value: Optional[float]) -> "Graph":
        self._write_bound("x", "max", value)
        return self

    def set_y_min(self, value: Optional[float]) -> "Graph":
        self._write_bound("y", "min", value)
        return self

    def set_y_max(self, value: Optional[float]) -> "Graph":
        self._write_bound("y", "max", value)
        return self

    def set_size(self, width: float, height: float) -> "Graph":
        if width <= 0 or height <= 0:
            raise GraphConfigError("width and height must be > 0")
        self._values.set("size", (float(width), float(height)))
        return self

    def set_padding(self, padding: Padding | float | tuple[float, float, float, float]) -> "Graph":
        self._values.set("padding", Padding.coerce(padding))
        return self

    def set_x_axis(self, *, height: float = 0, orient: str = "bottom") -> "Graph":
        if orient not in ("bottom", "top"):
            raise GraphConfigError(f"invalid x axis orient: {orient!r}")
        self._values.set("x_axis", AxisGutter(size=height, orient=orient))
        return self

    def set_y_axis(self, *, width: float = 0, orient: str = "left") -> "Graph":
        if orient not in ("left", "right"):
            raise GraphConfigError(f"invalid y axis orient: {orient!r}")
        self._values.set("y_axis", AxisGutter(size=width, orient=orient))
        return self

    def scale_type(self, axis: str) -> str:
        return self._values.get(f"{validate_axis(axis)}_scale_type")

    def mode(self, axis: str, side: str) -> str:
        if side not in _SIDES:
            raise GraphConfigError(f"invalid bound side: {side!r}")
        return self._values.get(f"{validate_axis(axis)}_{side}_mode")

    def tick_count(self, axis: str) -> int:
        a = validate_axis(axis)
        return effective_tick_count(a, self._values.get(f"{a}_tick_count"))

    # -- derived values ------------------------------------------------

    def bound(self, axis: str, side: str) -> Optional[float]:
        """Committed value of one bound (``None`` if nothing was committed)."""
        if side not in _SIDES:
            raise GraphConfigError(f"invalid bound side: {side!r}")
        return self._values.get(f"{validate_axis(axis)}_{side}")

    def domain(self, axis: str) -> tuple[Any, ...]:
        return self._values.get(f"{validate_axis(axis)}_domain")

    def scale(self, axis: str) -> Scale:
        return self._values.get(f"{validate_axis(axis)}_scale")

    def ticks(self, axis: str) -> tuple[Tick, ...]:
        return self._values.get(f"{validate_axis(axis)}_ticks")

    @property
    def x_scale(self) -> Scale:
        return self.scale("x")

    @property
    def y_scale(self) -> Scale:
        return self.scale("y")

    @property
    def x_domain(self) -> tuple[Any, ...]:
        return self.domain("x")

    @property
    def y_domain(self) -> tuple[Any, ...]:
        return self.domain("y")

    @property
    def x_ticks(self) -> tuple[Tick, ...]:
        return self.ticks("x")

    @property
    def y_ticks(self) -> tuple[Tick, ...]:
        return self.ticks("y")

    @property
    def area(self) -> PlotArea:
        return self._values.get("area")

    @property
    def graph_x(self) -> float:
        return self.area.x

    @property
    def graph_y(self) -> float:
        return self.area.y

    @property
    def graph_width(self) -> float:
        return self.area.width

    @property
    def graph_height(self) -> float:
        return self.area.height

    def compute_count(self, name: str) -> int:
        return self._values.compute_count(name)

    # -- pointer -------------------------------------------------------

    def pointer_move(self, x: float, y: float) -> None:
        self._values.set("pointer", PointerPosition(x=float(x), y=float(y)))

    def pointer_leave(self) -> None:
        self._values.set("pointer", PointerPosition(x=OUTSIDE, y=OUTSIDE))

    @property
    def hover_x(self) -> Optional[float]:
        return self._values.get("hover")[0]

    @property
    def hover_y(self) -> Optional[float]:
        return self._values.get("hover")[1]

    # -- selection -----------------------------------------------------

    @property
    def selected(self) -> Any:
        if self.select_multiple:
            return list(self._selected)
        return self._selected[0] if self._selected else None

    def select_graphic(self, graphic: Any) -> None:
        graphic.selected = True
        if self.select_multiple:
            if not any(g is graphic for g in self._selected):
                self._selected.append(graphic)
            return
        current = self._selected[0] if self._selected else None
        if current is not None and current is not graphic:
            current.selected = False
        self._selected = [graphic]

    def deselect_graphic(self, graphic: Any) -> None:
        graphic.selected = False
        self._selected = [g for g in self._selected if g is not graphic]
