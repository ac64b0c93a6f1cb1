from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def coerce(cls, value: "Padding | float | tuple[float, float, float, float]") -> "Padding":
        if isinstance(value, Padding):
            return value
        if isinstance(value, (int, float)):
            v = float(value)
            return cls(top=v, right=v, bottom=v, left=v)
        top, right, bottom, left = value
        return cls(top=float(top), right=float(right), bottom=float(bottom), left=float(left))


@dataclass(frozen=True)
class PlotArea:
    """Pixel rectangle of the plot content inside the container."""

    x: float
    y: float
    width: float
    height: float

    @property
    def x_range(self) -> tuple[float, float]:
        return (0.0, self.width)

    @property
    def y_range(self) -> tuple[float, float]:
        # Screen y grows downward, so data min sits at the bottom.
        return (self.height, 0.0)


def plot_area(
    width: float,
    height: float,
    padding: Padding,
    *,
    x_axis_height: float = 0.0,
    x_axis_orient: str = "bottom",
    y_axis_width: float = 0.0,
    y_axis_orient: str = "left",
) -> PlotArea:
    graph_width = width - padding.left - padding.right - y_axis_width
    graph_height = height - padding.top - padding.bottom - x_axis_height
    graph_x = padding.left if y_axis_orient == "right" else padding.left + y_axis_width
    graph_y = padding.top + x_axis_height if x_axis_orient == "top" else padding.top
    return PlotArea(x=graph_x, y=graph_y, width=graph_width, height=graph_height)
