from scalegraph.axis import AxisConfig
from scalegraph.domain import nice_domain, nice_step
from scalegraph.errors import GraphConfigError, PlotDataError
from scalegraph.extent import Extent, compute_extent
from scalegraph.graph import Graph
from scalegraph.layout import Padding, PlotArea
from scalegraph.plots import Bars, BarRect, Line, PlotElement, RangeMarker, RangeMarkerGroup
from scalegraph.pointer import OUTSIDE, PointerPosition
from scalegraph.reactive import ValueGraph
from scalegraph.registry import PlotContribution, PlotRegistry
from scalegraph.scales import ContinuousScale, OrdinalScale, build_scale
from scalegraph.ticks import Tick

__all__ = [
    "AxisConfig",
    "BarRect",
    "Bars",
    "ContinuousScale",
    "Extent",
    "Graph",
    "GraphConfigError",
    "Line",
    "OUTSIDE",
    "OrdinalScale",
    "Padding",
    "PlotArea",
    "PlotContribution",
    "PlotDataError",
    "PlotElement",
    "PlotRegistry",
    "PointerPosition",
    "RangeMarker",
    "RangeMarkerGroup",
    "Tick",
    "ValueGraph",
    "build_scale",
    "compute_extent",
    "nice_domain",
    "nice_step",
]
