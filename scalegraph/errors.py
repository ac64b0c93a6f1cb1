from __future__ import annotations


class GraphConfigError(ValueError):
    """Raised for invalid graph, axis or value-graph configuration."""


class PlotDataError(ValueError):
    """Raised when contributed plot data cannot be used."""
