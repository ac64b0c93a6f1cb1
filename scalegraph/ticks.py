from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

import numpy as np

from scalegraph.domain import nice_step
from scalegraph.scales import ContinuousScale, OrdinalScale, Scale


@dataclass(frozen=True)
class Tick:
    value: Any
    position: float
    label: str


def tick_values(lo: float, hi: float, count: int) -> np.ndarray:
    """Evenly spaced nice values inside ``[lo, hi]``."""
    if lo > hi:
        lo, hi = hi, lo
    step = nice_step(lo, hi, count)
    if step == 0:
        return np.asarray([lo], dtype=np.float64)
    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    ticks = np.arange(first, last + 1, dtype=np.float64) * step
    # Snap floating-point drift so -4.4e-16 prints as 0.
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def log_tick_values(lo: float, hi: float) -> np.ndarray:
    if lo <= 0 or hi <= 0:
        return np.empty(0, dtype=np.float64)
    if lo > hi:
        lo, hi = hi, lo
    exponents = np.arange(math.ceil(math.log10(lo) - 1e-12), math.floor(math.log10(hi) + 1e-12) + 1)
    return np.power(10.0, exponents.astype(np.float64))


def format_tick(value: float, step: float) -> str:
    """Label for ``value`` on a tick grid spaced ``step`` apart."""
    if not math.isfinite(value):
        return str(value)
    decimals = _step_decimals(step)
    value = round(value, decimals)
    if value == 0:
        return "0"
    if not 1e-6 <= abs(value) < 1e6:
        return f"{value:.4e}"
    text = f"{value:.{decimals}f}"
    return text.rstrip("0").rstrip(".") if "." in text else text


def _step_decimals(step: float) -> int:
    if not (math.isfinite(step) and step > 0):
        return 6
    return min(12, max(0, -math.floor(math.log10(step) + 1e-9)))


def axis_ticks(scale: Scale, count: int) -> tuple[Tick, ...]:
    """Ticks for ``scale``: band centres, decades on log axes, else nice values."""
    if isinstance(scale, OrdinalScale):
        half = scale.band_width() / 2.0
        return tuple(
            Tick(value=category, position=start + half, label=str(category))
            for category, start in zip(scale.domain, scale.band_starts())
        )

    assert isinstance(scale, ContinuousScale)
    lo, hi = scale.domain
    if scale.scale_type == "log":
        return tuple(
            Tick(value=float(v), position=float(scale(v)), label=format_tick(float(v), float(v)))
            for v in log_tick_values(lo, hi)
        )

    step = nice_step(lo, hi, count)
    return tuple(
        Tick(value=float(v), position=float(scale(v)), label=format_tick(float(v), step))
        for v in tick_values(lo, hi, count)
    )
