from __future__ import annotations

from decimal import Decimal
import logging
import math
from typing import Any, Literal, Optional, Sequence

from scalegraph.errors import GraphConfigError
from scalegraph.extent import Extent


LOGGER = logging.getLogger(__name__)

BoundMode = Literal["auto", "fixed", "push", "push-tick"]
BoundSide = Literal["min", "max"]

BOUND_MODES: tuple[str, ...] = ("auto", "fixed", "push", "push-tick")
DEFAULT_BOUNDS: dict[str, float] = {"min": 0.0, "max": 1.0}
DEFAULT_TICK_COUNTS: dict[str, int] = {"x": 8, "y": 5}

_LOG_NAMES = frozenset({"log", "logarithmic"})


def validate_mode(mode: str) -> BoundMode:
    if mode not in BOUND_MODES:
        raise GraphConfigError(f"invalid bound mode: {mode!r} (expected one of {', '.join(BOUND_MODES)})")
    return mode  # type: ignore[return-value]


def nice_step(lo: float, hi: float, count: int) -> float:
    """Tick step from the 1/2/5 x 10^k family that splits [lo, hi] into ~count parts."""
    if count <= 0:
        raise ValueError("count must be > 0")
    span = abs(hi - lo)
    if not math.isfinite(span) or span == 0:
        return 0.0
    step = 10.0 ** math.floor(math.log10(span / count))
    err = count / span * step
    if err <= 0.15:
        step *= 10.0
    elif err <= 0.35:
        step *= 5.0
    elif err <= 0.75:
        step *= 2.0
    return step


def nice_domain(lo: float, hi: float, count: int, scale_type: str = "linear") -> tuple[float, float]:
    """Round ``[lo, hi]`` outward to values that give evenly spaced ticks."""
    lo, hi = (lo, hi) if lo <= hi else (hi, lo)
    if scale_type in _LOG_NAMES:
        nlo = 10.0 ** math.floor(math.log10(lo)) if lo > 0 else lo
        nhi = 10.0 ** math.ceil(math.log10(hi)) if hi > 0 else hi
        return (nlo, nhi)
    step = nice_step(lo, hi, count)
    if step == 0:
        return (lo, hi)
    return (_snap(math.floor(lo / step), step), _snap(math.ceil(hi / step), step))


def _snap(multiple: int, step: float) -> float:
    # Decimal product avoids results like 0.30000000000000004.
    return float(Decimal(int(multiple)) * Decimal(repr(step)))


def resolve_bound(
    previous: Optional[float],
    *,
    side: BoundSide,
    mode: str,
    extent: Optional[Extent],
    scale_type: str = "linear",
    tick_count: int = 5,
) -> Optional[float]:
    """Next committed value of one domain bound."""
    if mode == "auto":
        if extent is None:
            return DEFAULT_BOUNDS[side]
        return extent.min if side == "min" else extent.max
    if mode == "fixed":
        return previous
    if mode not in ("push", "push-tick"):
        raise GraphConfigError(f"invalid bound mode: {mode!r}")
    if extent is None:
        return previous

    value = extent.min if side == "min" else extent.max
    if previous is not None:
        crossed = value < previous if side == "min" else value > previous
        if not crossed:
            return previous
    if mode == "push-tick":
        nice = nice_domain(extent.min, extent.max, tick_count, scale_type)
        value = nice[0] if side == "min" else nice[1]
    LOGGER.debug("%s bound pushed from %s to %s (%s)", side, previous, value, mode)
    return value


def resolve_domain(
    data: Sequence[Any],
    lo: Optional[float],
    hi: Optional[float],
    scale_type: str,
) -> tuple[Any, ...]:
    """Final visible domain: category sequence for ordinal, else ``(min, max)``."""
    if scale_type == "ordinal":
        # Categories are kept in contribution order, duplicates included.
        return tuple(data.tolist() if hasattr(data, "tolist") else data)

    lo = DEFAULT_BOUNDS["min"] if lo is None else float(lo)
    hi = DEFAULT_BOUNDS["max"] if hi is None else float(hi)
    if scale_type in _LOG_NAMES:
        if lo <= 0:
            LOGGER.debug("log domain min %s clamped to 1", lo)
            lo = 1.0
        if hi <= 0:
            LOGGER.debug("log domain max %s clamped to 1", hi)
            hi = 1.0
    if lo > hi:
        LOGGER.warning("domain min %s exceeds max %s; raising max to min", lo, hi)
        hi = lo
    return (lo, hi)
