from __future__ import annotations

from dataclasses import dataclass
import numbers
from typing import Literal, Optional

from scalegraph.domain import DEFAULT_TICK_COUNTS, validate_mode
from scalegraph.errors import GraphConfigError


AxisName = Literal["x", "y"]
AXES: tuple[AxisName, ...] = ("x", "y")


@dataclass(frozen=True)
class AxisConfig:
    """Initial configuration of one axis."""

    scale_type: str = "linear"
    min_mode: str = "auto"
    max_mode: str = "auto"
    min: Optional[float] = None
    max: Optional[float] = None
    tick_count: Optional[int] = None
    ordinal_padding: float = 0.1
    ordinal_outer_padding: float = 0.1

    def __post_init__(self) -> None:
        validate_mode(self.min_mode)
        validate_mode(self.max_mode)
        object.__setattr__(self, "tick_count", validate_tick_count(self.tick_count))
        validate_padding(self.ordinal_padding, "ordinal_padding")
        validate_padding(self.ordinal_outer_padding, "ordinal_outer_padding")


@dataclass(frozen=True)
class AxisGutter:
    """Space an axis component takes out of the container."""

    size: int = 0
    orient: str = "bottom"


def validate_axis(axis: str) -> AxisName:
    if axis not in AXES:
        raise GraphConfigError(f"invalid axis: {axis!r}")
    return axis  # type: ignore[return-value]


def validate_tick_count(count: Optional[int]) -> Optional[int]:
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
        raise GraphConfigError(f"tick count must be a positive integer, got {count!r}")
    return int(count)


def validate_padding(value: float, name: str) -> float:
    if not 0.0 <= float(value) < 1.0:
        raise GraphConfigError(f"{name} must be in [0, 1), got {value!r}")
    return float(value)


def effective_tick_count(axis: AxisName, count: Optional[int]) -> int:
    return DEFAULT_TICK_COUNTS[axis] if count is None else count
