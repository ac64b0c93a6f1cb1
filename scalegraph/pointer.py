from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional

from scalegraph.scales import Scale


# Pixel coordinate reported while the pointer is outside the plot area.
OUTSIDE = -1.0


@dataclass(frozen=True)
class PointerPosition:
    x: float = OUTSIDE
    y: float = OUTSIDE

    @property
    def outside(self) -> bool:
        return self.x == OUTSIDE or self.y == OUTSIDE


def hover_value(scale: Optional[Scale], pixel: float, *, outside: bool = False) -> Optional[float]:
    """Domain value under ``pixel``, or ``None`` when there is none to report."""
    if outside or pixel == OUTSIDE or scale is None or not scale.invertible:
        return None
    value = scale.invert(pixel)  # type: ignore[union-attr]
    if not isinstance(value, float) or not math.isfinite(value):
        return None
    return value


def hover_point(
    pointer: PointerPosition,
    x_scale: Optional[Scale],
    y_scale: Optional[Scale],
) -> tuple[Optional[float], Optional[float]]:
    outside = pointer.outside
    return (
        hover_value(x_scale, pointer.x, outside=outside),
        hover_value(y_scale, pointer.y, outside=outside),
    )
