from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np


@dataclass(frozen=True)
class Extent:
    min: float
    max: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)


def as_float_array(values: Any) -> np.ndarray:
    """``values`` as float64; entries that are not real numbers become NaN."""
    arr = np.asarray(values)
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    flat = np.fromiter((_as_float(v) for v in arr.ravel().tolist()), dtype=np.float64, count=arr.size)
    return flat.reshape(arr.shape)


def finite_values(values: np.ndarray) -> np.ndarray:
    """Return the finite numeric entries of ``values``."""
    arr = as_float_array(values)
    return arr[np.isfinite(arr)]


def compute_extent(values: np.ndarray) -> Optional[Extent]:
    """``[min, max]`` of the finite values, or ``None`` when there are none."""
    finite = finite_values(values)
    if finite.size == 0:
        return None
    return Extent(min=float(np.min(finite)), max=float(np.max(finite)))


def _as_float(value: object) -> float:
    if isinstance(value, (bool, str, bytes)) or value is None:
        return np.nan
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return np.nan
