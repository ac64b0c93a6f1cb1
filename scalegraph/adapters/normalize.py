from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from scalegraph.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_xy(
    y: Any = None,
    *,
    x: Any = None,
    data: Any = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Coerce plot inputs into a pair of equal-length 1-D arrays.

    ``x`` defaults to the sample index. With ``data=`` (a pandas DataFrame)
    ``x``/``y`` may name columns. Numeric inputs become float64 arrays; inputs
    holding category labels stay as object arrays so ordinal axes can use them.
    """
    y_values = _resolve_column(y, key="y", data=data)
    if y_values is None:
        raise PlotDataError("y input is required")
    y_arr = normalize_values(y_values, label="y")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = normalize_values(_resolve_column(x, key="x", data=data), label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    return x_arr, y_arr


def normalize_values(value: Any, *, label: str = "values") -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, (pd.Series, pd.Index)):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(value), dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _resolve_column(value: Any, *, key: str, data: Any) -> Any:
    if data is None:
        return value
    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    if isinstance(value, str):
        if value not in data.columns:
            raise PlotDataError(f"column not found: {value}")
        return data[value]
    if value is None and key == "y":
        numeric_cols = [c for c in data.columns if pd.api.types.is_numeric_dtype(data[c])]
        if len(numeric_cols) != 1:
            raise PlotDataError("when y is omitted, data must have exactly one numeric column")
        return data[numeric_cols[0]]
    return value


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
        elif isinstance(raw, (int, float, Decimal, np.number)) and not isinstance(raw, bool):
            out[i] = float(raw)
        else:
            # Category labels: keep the sequence as-is for ordinal axes.
            return np.asarray(arr.tolist(), dtype=object)
    return out
