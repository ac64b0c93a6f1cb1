from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, ClassVar, Literal, Sequence, Union

import numpy as np

from scalegraph.errors import GraphConfigError
from scalegraph.extent import as_float_array


LOGGER = logging.getLogger(__name__)

ScaleType = Literal["linear", "power", "log", "ordinal"]

SCALE_TYPES: tuple[str, ...] = ("linear", "power", "log", "ordinal")
SCALE_TYPE_ALIASES: dict[str, str] = {"logarithmic": "log"}
POWER_EXPONENT = 3.0

_Transform = Callable[[np.ndarray], np.ndarray]


def canonical_scale_type(name: Any) -> ScaleType:
    resolved = SCALE_TYPE_ALIASES.get(name, name) if isinstance(name, str) else name
    if resolved not in SCALE_TYPES:
        raise GraphConfigError(f"invalid scale type: {name!r}")
    return resolved  # type: ignore[return-value]


def _identity(v: np.ndarray) -> np.ndarray:
    return v


def _pow(v: np.ndarray) -> np.ndarray:
    return np.sign(v) * np.abs(v) ** POWER_EXPONENT


def _pow_inverse(v: np.ndarray) -> np.ndarray:
    return np.sign(v) * np.abs(v) ** (1.0 / POWER_EXPONENT)


_TRANSFORMS: dict[str, tuple[_Transform, _Transform]] = {
    "linear": (_identity, _identity),
    "power": (_pow, _pow_inverse),
    "log": (np.log, np.exp),
}


@dataclass(frozen=True)
class ContinuousScale:
    """Monotonic domain -> pixel mapping for linear, power and log axes."""

    scale_type: ScaleType
    domain: tuple[float, float]
    range: tuple[float, float]

    invertible: ClassVar[bool] = True

    def __call__(self, value: Any) -> Union[float, np.ndarray]:
        v = as_float_array(value)
        forward, _ = _TRANSFORMS[self.scale_type]
        d0, d1 = self.domain
        r0, r1 = self.range
        with np.errstate(divide="ignore", invalid="ignore"):
            t0, t1 = float(forward(np.float64(d0))), float(forward(np.float64(d1)))
            if t1 == t0:
                out = np.full(v.shape, float(r0))
            else:
                out = r0 + (forward(v) - t0) / (t1 - t0) * (r1 - r0)
        return float(out) if out.ndim == 0 else out

    def invert(self, pixel: Any) -> Union[float, np.ndarray]:
        p = np.asarray(pixel, dtype=np.float64)
        forward, backward = _TRANSFORMS[self.scale_type]
        d0, d1 = self.domain
        r0, r1 = self.range
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if r1 == r0:
                out = np.full(p.shape, float(d0))
            else:
                t0, t1 = float(forward(np.float64(d0))), float(forward(np.float64(d1)))
                out = backward(t0 + (p - r0) / (r1 - r0) * (t1 - t0))
        return float(out) if out.ndim == 0 else out

    def band_width(self) -> float:
        return 0.0


@dataclass(frozen=True)
class OrdinalScale:
    """Category -> band start mapping over integer-rounded bands."""

    domain: tuple[Any, ...]
    range: tuple[float, float]
    padding: float = 0.1
    outer_padding: float = 0.1
    scale_type: ScaleType = "ordinal"

    invertible: ClassVar[bool] = False

    _starts: tuple[float, ...] = field(init=False, repr=False, compare=False)
    _band: float = field(init=False, repr=False, compare=False)
    _index: dict[Any, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0.0 <= self.padding < 1.0:
            raise GraphConfigError("ordinal padding must be in [0, 1)")
        if not 0.0 <= self.outer_padding < 1.0:
            raise GraphConfigError("ordinal outer padding must be in [0, 1)")
        starts, band = _round_bands(len(self.domain), self.range, self.padding, self.outer_padding)
        index: dict[Any, int] = {}
        for i, category in enumerate(self.domain):
            index.setdefault(category, i)
        object.__setattr__(self, "_starts", starts)
        object.__setattr__(self, "_band", band)
        object.__setattr__(self, "_index", index)

    def __call__(self, value: Any) -> Union[float, np.ndarray]:
        if isinstance(value, (list, tuple, np.ndarray)):
            return np.asarray([self._lookup(v) for v in value], dtype=np.float64)
        return self._lookup(value)

    def _lookup(self, category: Any) -> float:
        i = self._index.get(category)
        if i is None:
            return math.nan
        return self._starts[i]

    def band_width(self) -> float:
        return self._band

    def band_starts(self) -> tuple[float, ...]:
        return self._starts


def _js_round(value: float) -> int:
    return int(math.floor(value + 0.5))


def _round_bands(
    count: int,
    pixel_range: tuple[float, float],
    padding: float,
    outer_padding: float,
) -> tuple[tuple[float, ...], float]:
    if count == 0:
        return (), 0.0
    r0, r1 = pixel_range
    reverse = r1 < r0
    start, stop = (r1, r0) if reverse else (r0, r1)
    step = math.floor((stop - start) / (count - padding + 2.0 * outer_padding))
    error = stop - start - (count - padding) * step
    first = start + _js_round(error / 2.0)
    starts = [float(first + step * i) for i in range(count)]
    if reverse:
        starts.reverse()
    return tuple(starts), float(_js_round(step * (1.0 - padding)))


Scale = Union[ContinuousScale, OrdinalScale]


def _build_continuous(
    scale_type: ScaleType,
    domain: Sequence[Any],
    pixel_range: tuple[float, float],
    padding: float,
    outer_padding: float,
) -> ContinuousScale:
    if len(domain) != 2:
        raise GraphConfigError(f"{scale_type} scale needs a (min, max) domain, got {len(domain)} values")
    return ContinuousScale(
        scale_type=scale_type,
        domain=(float(domain[0]), float(domain[1])),
        range=(float(pixel_range[0]), float(pixel_range[1])),
    )


def _build_ordinal(
    scale_type: ScaleType,
    domain: Sequence[Any],
    pixel_range: tuple[float, float],
    padding: float,
    outer_padding: float,
) -> OrdinalScale:
    return OrdinalScale(
        domain=tuple(domain),
        range=(float(pixel_range[0]), float(pixel_range[1])),
        padding=float(padding),
        outer_padding=float(outer_padding),
    )


_BUILDERS: dict[str, Callable[..., Scale]] = {
    "linear": _build_continuous,
    "power": _build_continuous,
    "log": _build_continuous,
    "ordinal": _build_ordinal,
}


def build_scale(
    scale_type: str,
    domain: Sequence[Any],
    pixel_range: tuple[float, float],
    *,
    padding: float = 0.1,
    outer_padding: float = 0.1,
) -> Scale:
    kind = canonical_scale_type(scale_type)
    scale = _BUILDERS[kind](kind, domain, pixel_range, padding, outer_padding)
    LOGGER.debug("built %s scale domain=%s range=%s", kind, _short(scale.domain), scale.range)
    return scale


def _short(domain: tuple[Any, ...]) -> str:
    if len(domain) <= 6:
        return repr(domain)
    return f"({len(domain)} categories)"
