# iwc/core/interpolation.py

from typing import Protocol, Sequence
import numpy as np

class Interpolator(Protocol):
    """A minimal interface for 1‑D interpolation, so we can inject mocks.
    Any object satisfying ``__call__(x, xp, fp) -> float`` qualifies.
    ``xp`` must be strictly increasing.
    """

    def __call__(self, x: float, xp: Sequence[float], fp: Sequence[float]) -> float:  # noqa: E501
        ...


def linear_extrap_interp(x: float, xp: Sequence[float], fp: Sequence[float]) -> float:  # noqa: E501
    """Linear interpolation which, unlike :func:`numpy.interp`, does not clamp.

    Outside ``[xp[0], xp[-1]]`` the nearest end segment is extended, so the
    result is a continuous piecewise-linear function on the whole real line.
    Knot values are returned exactly.
    """
    xp = np.asarray(xp, dtype=float)
    fp = np.asarray(fp, dtype=float)
    if xp.size < 2:
        raise ValueError("At least two knots are required for linear interpolation.")
    i = int(np.clip(np.searchsorted(xp, x, side="right") - 1, 0, xp.size - 2))
    t = (x - xp[i]) / (xp[i + 1] - xp[i])
    # weighted form keeps knots exact at t == 0 and t == 1
    return float(fp[i] * (1.0 - t) + fp[i + 1] * t)


def interpolate_linear_and_solve(x0: float, y0: float, x1: float, y1: float, y_target: float) -> float:  # noqa: E501
    """Return x on the line through ``(x0, y0)`` and ``(x1, y1)`` with y(x) == ``y_target``.

    Exact linear interpolation (or extrapolation, if ``y_target`` lies outside
    ``[y0, y1]``), no clamping.  Raises ``ValueError`` for a flat line.
    """
    if y0 == y1:
        raise ValueError(f"Cannot invert a flat line: y0 == y1 == {y0}.")
    return x0 + (y_target - y0) * (x1 - x0) / (y1 - y0)
