"""Reduced solve: handle canonical points with zero coordinates.

Axes whose point coordinate is zero contribute nothing and get a closest
coordinate of zero, except for the smallest axis: when the point lies on its
boundary hyperplane and projects inside the sub-hyperellipsoid, the closest
point leaves that hyperplane and is available in closed form.  Everything
else is a smaller problem for the bisection root-finder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisPartition:
    """Canonical axis indices split by the sign of the point coordinate.

    ``positive[k]`` is the canonical index of sub-problem axis *k*.
    """
    positive: tuple[int, ...]
    zero: tuple[int, ...]

    @classmethod
    def from_point(cls, y: np.ndarray) -> AxisPartition:
        positive = tuple(int(i) for i in np.flatnonzero(y > 0))
        zero = tuple(int(i) for i in np.flatnonzero(~(y > 0)))
        return cls(positive=positive, zero=zero)

    def scatter(self, sub_x: np.ndarray, n: int) -> np.ndarray:
        """Expand a sub-problem solution to a length-*n* canonical vector."""
        x = np.zeros(n)
        x[list(self.positive)] = sub_x
        return x


@dataclass(frozen=True)
class ClosedForm:
    """The closest point is off the smallest axis' boundary hyperplane."""
    x: np.ndarray
    sqr_distance: float


@dataclass(frozen=True)
class NeedsBisection:
    """The closest point lies in the span of the positive axes."""
    partition: AxisPartition
    radii: np.ndarray
    point: np.ndarray


def reduced_solve(e: np.ndarray, y: np.ndarray) -> ClosedForm | NeedsBisection:
    """Classify a canonical point; *e* non-increasing, *y* non-negative."""
    e = np.asarray(e, dtype=float)
    y = np.asarray(y, dtype=float)
    n = len(e)

    partition = AxisPartition.from_point(y)
    pos = list(partition.positive)
    e_pos = e[pos]
    y_pos = y[pos]
    sub_problem = NeedsBisection(partition=partition, radii=e_pos, point=y_pos)

    if y[-1] > 0:
        logger.debug("smallest axis coordinate positive; bisecting %d axes", len(pos))
        return sub_problem

    e_last = e[-1]
    numer = e_pos * y_pos
    denom = e_pos * e_pos - e_last * e_last

    # Inside the sub-hyperellipsoid's bounding box.  Also rules out
    # denom == 0 when some radius equals the smallest one.
    if np.all(numer < denom):
        xde = numer / denom
        discr = 1.0 - float(np.dot(xde, xde))
        if discr > 0:
            x = partition.scatter(e_pos * xde, n)
            x[-1] = e_last * np.sqrt(discr)
            diff = x[pos] - y_pos
            sqr_distance = float(np.dot(diff, diff)) + float(x[-1] * x[-1])
            logger.debug("point projects inside the sub-hyperellipsoid; closed form")
            return ClosedForm(x=x, sqr_distance=sqr_distance)

    logger.debug("point projects outside the sub-hyperellipsoid; bisecting %d axes", len(pos))
    return sub_problem
