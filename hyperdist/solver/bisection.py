"""Bisection root-finder for the canonical closest-point equation.

With ``z_i = y_i / e_i`` and ``p_i = e_i / e_min`` the closest point is
``x_i = p_i² y_i / (s + p_i²)`` where *s* is the unique root of::

    G(s) = -1 + Σ (p_i² z_i / (s + p_i²))²

The root is searched for in the shifted variable ``t = s + 1``.  The smallest
``p_i²`` is exactly 1, so the denominators become ``t + (p_i² - 1)`` and the
last one is ``t`` itself, bracketed from below by ``z_min > 0``.  G is
strictly decreasing there, so the bracket is halved until it collapses to
adjacent floats, the function hits zero exactly, or the precision-derived
iteration cap is reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from hyperdist.models import Termination
from hyperdist.utils import length_robust

logger = logging.getLogger(__name__)


def max_bisections(dtype: type | np.dtype = np.float64) -> int:
    """Number of halvings that exhausts every representable value of *dtype*.

    ``3 + mantissa_bits - min_exponent`` with the exponent in the C
    ``DBL_MIN_EXP`` convention, i.e. 1076 for float64 and 151 for float32.
    """
    info = np.finfo(dtype)
    return 3 + int(info.nmant) - (int(info.minexp) + 1)


@dataclass(frozen=True)
class BisectionResult:
    """``iterations`` counts evaluations of G, not halvings attempted."""
    x: np.ndarray
    sqr_distance: float
    t: float
    iterations: int
    termination: Termination


def g_value(t: float, numerator: np.ndarray, p_sqr_minus_one: np.ndarray) -> float:
    ratio = numerator / (t + p_sqr_minus_one)
    return float(np.dot(ratio, ratio)) - 1.0


def bisect(
    e: np.ndarray,
    y: np.ndarray,
    max_iterations: int | None = None,
) -> BisectionResult:
    """Closest point on ``Σ (x_i/e_i)² = 1`` to *y*.

    *e* must be positive and non-increasing and every *y* strictly positive;
    the reduced solve only hands over sub-problems of that shape.
    """
    e = np.asarray(e, dtype=float)
    y = np.asarray(y, dtype=float)
    if max_iterations is None:
        max_iterations = max_bisections()

    z = y / e
    sum_z_sqr = float(np.dot(z, z))
    if sum_z_sqr == 1:
        return BisectionResult(
            x=y.copy(),
            sqr_distance=0.0,
            t=1.0,
            iterations=0,
            termination=Termination.ON_SURFACE,
        )

    p_sqr = (e / e[-1]) ** 2
    p_sqr_minus_one = p_sqr - 1
    numerator = p_sqr * z

    tmin = float(z[-1])
    if sum_z_sqr < 1:
        tmax = 1.0
    else:
        tmax = length_robust(numerator)

    t = tmin
    termination = Termination.ITERATION_CAP
    iterations = 0
    for _ in range(max_iterations):
        t = (tmin + tmax) * 0.5
        if t == tmin or t == tmax:
            termination = Termination.BOUND_COLLISION
            break

        g = g_value(t, numerator, p_sqr_minus_one)
        iterations += 1
        if g > 0:
            tmin = t
        elif g < 0:
            tmax = t
        else:
            termination = Termination.EXACT_ROOT
            break

    x = p_sqr * y / (t + p_sqr_minus_one)
    diff = x - y
    sqr_distance = float(np.dot(diff, diff))

    logger.debug(
        "bisection over %d axes: %s after %d iterations (t=%r)",
        len(e), termination.value, iterations, t,
    )
    return BisectionResult(
        x=x,
        sqr_distance=sqr_distance,
        t=float(t),
        iterations=iterations,
        termination=termination,
    )
