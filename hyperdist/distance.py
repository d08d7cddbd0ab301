"""Point-to-hyperellipsoid distance: frame transform and orchestration."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Sequence

import numpy as np

from hyperdist.errors import (
    DimensionMismatchError,
    InvalidPointError,
    InvalidRadiusError,
)
from hyperdist.models import (
    DistanceResult,
    HyperEllipsoidLike,
    Localizable,
)
from hyperdist.solver import Solution, canonicalize, solve_canonical
from hyperdist.utils import add, mult, mult_t, subtract

logger = logging.getLogger(__name__)


def _check_point(p: np.ndarray) -> None:
    if p.ndim != 1 or p.size == 0:
        raise InvalidPointError(
            f"point must be a non-empty 1-D vector, got shape {p.shape}"
        )
    if not np.all(np.isfinite(p)):
        raise InvalidPointError(f"point has non-finite coordinates: {p.tolist()}")


def _check_radii(radii: np.ndarray) -> None:
    if not np.all(np.isfinite(radii)) or np.any(radii <= 0):
        raise InvalidRadiusError(
            f"radii must be positive and finite, got {radii.tolist()}"
        )


def _check_shapes(n: int, center: np.ndarray, axes: np.ndarray, radii: np.ndarray) -> None:
    if center.shape != (n,):
        raise DimensionMismatchError(
            f"point has {n} coordinates, ellipsoid center has shape {center.shape}"
        )
    if radii.shape != (n,):
        raise DimensionMismatchError(
            f"point has {n} coordinates, ellipsoid radii have shape {radii.shape}"
        )
    if axes.shape != (n, n):
        raise DimensionMismatchError(
            f"axes must be {n}x{n}, got shape {axes.shape}"
        )


def sqr_distance_local(radii: Sequence[float], y: Sequence[float]) -> Solution:
    """Closest point to *y* on the axis-aligned hyperellipsoid with *radii*.

    Both the input and the returned closest point are in the ellipsoid's
    local frame.  *radii* may be in any order.
    """
    y = np.asarray(y, dtype=float)
    radii = np.asarray(radii, dtype=float)
    _check_point(y)
    if radii.shape != y.shape:
        raise DimensionMismatchError(
            f"point has {y.size} coordinates, got {radii.size} radii"
        )
    _check_radii(radii)

    frame = canonicalize(y, radii)
    solution = solve_canonical(frame.radii, frame.point)
    return dataclasses.replace(solution, x=frame.restore(solution.x))


def distance_and_closest_point(
    point: Sequence[float],
    ellipsoid: HyperEllipsoidLike,
) -> DistanceResult:
    """Distance from *point* to the surface of *ellipsoid* and the closest
    surface point, both in world coordinates.

    Raises a :class:`~hyperdist.errors.HyperdistError` subclass, before any
    computation, when the point is empty or non-finite, when the point and
    ellipsoid dimensions disagree, or when a radius is not positive and
    finite.  The rows of the axes matrix must be orthonormal; this is not
    checked.
    """
    p = np.asarray(point, dtype=float)
    _check_point(p)
    center = np.asarray(ellipsoid.get_center(), dtype=float)
    axes = np.asarray(ellipsoid.get_axes(), dtype=float)
    radii = np.asarray(ellipsoid.get_radii(), dtype=float)
    _check_shapes(p.size, center, axes, radii)
    _check_radii(radii)

    # Local coordinates of the query point.
    y = mult(axes, subtract(p, center))

    local = sqr_distance_local(radii, y)

    # Back to world coordinates.
    closest = add(mult_t(axes, local.x), center)
    distance = math.sqrt(local.sqr_distance)

    logger.debug(
        "distance=%r via %s (%d iterations)",
        distance, local.branch.value, local.iterations,
    )
    return DistanceResult(
        distance=distance,
        squared_distance=local.sqr_distance,
        closest_point_coords=closest.tolist(),
        branch=local.branch,
        termination=local.termination,
        iterations=local.iterations,
    )


def distance_to_point(
    point: Localizable,
    ellipsoid: HyperEllipsoidLike,
) -> DistanceResult:
    """Same as :func:`distance_and_closest_point` for a point object such as
    :class:`~hyperdist.models.Point`."""
    return distance_and_closest_point(point.localize(), ellipsoid)
