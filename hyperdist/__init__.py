"""Distance from a point to a hyperellipsoid (Eberly's bisection method)."""

from hyperdist.distance import (
    distance_and_closest_point,
    distance_to_point,
    sqr_distance_local,
)
from hyperdist.models import DistanceResult, HyperEllipsoid, Point

__version__ = "0.1.0"

__all__ = [
    "DistanceResult",
    "HyperEllipsoid",
    "Point",
    "distance_and_closest_point",
    "distance_to_point",
    "sqr_distance_local",
]
