"""Pydantic data models for hyperellipsoids, query files and results."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Protocol

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, model_validator


# ── Enums ──────────────────────────────────────────────────────────────────

class SolveBranch(str, Enum):
    CLOSED_FORM = "CLOSED_FORM"
    BISECTION = "BISECTION"


class Termination(str, Enum):
    ON_SURFACE = "ON_SURFACE"
    BOUND_COLLISION = "BOUND_COLLISION"
    EXACT_ROOT = "EXACT_ROOT"
    ITERATION_CAP = "ITERATION_CAP"


# ── Collaborator contracts ─────────────────────────────────────────────────

class Localizable(Protocol):
    def localize(self) -> np.ndarray: ...


class HyperEllipsoidLike(Protocol):
    def get_center(self) -> np.ndarray: ...

    def get_axes(self) -> np.ndarray: ...

    def get_radii(self) -> np.ndarray: ...


# ── Geometry ───────────────────────────────────────────────────────────────

Radius = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Point(BaseModel):
    """An N-dimensional coordinate."""
    model_config = ConfigDict(frozen=True)

    coords: list[FiniteFloat] = Field(min_length=1)

    @property
    def dim(self) -> int:
        return len(self.coords)

    def localize(self) -> np.ndarray:
        return np.array(self.coords, dtype=float)


class HyperEllipsoid(BaseModel):
    """Center, orthonormal axis frame and per-axis radii.

    ``axes`` is row-major: row *i* is the world-frame unit direction of axis
    *i*.  It defaults to the identity.  Orthonormality is the caller's
    responsibility and is not checked.
    """
    model_config = ConfigDict(frozen=True)

    center: list[FiniteFloat] = Field(min_length=1)
    axes: list[list[FiniteFloat]]
    radii: list[Radius] = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _default_axes(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("axes") is None:
            center = data.get("center")
            n = len(center) if isinstance(center, (list, tuple)) else 0
            data = {**data, "axes": np.eye(n).tolist()}
        return data

    @model_validator(mode="after")
    def _check_shapes(self) -> HyperEllipsoid:
        n = len(self.center)
        if len(self.radii) != n:
            raise ValueError(
                f"radii has {len(self.radii)} entries, center has {n}"
            )
        if len(self.axes) != n or any(len(row) != n for row in self.axes):
            raise ValueError(f"axes must be a {n}x{n} matrix")
        return self

    @property
    def dim(self) -> int:
        return len(self.center)

    def get_center(self) -> np.ndarray:
        return np.array(self.center, dtype=float)

    def get_axes(self) -> np.ndarray:
        return np.array(self.axes, dtype=float)

    def get_radii(self) -> np.ndarray:
        return np.array(self.radii, dtype=float)


# ── Results ────────────────────────────────────────────────────────────────

class DistanceResult(BaseModel):
    distance: float = Field(ge=0)
    squared_distance: float = Field(ge=0)
    closest_point_coords: list[float]
    branch: SolveBranch
    termination: Termination | None = None
    iterations: int = Field(default=0, ge=0)

    @property
    def closest_point(self) -> Point:
        return Point(coords=self.closest_point_coords)


# ── Query files (input YAML) / reports (output JSON) ───────────────────────

class QuerySpec(BaseModel):
    """Root schema for a distance-query YAML file."""
    query_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    point: list[FiniteFloat] = Field(min_length=1)
    ellipsoid: HyperEllipsoid

    @model_validator(mode="after")
    def _check_dimension(self) -> QuerySpec:
        if len(self.point) != self.ellipsoid.dim:
            raise ValueError(
                f"point has {len(self.point)} coordinates, "
                f"ellipsoid has {self.ellipsoid.dim} dimensions"
            )
        return self


class DistanceReport(BaseModel):
    query_id: str
    point: list[float]
    result: DistanceResult
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    hyperdist_version: str = "0.1.0"
