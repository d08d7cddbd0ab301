"""Canonical-frame closest-point solver stages."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hyperdist.models import SolveBranch, Termination
from hyperdist.solver.bisection import BisectionResult, bisect, max_bisections
from hyperdist.solver.canonical import CanonicalFrame, canonicalize
from hyperdist.solver.reduced import (
    AxisPartition,
    ClosedForm,
    NeedsBisection,
    reduced_solve,
)


@dataclass(frozen=True)
class Solution:
    """Closest point and squared distance, plus how they were found."""
    x: np.ndarray
    sqr_distance: float
    branch: SolveBranch
    termination: Termination | None = None
    iterations: int = 0


def solve_canonical(e: np.ndarray, y: np.ndarray) -> Solution:
    """Solve for a canonical point *y* (non-negative, *e* non-increasing)."""
    outcome = reduced_solve(e, y)
    if isinstance(outcome, ClosedForm):
        return Solution(
            x=outcome.x,
            sqr_distance=outcome.sqr_distance,
            branch=SolveBranch.CLOSED_FORM,
        )

    found = bisect(outcome.radii, outcome.point)
    return Solution(
        x=outcome.partition.scatter(found.x, len(e)),
        sqr_distance=found.sqr_distance,
        branch=SolveBranch.BISECTION,
        termination=found.termination,
        iterations=found.iterations,
    )


__all__ = [
    "AxisPartition",
    "BisectionResult",
    "CanonicalFrame",
    "Solution",
    "ClosedForm",
    "NeedsBisection",
    "bisect",
    "canonicalize",
    "max_bisections",
    "reduced_solve",
    "solve_canonical",
]
