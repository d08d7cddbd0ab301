"""Fold a local-frame point into the canonical frame and back.

The canonical frame has every point coordinate non-negative and the radii
sorted non-increasing.  Reflections and the axis permutation are recorded so
the closest point found there can be mapped back to the local frame.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hyperdist.utils import sort_with_permutation


@dataclass(frozen=True)
class CanonicalFrame:
    negate: np.ndarray
    perm: np.ndarray
    inv_perm: np.ndarray
    radii: np.ndarray
    point: np.ndarray

    @property
    def dim(self) -> int:
        return len(self.radii)

    def restore(self, loc_x: np.ndarray) -> np.ndarray:
        """Undo the permutation and reflections applied by :func:`canonicalize`."""
        x = np.asarray(loc_x, dtype=float)[self.inv_perm]
        return np.where(self.negate, -x, x)


def canonicalize(y: np.ndarray, e: np.ndarray) -> CanonicalFrame:
    """Reflect *y* into the first octant and sort *e* non-increasing.

    Equal radii keep their original axis order.
    """
    y = np.asarray(y, dtype=float)
    e = np.asarray(e, dtype=float)

    negate = y < 0

    # Ascending sort on -e gives descending radii.
    _, perm = sort_with_permutation(-e)
    inv_perm = np.empty_like(perm)
    inv_perm[perm] = np.arange(len(perm))

    return CanonicalFrame(
        negate=negate,
        perm=perm,
        inv_perm=inv_perm,
        radii=e[perm],
        point=np.abs(y[perm]),
    )
