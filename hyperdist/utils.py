"""Shared linear-algebra helpers."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def subtract(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Component-wise ``a - b``."""
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)


def add(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Component-wise ``a + b``."""
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def mult(matrix: np.ndarray, v: Sequence[float]) -> np.ndarray:
    """Matrix-vector product ``A · v``."""
    return np.asarray(matrix, dtype=float) @ np.asarray(v, dtype=float)


def mult_t(matrix: np.ndarray, v: Sequence[float]) -> np.ndarray:
    """Transposed matrix-vector product ``Aᵀ · v``."""
    return np.asarray(matrix, dtype=float).T @ np.asarray(v, dtype=float)


def length_robust(v: Sequence[float]) -> float:
    """Euclidean length of *v* that neither overflows nor underflows.

    The vector is scaled by its largest magnitude before squaring, so
    components near the limits of the float range still produce a finite,
    non-zero length.  The zero vector has length 0.
    """
    arr = np.abs(np.asarray(v, dtype=float))
    if arr.size == 0:
        return 0.0
    vmax = float(arr.max())
    if vmax == 0.0:
        return 0.0
    scaled = arr / vmax
    return vmax * float(np.sqrt(np.dot(scaled, scaled)))


def sort_with_permutation(keys: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    """Sort *keys* ascending and return ``(sorted_keys, perm)``.

    ``sorted_keys[i] == keys[perm[i]]``.  The sort is stable: equal keys keep
    their original relative order.
    """
    arr = np.asarray(keys, dtype=float)
    perm = np.argsort(arr, kind="stable")
    return arr[perm], perm
