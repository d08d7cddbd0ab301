"""Tests for the linear-algebra helpers."""

from __future__ import annotations

import math

import numpy as np

from hyperdist.utils import (
    add,
    length_robust,
    mult,
    mult_t,
    sort_with_permutation,
    subtract,
)


def test_length_robust_simple() -> None:
    assert length_robust([3.0, 4.0]) == 5.0


def test_length_robust_zero_vector() -> None:
    assert length_robust([0.0, 0.0, 0.0]) == 0.0
    assert length_robust([]) == 0.0


def test_length_robust_no_overflow() -> None:
    # Naive sum of squares overflows to inf here.
    v = [1e200, 1e200]
    assert math.isclose(length_robust(v), 1e200 * math.sqrt(2), rel_tol=1e-12)


def test_length_robust_no_underflow() -> None:
    # Naive sum of squares underflows to 0 here.
    v = [1e-200, -1e-200]
    assert math.isclose(length_robust(v), 1e-200 * math.sqrt(2), rel_tol=1e-12)


def test_sort_with_permutation_is_stable() -> None:
    sorted_keys, perm = sort_with_permutation([2.0, 1.0, 2.0, 0.0])
    assert sorted_keys.tolist() == [0.0, 1.0, 2.0, 2.0]
    assert perm.tolist() == [3, 1, 0, 2]


def test_add_subtract() -> None:
    assert subtract([3, 2, 1], [1, 1, 1]).tolist() == [2.0, 1.0, 0.0]
    assert add([3, 2, 1], [1, 1, 1]).tolist() == [4.0, 3.0, 2.0]


def test_mult_and_transpose_invert_rotation() -> None:
    c, s = math.cos(0.3), math.sin(0.3)
    rot = np.array([[c, -s], [s, c]])
    v = [1.5, -2.0]
    back = mult_t(rot, mult(rot, v))
    assert np.allclose(back, v, atol=1e-15)
    assert np.allclose(mult(rot, [1.0, 0.0]), [c, s])
