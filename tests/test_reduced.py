"""Tests for the reduced solve (zero-coordinate handling)."""

from __future__ import annotations

import math

import numpy as np

from hyperdist.models import SolveBranch, Termination
from hyperdist.solver import solve_canonical
from hyperdist.solver.reduced import (
    AxisPartition,
    ClosedForm,
    NeedsBisection,
    reduced_solve,
)


def test_partition_maps_sub_problem_axes() -> None:
    partition = AxisPartition.from_point(np.array([1.0, 0.0, 2.0, 0.0]))
    assert partition.positive == (0, 2)
    assert partition.zero == (1, 3)
    assert partition.scatter(np.array([5.0, 6.0]), 4).tolist() == [5.0, 0.0, 6.0, 0.0]


def test_last_coordinate_positive_needs_bisection() -> None:
    outcome = reduced_solve(np.array([3.0, 2.0, 1.0]), np.array([1.0, 0.0, 2.0]))
    assert isinstance(outcome, NeedsBisection)
    assert outcome.partition.positive == (0, 2)
    assert outcome.radii.tolist() == [3.0, 1.0]
    assert outcome.point.tolist() == [1.0, 2.0]


def test_inside_sub_ellipse_closed_form() -> None:
    outcome = reduced_solve(np.array([3.0, 1.0]), np.array([1.0, 0.0]))
    assert isinstance(outcome, ClosedForm)
    # xde = 3/8, discr = 1 - 9/64
    assert outcome.x[0] == 1.125
    assert math.isclose(outcome.x[1], math.sqrt(55 / 64), rel_tol=1e-15)
    assert math.isclose(outcome.sqr_distance, 0.875, rel_tol=1e-14)


def test_outside_bounding_box_needs_bisection() -> None:
    outcome = reduced_solve(np.array([3.0, 1.0]), np.array([4.0, 0.0]))
    assert isinstance(outcome, NeedsBisection)
    assert outcome.partition.positive == (0,)
    assert outcome.partition.zero == (1,)


def test_outside_sub_ellipsoid_needs_bisection() -> None:
    # Inside the bounding box but discr < 0.
    outcome = reduced_solve(np.array([3.0, 2.0, 1.0]), np.array([2.0, 1.0, 0.0]))
    assert isinstance(outcome, NeedsBisection)
    assert outcome.partition.positive == (0, 1)


def test_equal_radii_do_not_divide_by_zero() -> None:
    outcome = reduced_solve(np.array([2.0, 2.0]), np.array([1.0, 0.0]))
    assert isinstance(outcome, NeedsBisection)

    solution = solve_canonical(np.array([2.0, 2.0]), np.array([1.0, 0.0]))
    assert np.allclose(solution.x, [2.0, 0.0], atol=1e-14)
    assert math.isclose(solution.sqr_distance, 1.0, rel_tol=1e-14)


def test_point_at_center_is_closed_form() -> None:
    outcome = reduced_solve(np.array([3.0, 2.0, 1.0]), np.zeros(3))
    assert isinstance(outcome, ClosedForm)
    assert outcome.x.tolist() == [0.0, 0.0, 1.0]
    assert outcome.sqr_distance == 1.0


def test_solve_canonical_scatters_bisection_result() -> None:
    solution = solve_canonical(np.array([3.0, 2.0, 1.0]), np.array([5.0, 0.0, 0.0]))
    assert solution.branch == SolveBranch.BISECTION
    assert np.allclose(solution.x, [3.0, 0.0, 0.0], atol=1e-14)
    assert math.isclose(solution.sqr_distance, 4.0, rel_tol=1e-14)
    assert solution.termination == Termination.BOUND_COLLISION


def test_solve_canonical_one_dimensional_zero() -> None:
    solution = solve_canonical(np.array([2.5]), np.array([0.0]))
    assert solution.branch == SolveBranch.CLOSED_FORM
    assert solution.x.tolist() == [2.5]
    assert solution.sqr_distance == 6.25
