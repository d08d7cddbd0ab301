"""Precondition violations raised before any computation starts."""

from __future__ import annotations


class HyperdistError(ValueError):
    """Base class for rejected inputs."""


class DimensionMismatchError(HyperdistError):
    pass


class InvalidRadiusError(HyperdistError):
    pass


class InvalidPointError(HyperdistError):
    pass
