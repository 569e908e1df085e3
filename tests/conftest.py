# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from spatial3d import Plane, Point3D


@pytest.fixture
def xy_plane() -> Plane:
    """Plane z = 0 with normal +Z."""
    from spatial3d import Plane

    return Plane.from_coefficients(0.0, 0.0, 1.0, 0.0)


@pytest.fixture
def raised_plane() -> Plane:
    """Plane z = 5 with normal +Z."""
    from spatial3d import Plane

    return Plane.from_coefficients(0.0, 0.0, 1.0, -5.0)


@pytest.fixture
def tilted_plane() -> Plane:
    """Plane through the three unit points on the axes."""
    from spatial3d import Plane, Point3D

    return Plane.from_points(Point3D(1, 0, 0), Point3D(0, 1, 0), Point3D(0, 0, 1))


@pytest.fixture
def sample_points() -> list[Point3D]:
    """Points on both sides of the fixture planes."""
    from spatial3d import Point3D

    return [
        Point3D(0.0, 0.0, 0.0),
        Point3D(1.0, 2.0, 3.0),
        Point3D(-4.5, 0.25, -7.0),
        Point3D(10.0, -3.0, 2.5),
        Point3D(0.3, 0.3, 0.3),
    ]
