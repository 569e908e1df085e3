# spatial3d/core/geometry/__init__.py
"""Immutable 3D value types: angles, vectors, points, lines and planes."""

from __future__ import annotations

from spatial3d.core.geometry.angles import Angle, rotate_about_axis, rotation_about_axis
from spatial3d.core.geometry.lines import Line3D, Ray3D
from spatial3d.core.geometry.plane import Plane
from spatial3d.core.geometry.points import Point3D
from spatial3d.core.geometry.vectors import UnitVector3D, Vector3D

__all__ = [
    "Angle",
    "Line3D",
    "Plane",
    "Point3D",
    "Ray3D",
    "UnitVector3D",
    "Vector3D",
    "rotate_about_axis",
    "rotation_about_axis",
]
