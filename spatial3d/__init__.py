# spatial3d/__init__.py
"""Analytic geometry of planes in 3D Euclidean space."""

from __future__ import annotations

from spatial3d.config import Settings, get_settings
from spatial3d.core.geometry import Angle, Line3D, Plane, Point3D, Ray3D, UnitVector3D, Vector3D
from spatial3d.errors import (
    CollinearPointsError,
    DegenerateVectorError,
    DuplicatePointsError,
    GeometryArgumentError,
    GeometryStateError,
    LineInPlaneError,
    NonParallelPlanesError,
    ParallelPlanesError,
    PlaneFormatError,
    Spatial3DError,
)

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "CollinearPointsError",
    "DegenerateVectorError",
    "DuplicatePointsError",
    "GeometryArgumentError",
    "GeometryStateError",
    "Line3D",
    "LineInPlaneError",
    "NonParallelPlanesError",
    "ParallelPlanesError",
    "Plane",
    "PlaneFormatError",
    "Point3D",
    "Ray3D",
    "Settings",
    "Spatial3DError",
    "UnitVector3D",
    "Vector3D",
    "get_settings",
]
