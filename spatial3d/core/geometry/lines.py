# spatial3d/core/geometry/lines.py
"""Bounded line segments and infinite rays."""

from __future__ import annotations

from dataclasses import dataclass

from spatial3d.core.geometry.points import Point3D
from spatial3d.core.geometry.vectors import UnitVector3D, Vector3D
from spatial3d.errors import GeometryArgumentError


@dataclass(frozen=True, slots=True)
class Line3D:
    """Segment between two distinct points."""

    start_point: Point3D
    end_point: Point3D

    def __post_init__(self) -> None:
        if self.start_point == self.end_point:
            raise GeometryArgumentError(
                f"Line3D needs distinct end points, got {self.start_point} twice"
            )

    @property
    def direction(self) -> UnitVector3D:
        return self.start_point.vector_to(self.end_point).normalize()

    @property
    def length(self) -> float:
        return self.start_point.distance_to(self.end_point)

    def vector(self) -> Vector3D:
        """Start-to-end vector."""
        return self.start_point.vector_to(self.end_point)

    def __str__(self) -> str:
        return f"StartPoint: {self.start_point}, EndPoint: {self.end_point}"


@dataclass(frozen=True, slots=True)
class Ray3D:
    """Infinite line through a point with a unit direction."""

    through_point: Point3D
    direction: UnitVector3D

    def __post_init__(self) -> None:
        if not isinstance(self.direction, UnitVector3D):
            raise TypeError(
                f"Ray3D direction must be a UnitVector3D, got {type(self.direction).__name__}"
            )

    def point_at(self, t: float) -> Point3D:
        return self.through_point + t * self.direction

    def __str__(self) -> str:
        return f"ThroughPoint: {self.through_point}, Direction: {self.direction}"


__all__ = ["Line3D", "Ray3D"]
