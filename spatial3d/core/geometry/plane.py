# spatial3d/core/geometry/plane.py
"""Infinite plane ``normal . x + d = 0`` with a unit normal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from spatial3d.config import (
    HASH_BITS,
    HASH_MULTIPLIER,
    PARALLEL_TOLERANCE,
    RAY_PARALLEL_TOLERANCE,
    SINGLE_EPSILON,
    XML_PLANE_ELEMENT,
)
from spatial3d.core.geometry.angles import Angle
from spatial3d.core.geometry.lines import Line3D, Ray3D
from spatial3d.core.geometry.points import Point3D
from spatial3d.core.geometry.vectors import UnitVector3D, Vector3D, VectorLike
from spatial3d.errors import (
    CollinearPointsError,
    DuplicatePointsError,
    LineInPlaneError,
    NonParallelPlanesError,
    ParallelPlanesError,
)
from spatial3d.utils.format import format_scalar
from spatial3d.utils.logger import get_logger

LOG = get_logger(__name__)

Projectable = Union[Point3D, Line3D, Ray3D, Vector3D, UnitVector3D]


def _mix_hash(*values: float) -> int:
    """Fold hashes with multiply-xor, wrapping to a signed ``HASH_BITS`` integer."""
    mask = (1 << HASH_BITS) - 1
    result = hash(values[0]) & mask
    for value in values[1:]:
        result = ((result * HASH_MULTIPLIER) ^ (hash(value) & mask)) & mask
    if result >= 1 << (HASH_BITS - 1):
        result -= 1 << HASH_BITS
    return result


@dataclass(frozen=True, slots=True, eq=False)
class Plane:
    """Plane of all points ``x`` with ``normal . x = -d``.

    Attributes:
        normal: Unit normal, sets orientation and the sign of distances
        d: Signed offset; ``-d`` is the distance from the origin along ``normal``

    Two planes compare equal when their root points and normals are equal.
    A plane and its flipped-normal twin describe the same points but are not
    equal.
    """

    normal: UnitVector3D
    d: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.normal, UnitVector3D):
            raise TypeError(
                f"Plane normal must be a UnitVector3D, got {type(self.normal).__name__}"
            )
        object.__setattr__(self, "d", float(self.d))

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def from_coefficients(cls, x: float, y: float, z: float, d: float) -> Plane:
        """Plane ``x*X + y*Y + z*Z + d = 0``; ``(x, y, z)`` is normalized, ``d`` kept."""
        return cls(UnitVector3D.create(x, y, z), d)

    @classmethod
    def from_normal(cls, normal: UnitVector3D, offset: float = 0.0) -> Plane:
        """Plane at signed distance ``offset`` from the origin along ``normal``."""
        return cls(normal, -offset)

    @classmethod
    def from_normal_and_point(cls, normal: UnitVector3D, point: Point3D) -> Plane:
        return cls.from_normal(normal, normal.dot(point.to_vector()))

    @classmethod
    def from_point_and_normal(cls, point: Point3D, normal: UnitVector3D) -> Plane:
        return cls.from_normal(normal, normal.dot(point.to_vector()))

    @classmethod
    def from_points(cls, p1: Point3D, p2: Point3D, p3: Point3D) -> Plane:
        """Plane through three distinct, non-collinear points.

        The normal follows the right-hand rule on ``(p2 - p1) x (p3 - p1)``.

        Raises:
            DuplicatePointsError: if any two points are equal
            CollinearPointsError: if the points lie on one line
        """
        if p1 == p2 or p1 == p3 or p2 == p3:
            LOG.debug(f"duplicate points {p1}, {p2}, {p3}")
            raise DuplicatePointsError("Must use three different points")

        v1 = p2 - p1
        v2 = p3 - p1
        cross = v1.cross(v2)
        if cross.length <= SINGLE_EPSILON:
            LOG.debug(f"collinear points {p1}, {p2}, {p3}")
            raise CollinearPointsError("The 3 points should not be on the same line")

        return cls.from_normal_and_point(cross.normalize(), p1)

    @classmethod
    def parse(cls, text: str) -> Plane:
        """Read a plane from text, see :func:`spatial3d.io.parser.parse_plane`."""
        from spatial3d.io.parser import parse_plane

        return parse_plane(text)

    @staticmethod
    def point_from_planes(plane1: Plane, plane2: Plane, plane3: Plane) -> Point3D:
        return Point3D.intersection_of(plane1, plane2, plane3)

    # ------------------------------------------------------------------
    # derived values
    # ------------------------------------------------------------------
    @property
    def a(self) -> float:
        return self.normal.x

    @property
    def b(self) -> float:
        return self.normal.y

    @property
    def c(self) -> float:
        return self.normal.z

    @property
    def root_point(self) -> Point3D:
        """Point of the plane closest to the origin."""
        return (-self.d * self.normal).to_point()

    # ------------------------------------------------------------------
    # distances
    # ------------------------------------------------------------------
    def signed_distance_to_point(self, point: Point3D) -> float:
        """Positive on the side the normal points toward."""
        projected = self.project_point(point)
        return projected.vector_to(point).dot(self.normal)

    def signed_distance_to_plane(self, other: Plane) -> float:
        """Signed distance to a parallel plane, measured at its root point.

        Raises:
            NonParallelPlanesError: if the normals are not parallel
        """
        if not self.normal.is_parallel_to(other.normal, tolerance=PARALLEL_TOLERANCE):
            LOG.debug(f"planes {self} and {other} are not parallel")
            raise NonParallelPlanesError("Planes are not parallel")
        return self.signed_distance_to_point(other.root_point)

    def signed_distance_to_ray(self, ray: Ray3D) -> float:
        """Distance to the through point of a ray parallel to the plane.

        Any ray that is not parallel to the plane gives ``0.0``, including
        rays that do not cross the plane in the sense of their direction.
        """
        if abs(ray.direction.dot(self.normal)) < RAY_PARALLEL_TOLERANCE:
            return self.signed_distance_to_point(ray.through_point)
        return 0.0

    def signed_distance_to(self, other: Union[Point3D, Plane, Ray3D]) -> float:
        if isinstance(other, Point3D):
            return self.signed_distance_to_point(other)
        if isinstance(other, Plane):
            return self.signed_distance_to_plane(other)
        if isinstance(other, Ray3D):
            return self.signed_distance_to_ray(other)
        raise TypeError(f"Unsupported type for signed distance: {type(other)}")

    def absolute_distance_to(self, point: Point3D) -> float:
        return abs(self.signed_distance_to_point(point))

    # ------------------------------------------------------------------
    # projections
    # ------------------------------------------------------------------
    def project_point(self, point: Point3D) -> Point3D:
        """Orthogonal projection along the normal."""
        return self.project_point_along(point, self.normal)

    def project_point_along(self, point: Point3D, direction: UnitVector3D) -> Point3D:
        """Projection along ``direction``.

        The step is ``(normal . point + d) * direction``, which lands on the
        plane only when ``direction`` is the normal; other directions give the
        oblique variant of the same formula.
        """
        dot = self.normal.dot(point.to_vector())
        projection_vector = (dot + self.d) * direction
        return point - projection_vector

    def project_line(self, line: Line3D) -> Line3D:
        return Line3D(self.project_point(line.start_point), self.project_point(line.end_point))

    def project_ray(self, ray: Ray3D) -> Ray3D:
        through_point = self.project_point(ray.through_point)
        direction = self.project_vector(ray.direction).direction
        return Ray3D(through_point, direction)

    def project_vector(self, vector: VectorLike) -> Ray3D:
        """Project a vector anchored at the origin.

        The result depends on where the plane sits: the origin and the vector's
        tip are both projected, and the ray runs from the first to the second.
        """
        projected_end = self.project_point(vector.to_point())
        projected_zero = self.project_point(Point3D.origin())
        return Ray3D(projected_zero, projected_zero.vector_to(projected_end).normalize())

    def project(self, other: Projectable) -> Union[Point3D, Line3D, Ray3D]:
        if isinstance(other, Point3D):
            return self.project_point(other)
        if isinstance(other, Line3D):
            return self.project_line(other)
        if isinstance(other, Ray3D):
            return self.project_ray(other)
        if isinstance(other, (Vector3D, UnitVector3D)):
            return self.project_vector(other)
        raise TypeError(f"Unsupported type for projection: {type(other)}")

    # ------------------------------------------------------------------
    # intersections
    # ------------------------------------------------------------------
    def intersection_with_plane(self, other: Plane, tolerance: float = SINGLE_EPSILON) -> Ray3D:
        """Line shared by two planes.

        Raises:
            ParallelPlanesError: if the second singular value of the stacked
                normals is below ``tolerance``
        """
        a = np.vstack([self.normal.as_array(), other.normal.as_array()])
        u, s, vh = np.linalg.svd(a, full_matrices=True)
        if s[1] < tolerance:
            LOG.debug(f"planes {self} and {other} are parallel, singular values {s}")
            raise ParallelPlanesError("Planes are parallel")

        y = np.array([-self.d, -other.d], dtype=np.float64)
        # minimum-norm solution of a x = y from the same decomposition
        point_on_line = vh[:2].T @ ((u.T @ y) / s)
        through_point = Point3D.of_vector(point_on_line)
        direction = UnitVector3D.of_vector(vh[2])
        return Ray3D(through_point, direction)

    def intersection_with_line(self, line: Line3D) -> Optional[Point3D]:
        """Point where the segment crosses the plane, or ``None``.

        Raises:
            LineInPlaneError: if the whole line lies in the plane
        """
        if line.direction.is_perpendicular_to(self.normal):
            projected = self.project_point_along(line.start_point, line.direction)
            if projected == line.start_point:
                LOG.debug(f"line {line} lies in plane {self}")
                raise LineInPlaneError("Line lies in the plane")
            return None

        distance = self.signed_distance_to_point(line.start_point)
        u = line.vector()
        t = -distance / u.dot(self.normal)
        if t > 1 or t < 0:
            return None
        return line.start_point + t * u

    def intersection_with_ray(self, ray: Ray3D) -> Point3D:
        """Point where the ray's line meets the plane.

        No parallel check: a ray parallel to the plane gives infinite or NaN
        coordinates.
        """
        distance = np.float64(self.signed_distance_to_point(ray.through_point))
        denominator = np.float64(ray.direction.dot(self.normal))
        if denominator == 0.0:
            LOG.warning(f"ray {ray} is parallel to plane {self}, intersection is not finite")
        with np.errstate(divide="ignore", invalid="ignore"):
            t = -distance / denominator
        return ray.through_point + float(t) * ray.direction

    def intersection_with(
        self, other: Union[Plane, Line3D, Ray3D], tolerance: float = SINGLE_EPSILON
    ) -> Union[Ray3D, Point3D, None]:
        """Dispatch on the argument type; ``tolerance`` only applies to planes."""
        if isinstance(other, Plane):
            return self.intersection_with_plane(other, tolerance)
        if isinstance(other, Line3D):
            return self.intersection_with_line(other)
        if isinstance(other, Ray3D):
            return self.intersection_with_ray(other)
        raise TypeError(f"Unsupported type for intersection: {type(other)}")

    # ------------------------------------------------------------------
    # transformations
    # ------------------------------------------------------------------
    def mirror_about(self, point: Point3D) -> Point3D:
        """Reflection of ``point`` through the plane."""
        projected = self.project_point(point)
        distance = self.signed_distance_to_point(point)
        return projected - distance * self.normal

    def rotate(self, about: UnitVector3D, angle: Angle) -> Plane:
        """Rotate root point and normal about an axis through the origin."""
        rotated_root = self.root_point.rotate(about, angle)
        rotated_normal = self.normal.rotate(about, angle)
        return Plane.from_normal_and_point(rotated_normal, rotated_root)

    # ------------------------------------------------------------------
    # comparison & formatting
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self.root_point == other.root_point and self.normal == other.normal

    def __hash__(self) -> int:
        return _mix_hash(self.a, self.c, self.b, self.d)

    def equals(self, other: Plane, tolerance: float) -> bool:
        """Root points and normals equal within ``tolerance``, component-wise."""
        return self.root_point.equals(other.root_point, tolerance) and self.normal.equals(
            other.normal, tolerance
        )

    def __str__(self) -> str:
        return (
            f"A:{format_scalar(self.a)} B:{format_scalar(self.b)} "
            f"C:{format_scalar(self.c)} D:{format_scalar(self.d)}"
        )

    # ------------------------------------------------------------------
    # serialization
    # ------------------------------------------------------------------
    def to_xml(self, element_name: str = XML_PLANE_ELEMENT) -> str:
        """``element_name`` wrapping a ``RootPoint`` and a ``Normal`` child."""
        from spatial3d.io.xml import plane_to_xml

        return plane_to_xml(self, element_name)

    @classmethod
    def from_xml(cls, text: str) -> Plane:
        from spatial3d.io.xml import plane_from_xml

        return plane_from_xml(text)

    @staticmethod
    def get_schema() -> None:
        """No XML schema is published for planes."""
        return None


__all__ = ["Plane"]
