# spatial3d/core/geometry/points.py
"""Points in 3D Euclidean space."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np
import numpy.typing as npt

from spatial3d.core.geometry.angles import Angle, rotate_about_axis
from spatial3d.core.geometry.vectors import Triple, UnitVector3D, Vector3D, VectorLike
from spatial3d.errors import ParallelPlanesError
from spatial3d.utils.logger import get_logger

if TYPE_CHECKING:
    from spatial3d.core.geometry.plane import Plane

LOG = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Point3D(Triple):
    """Location in space; differences of points are vectors."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        self._coerce()

    @classmethod
    def origin(cls) -> Point3D:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def of_vector(cls, values: Sequence[float] | npt.ArrayLike) -> Point3D:
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @staticmethod
    def intersection_of(plane1: Plane, plane2: Plane, plane3: Plane) -> Point3D:
        """Unique point shared by three planes.

        Solves ``N x = -d`` where the rows of ``N`` are the plane normals.

        Raises:
            ParallelPlanesError: if the normals are linearly dependent
        """
        normals = np.vstack([p.normal.as_array() for p in (plane1, plane2, plane3)])
        rhs = -np.array([plane1.d, plane2.d, plane3.d], dtype=np.float64)
        if np.linalg.matrix_rank(normals) < 3:
            LOG.debug(f"planes share no single point, normals=\n{normals}")
            raise ParallelPlanesError("Planes do not intersect in a single point")
        return Point3D.of_vector(np.linalg.solve(normals, rhs))

    def vector_to(self, other: Point3D) -> Vector3D:
        return Vector3D(other.x - self.x, other.y - self.y, other.z - self.z)

    def distance_to(self, other: Point3D) -> float:
        return self.vector_to(other).length

    def to_vector(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def rotate(self, about: UnitVector3D, angle: Angle) -> Point3D:
        """Rotate about an axis through the origin."""
        return Point3D.of_vector(rotate_about_axis(self.as_array(), about.as_array(), angle))

    def __add__(self, other: VectorLike) -> Point3D:
        if not isinstance(other, (Vector3D, UnitVector3D)):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    @overload
    def __sub__(self, other: Point3D) -> Vector3D: ...

    @overload
    def __sub__(self, other: VectorLike) -> Point3D: ...

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (Vector3D, UnitVector3D)):
            return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


__all__ = ["Point3D"]
