# spatial3d/core/geometry/vectors.py
"""Free vectors and unit (direction) vectors in 3D."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np
import numpy.typing as npt

from spatial3d.config import DIRECTION_TOLERANCE, SINGLE_EPSILON, UNIT_LENGTH_TOLERANCE
from spatial3d.core.geometry.angles import Angle, rotate_about_axis
from spatial3d.errors import DegenerateVectorError, GeometryArgumentError
from spatial3d.utils.format import format_triple
from spatial3d.utils.logger import get_logger

if TYPE_CHECKING:
    from spatial3d.core.geometry.points import Point3D

LOG = get_logger(__name__)


class Triple:
    """Shared behavior of the x/y/z value types."""

    __slots__ = ()

    x: float
    y: float
    z: float

    def _coerce(self) -> None:
        # frozen dataclass: bypass __setattr__ to store plain floats
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def equals(self, other: Triple, tolerance: float) -> bool:
        """Component-wise comparison within ``tolerance``."""
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        return bool(np.all(np.abs(self.as_array() - other.as_array()) <= tolerance))

    def __str__(self) -> str:
        return format_triple(self.as_array())


@dataclass(frozen=True, slots=True)
class Vector3D(Triple):
    """Free vector with arbitrary length."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        self._coerce()

    @classmethod
    def of_vector(cls, values: Sequence[float] | npt.ArrayLike) -> Vector3D:
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def dot(self, other: VectorLike) -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: VectorLike) -> Vector3D:
        return Vector3D.of_vector(np.cross(self.as_array(), other.as_array()))

    def normalize(self) -> UnitVector3D:
        return UnitVector3D.create(self.x, self.y, self.z)

    def rotate(self, about: UnitVector3D, angle: Angle) -> Vector3D:
        return Vector3D.of_vector(rotate_about_axis(self.as_array(), about.as_array(), angle))

    def to_point(self) -> Point3D:
        from spatial3d.core.geometry.points import Point3D

        return Point3D(self.x, self.y, self.z)

    def __add__(self, other: VectorLike) -> Vector3D:
        if not isinstance(other, (Vector3D, UnitVector3D)):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: VectorLike) -> Vector3D:
        if not isinstance(other, (Vector3D, UnitVector3D)):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        s = float(scalar)
        return Vector3D(s * self.x, s * self.y, s * self.z)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        s = float(scalar)
        return Vector3D(self.x / s, self.y / s, self.z / s)


@dataclass(frozen=True, slots=True)
class UnitVector3D(Triple):
    """Direction vector, length 1 within ``UNIT_LENGTH_TOLERANCE``.

    Use :meth:`create` to normalize arbitrary components; the constructor only
    validates.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        self._coerce()
        norm = float(np.linalg.norm(self.as_array()))
        if not abs(norm - 1.0) <= UNIT_LENGTH_TOLERANCE:
            raise GeometryArgumentError(
                f"UnitVector3D needs length 1, got {norm} for ({self.x}, {self.y}, {self.z})"
            )

    @classmethod
    def create(
        cls, x: float, y: float, z: float, tolerance: float = SINGLE_EPSILON
    ) -> UnitVector3D:
        """Normalize ``(x, y, z)``.

        Raises:
            DegenerateVectorError: if the Euclidean norm is below ``tolerance``
        """
        arr = np.array([x, y, z], dtype=np.float64)
        norm = float(np.linalg.norm(arr))
        if not norm >= tolerance or not np.isfinite(norm):
            LOG.debug(f"cannot normalize ({x}, {y}, {z}): norm={norm}")
            raise DegenerateVectorError(
                f"The Euclidean norm of ({x}, {y}, {z}) is {norm}, below tolerance {tolerance}"
            )
        unit = arr / norm
        return cls(float(unit[0]), float(unit[1]), float(unit[2]))

    @classmethod
    def of_vector(cls, values: Sequence[float] | npt.ArrayLike) -> UnitVector3D:
        """Normalize a 3-component sequence."""
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
        return cls.create(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def x_axis(cls) -> UnitVector3D:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls) -> UnitVector3D:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls) -> UnitVector3D:
        return cls(0.0, 0.0, 1.0)

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def dot(self, other: VectorLike) -> float:
        return float(np.dot(self.as_array(), other.as_array()))

    def cross(self, other: VectorLike) -> Vector3D:
        return Vector3D.of_vector(np.cross(self.as_array(), other.as_array()))

    def is_parallel_to(self, other: UnitVector3D, tolerance: float = DIRECTION_TOLERANCE) -> bool:
        """True when the directions agree or are opposite, ``|1 - |u.v|| <= tolerance``."""
        return abs(1.0 - abs(self.dot(other))) <= tolerance

    def is_perpendicular_to(
        self, other: UnitVector3D, tolerance: float = DIRECTION_TOLERANCE
    ) -> bool:
        return abs(self.dot(other)) < tolerance

    def rotate(self, about: UnitVector3D, angle: Angle) -> UnitVector3D:
        rotated = rotate_about_axis(self.as_array(), about.as_array(), angle)
        return UnitVector3D(float(rotated[0]), float(rotated[1]), float(rotated[2]))

    def to_vector(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def to_point(self) -> Point3D:
        from spatial3d.core.geometry.points import Point3D

        return Point3D(self.x, self.y, self.z)

    def __neg__(self) -> UnitVector3D:
        return UnitVector3D(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3D:
        if not isinstance(scalar, (int, float, np.floating, np.integer)):
            return NotImplemented
        s = float(scalar)
        return Vector3D(s * self.x, s * self.y, s * self.z)

    __rmul__ = __mul__


VectorLike = Union[Vector3D, UnitVector3D]


__all__ = ["Triple", "UnitVector3D", "Vector3D", "VectorLike"]
