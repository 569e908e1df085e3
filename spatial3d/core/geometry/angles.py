# spatial3d/core/geometry/angles.py
"""Angle value type and axis-angle rotations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt
from scipy.spatial.transform import Rotation as SciRot


@dataclass(frozen=True, slots=True)
class Angle:
    """Plane angle stored in radians."""

    radians: float

    @classmethod
    def from_radians(cls, value: float) -> Angle:
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> Angle:
        return cls(float(np.deg2rad(value)))

    @property
    def degrees(self) -> float:
        return float(np.rad2deg(self.radians))

    def __neg__(self) -> Angle:
        return Angle(-self.radians)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)


def rotation_about_axis(axis: npt.ArrayLike, angle: Angle) -> SciRot:
    """Rotation by ``angle`` about ``axis`` through the origin.

    Args:
        axis: Unit 3-vector, right-hand rule
        angle: Rotation angle

    Returns:
        SciPy rotation object
    """
    axis_arr = np.asarray(axis, dtype=np.float64)
    return SciRot.from_rotvec(axis_arr * angle.radians)


def rotate_about_axis(
    xyz: npt.ArrayLike, axis: npt.ArrayLike, angle: Angle
) -> npt.NDArray[np.float64]:
    """Rotate a 3-vector about ``axis`` by ``angle``."""
    return rotation_about_axis(axis, angle).apply(np.asarray(xyz, dtype=np.float64))


__all__ = [
    "Angle",
    "rotate_about_axis",
    "rotation_about_axis",
]
