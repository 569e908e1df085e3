"""Exception hierarchy raised by the geometry types."""

from __future__ import annotations


class Spatial3DError(Exception):
    """Base class for every error raised by spatial3d."""


class GeometryArgumentError(Spatial3DError, ValueError):
    """Arguments describe a configuration the operation cannot handle."""


class DuplicatePointsError(GeometryArgumentError):
    """Two of the points that should define a plane coincide."""


class CollinearPointsError(GeometryArgumentError):
    """Three distinct points lie on one line and span no plane."""


class NonParallelPlanesError(GeometryArgumentError):
    """Planes are not parallel, so no single signed distance exists."""


class ParallelPlanesError(GeometryArgumentError):
    """Planes are (near-)parallel, so they do not intersect in a line or point."""


class DegenerateVectorError(GeometryArgumentError):
    """Vector length is too small to be normalized."""


class GeometryStateError(Spatial3DError, RuntimeError):
    """Operation has no unique answer for the given configuration."""


class LineInPlaneError(GeometryStateError):
    """Line lies in the plane, every point of it is an intersection."""


class PlaneFormatError(Spatial3DError, ValueError):
    """Text or XML could not be read as a geometry value."""


__all__ = [
    "Spatial3DError",
    "GeometryArgumentError",
    "DuplicatePointsError",
    "CollinearPointsError",
    "NonParallelPlanesError",
    "ParallelPlanesError",
    "DegenerateVectorError",
    "GeometryStateError",
    "LineInPlaneError",
    "PlaneFormatError",
]
