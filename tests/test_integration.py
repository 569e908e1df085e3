# tests/test_integration.py
"""Integration smoke tests."""

from __future__ import annotations

import math

import pytest

from spatial3d.config import Settings


def test_config_import_smoke() -> None:
    """Smoke test: import and instantiate main config."""
    from spatial3d.config import get_settings

    settings = get_settings()
    assert isinstance(settings, Settings)


def test_public_api_smoke() -> None:
    """Smoke test: every public name resolves."""
    import spatial3d

    for name in spatial3d.__all__:
        assert getattr(spatial3d, name) is not None


def test_plane_pipeline() -> None:
    """Build, query, intersect, rotate and serialize one plane."""
    from spatial3d import Angle, Line3D, Plane, Point3D, UnitVector3D

    plane = Plane.from_points(Point3D(0, 0, 2), Point3D(1, 0, 2), Point3D(0, 1, 2))
    assert plane.signed_distance_to(Point3D(4, 4, 7)) == pytest.approx(5.0)

    hit = plane.intersection_with(Line3D(Point3D(1, 1, 0), Point3D(1, 1, 4)))
    assert hit is not None
    assert hit.equals(Point3D(1, 1, 2), 1e-12)

    turned = plane.rotate(UnitVector3D.x_axis(), Angle.from_degrees(90))
    assert turned.normal.equals(UnitVector3D(0.0, -1.0, 0.0), 1e-12)
    assert turned.absolute_distance_to(Point3D(0, -2, 0)) == pytest.approx(0.0, abs=1e-12)

    restored = Plane.from_xml(turned.to_xml())
    assert restored.equals(turned, 1e-12)
    assert math.isclose(restored.d, turned.d, abs_tol=1e-12)
