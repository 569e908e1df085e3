# tests/test_xml.py
"""Tests for the XML reader/writer."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np
import pytest

from spatial3d import Plane, PlaneFormatError, Point3D, UnitVector3D
from spatial3d.io.xml import plane_from_xml, plane_to_xml, read_point, write_point


def test_plane_element_layout(raised_plane: Plane) -> None:
    """Exactly RootPoint then Normal, each with X/Y/Z attributes."""
    element = ET.fromstring(raised_plane.to_xml())

    assert element.tag == "Plane"
    assert [child.tag for child in element] == ["RootPoint", "Normal"]
    root_point, normal = list(element)
    assert {k: float(v) for k, v in root_point.attrib.items()} == {"X": 0.0, "Y": 0.0, "Z": 5.0}
    assert {k: float(v) for k, v in normal.attrib.items()} == {"X": 0.0, "Y": 0.0, "Z": 1.0}


@pytest.mark.parametrize(
    "plane",
    [
        Plane.from_coefficients(0, 0, 1, -5),
        Plane.from_coefficients(0, 1, 0, 3),
        Plane.from_coefficients(-1, 0, 0, 0.125),
        Plane.from_normal(UnitVector3D.z_axis()),
    ],
)
def test_round_trip_is_equal(plane: Plane) -> None:
    """Reading back what was written gives an equal plane."""
    assert Plane.from_xml(plane.to_xml()) == plane


def test_round_trip_general(tilted_plane: Plane) -> None:
    """Oblique normals read back to an equal plane, not just a close one."""
    restored = plane_from_xml(plane_to_xml(tilted_plane))
    assert restored == tilted_plane


def test_round_trip_random_planes() -> None:
    """Random normals and offsets survive a round trip exactly."""
    rng = np.random.default_rng(20240611)
    for _ in range(200):
        normal = UnitVector3D.create(*rng.normal(size=3))
        plane = Plane.from_normal(normal, float(rng.uniform(-100.0, 100.0)))
        assert Plane.from_xml(plane.to_xml()) == plane


def test_off_line_root_point_is_rebuilt() -> None:
    """A root point off the normal line still yields the plane through it."""
    text = "<Plane><RootPoint X='3' Y='4' Z='5' /><Normal X='0' Y='0' Z='1' /></Plane>"
    assert plane_from_xml(text) == Plane.from_coefficients(0, 0, 1, -5)


def test_custom_element_name(raised_plane: Plane) -> None:
    """The wrapper tag is free; only the children matter when reading."""
    text = raised_plane.to_xml("ClipPlane")
    assert text.startswith("<ClipPlane>")
    assert Plane.from_xml(text) == raised_plane


def test_read_child_element_form(raised_plane: Plane) -> None:
    """Components may be child elements instead of attributes."""
    text = (
        "<Plane>"
        "<RootPoint><X>0</X><Y>0</Y><Z>5</Z></RootPoint>"
        "<Normal><X>0</X><Y>0</Y><Z>1</Z></Normal>"
        "</Plane>"
    )
    assert plane_from_xml(text) == raised_plane


@pytest.mark.parametrize(
    "text",
    [
        "<Plane><RootPoint X='0' Y='0' Z='5' /></Plane>",
        "<Plane><Normal X='0' Y='0' Z='1' /></Plane>",
        "<Plane><RootPoint X='0' Y='0' Z='5' /><Normal X='0' Y='0' Z='1' />"
        "<Normal X='0' Y='0' Z='1' /></Plane>",
        "<Plane><RootPoint X='0' Y='0' /><Normal X='0' Y='0' Z='1' /></Plane>",
        "<Plane><RootPoint X='a' Y='0' Z='5' /><Normal X='0' Y='0' Z='1' /></Plane>",
        "<Plane><RootPoint X='0' Y='0' Z='5' /><Normal X='0' Y='0' Z='2' /></Plane>",
        "<Plane><RootPoint",
    ],
)
def test_malformed_xml(text: str) -> None:
    with pytest.raises(PlaneFormatError):
        plane_from_xml(text)


def test_point_element_contract() -> None:
    """Points serialize on their own with round-trippable floats."""
    parent = ET.Element("Shape")
    point = Point3D(0.1, -2.5, 1e-300)
    element = write_point(parent, "Corner", point)

    assert element.tag == "Corner"
    assert read_point(element) == point
