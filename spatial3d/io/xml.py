# spatial3d/io/xml.py
"""XML reader/writer for planes and their parts.

A plane is written as two children, each in its own element form::

    <Plane>
      <RootPoint X="0.0" Y="0.0" Z="5.0" />
      <Normal X="0.0" Y="0.0" Z="1.0" />
    </Plane>

Readers also accept ``<X>``/``<Y>``/``<Z>`` child elements instead of attributes.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import numpy as np

from spatial3d.config import XML_NORMAL_ELEMENT, XML_PLANE_ELEMENT, XML_ROOT_POINT_ELEMENT
from spatial3d.core.geometry.plane import Plane
from spatial3d.core.geometry.points import Point3D
from spatial3d.core.geometry.vectors import Triple, UnitVector3D
from spatial3d.errors import GeometryArgumentError, PlaneFormatError
from spatial3d.utils.format import format_xml_float
from spatial3d.utils.logger import get_logger

LOG = get_logger(__name__)

_AXES = ("X", "Y", "Z")
# ulps searched on each side when recovering the offset from a root point
_OFFSET_SEARCH_ULPS = 4


# ---------- components ----------
def _write_xyz(parent: ET.Element, name: str, value: Triple) -> ET.Element:
    return ET.SubElement(
        parent,
        name,
        {axis: format_xml_float(v) for axis, v in zip(_AXES, value)},
    )


def _read_xyz(element: ET.Element) -> tuple[float, float, float]:
    values = []
    for axis in _AXES:
        text = element.get(axis)
        if text is None:
            child = element.find(axis)
            text = child.text if child is not None else None
        if text is None:
            raise PlaneFormatError(f"<{element.tag}> has no {axis} component")
        try:
            values.append(float(text))
        except ValueError as exc:
            raise PlaneFormatError(
                f"<{element.tag}> {axis} component {text!r} is not a number"
            ) from exc
    return values[0], values[1], values[2]


def _single_child(element: ET.Element, name: str) -> ET.Element:
    children = element.findall(name)
    if len(children) != 1:
        raise PlaneFormatError(
            f"<{element.tag}> needs exactly one <{name}> element, found {len(children)}"
        )
    return children[0]


def write_point(parent: ET.Element, name: str, point: Point3D) -> ET.Element:
    return _write_xyz(parent, name, point)


def read_point(element: ET.Element) -> Point3D:
    return Point3D(*_read_xyz(element))


def write_unit_vector(parent: ET.Element, name: str, vector: UnitVector3D) -> ET.Element:
    return _write_xyz(parent, name, vector)


def read_unit_vector(element: ET.Element) -> UnitVector3D:
    try:
        return UnitVector3D(*_read_xyz(element))
    except GeometryArgumentError as exc:
        raise PlaneFormatError(f"<{element.tag}> is not a unit vector: {exc}") from exc


# ---------- planes ----------
def plane_to_element(plane: Plane, element_name: str = XML_PLANE_ELEMENT) -> ET.Element:
    element = ET.Element(element_name)
    write_point(element, XML_ROOT_POINT_ELEMENT, plane.root_point)
    write_unit_vector(element, XML_NORMAL_ELEMENT, plane.normal)
    return element


def _plane_through_root(normal: UnitVector3D, root_point: Point3D) -> Plane:
    """Plane whose ``root_point`` reproduces ``root_point`` bit for bit.

    A written root point is ``(-d) * normal`` rounded per component, so ``-d``
    lies within a few ulps of ``root_k / normal_k`` on the largest normal
    component. Root points not on the normal line (hand-written XML) fall back
    to the plane through the point.
    """
    k = int(np.argmax(np.abs(normal.as_array())))
    scale = root_point.as_array()[k] / normal.as_array()[k]

    candidates = [scale]
    up = down = scale
    for _ in range(_OFFSET_SEARCH_ULPS):
        up = np.nextafter(up, np.inf)
        down = np.nextafter(down, -np.inf)
        candidates += [up, down]

    for candidate in candidates:
        plane = Plane(normal, -float(candidate))
        if plane.root_point == root_point:
            return plane

    LOG.debug(f"root point {root_point} is off the normal line, rebuilding through it")
    return Plane.from_normal_and_point(normal, root_point)


def plane_from_element(element: ET.Element) -> Plane:
    normal = read_unit_vector(_single_child(element, XML_NORMAL_ELEMENT))
    root_point = read_point(_single_child(element, XML_ROOT_POINT_ELEMENT))
    return _plane_through_root(normal, root_point)


def plane_to_xml(plane: Plane, element_name: str = XML_PLANE_ELEMENT) -> str:
    return ET.tostring(plane_to_element(plane, element_name), encoding="unicode")


def plane_from_xml(text: str) -> Plane:
    """Read a plane element; the element's own tag is not checked.

    Raises:
        PlaneFormatError: on malformed XML or missing/duplicated children
    """
    try:
        element = ET.fromstring(text)
    except ET.ParseError as exc:
        LOG.debug(f"malformed plane XML: {exc}")
        raise PlaneFormatError(f"Malformed XML: {exc}") from exc
    return plane_from_element(element)


__all__ = [
    "plane_from_element",
    "plane_from_xml",
    "plane_to_element",
    "plane_to_xml",
    "read_point",
    "read_unit_vector",
    "write_point",
    "write_unit_vector",
]
