# spatial3d/io/__init__.py
"""Text and XML readers/writers."""

from __future__ import annotations

from spatial3d.io.parser import parse_plane, parse_point, parse_vector
from spatial3d.io.xml import plane_from_xml, plane_to_xml

__all__ = [
    "parse_plane",
    "parse_point",
    "parse_vector",
    "plane_from_xml",
    "plane_to_xml",
]
