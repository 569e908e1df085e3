# spatial3d/io/parser.py
"""Text grammar for points, vectors and planes.

Accepted plane forms (whitespace-insensitive)::

    A:0 B:0 C:1 D:-5              coefficients, as printed by str(plane)
    p:{0, 0, 5} v:{0, 0, 1}       root point and normal
    0, 0, 1, -5                   bare coefficients

Triples may be wrapped in ``{}``, ``()`` or ``[]`` and separated by ``,`` or ``;``.
"""

from __future__ import annotations

import re

from spatial3d.core.geometry.plane import Plane
from spatial3d.core.geometry.points import Point3D
from spatial3d.core.geometry.vectors import UnitVector3D, Vector3D
from spatial3d.errors import DegenerateVectorError, PlaneFormatError
from spatial3d.utils.logger import get_logger

LOG = get_logger(__name__)

_NUM = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_SEP = r"\s*[,;]\s*"


def _bracketed(name: str, body: str) -> str:
    """Wrap ``body`` in an optional ``{}``, ``()`` or ``[]`` pair that must match."""
    return (
        rf"(?:(?P<{name}brace>\{{)|(?P<{name}paren>\()|(?P<{name}square>\[))?\s*"
        rf"{body}"
        rf"\s*(?({name}brace)\}}|(?({name}paren)\)|(?({name}square)\]|)))"
    )


def _triple(name: str) -> str:
    return _bracketed(
        name, rf"(?P<{name}x>{_NUM}){_SEP}(?P<{name}y>{_NUM}){_SEP}(?P<{name}z>{_NUM})"
    )


_TRIPLE_RE = re.compile(rf"^\s*{_triple('t')}\s*$")
_COEFFICIENTS_RE = re.compile(
    rf"^\s*A\s*:\s*(?P<a>{_NUM})\s*[,;]?\s*B\s*:\s*(?P<b>{_NUM})\s*[,;]?\s*"
    rf"C\s*:\s*(?P<c>{_NUM})\s*[,;]?\s*D\s*:\s*(?P<d>{_NUM})\s*$",
    re.IGNORECASE,
)
_POINT_NORMAL_RE = re.compile(
    rf"^\s*p\s*:\s*{_triple('p')}\s*[,;]?\s*v\s*:\s*{_triple('v')}\s*$",
    re.IGNORECASE,
)
_BARE_RE = re.compile(
    r"^\s*"
    + _bracketed(
        "w",
        rf"(?P<a>{_NUM})(?:{_SEP}|\s+)(?P<b>{_NUM})(?:{_SEP}|\s+)"
        rf"(?P<c>{_NUM})(?:{_SEP}|\s+)(?P<d>{_NUM})",
    )
    + r"\s*$"
)


def _xyz(match: re.Match[str], prefix: str) -> tuple[float, float, float]:
    return (
        float(match.group(f"{prefix}x")),
        float(match.group(f"{prefix}y")),
        float(match.group(f"{prefix}z")),
    )


def _parse_triple(text: str, what: str) -> tuple[float, float, float]:
    match = _TRIPLE_RE.match(text)
    if match is None:
        LOG.debug(f"cannot read {what} from {text!r}")
        raise PlaneFormatError(f"Could not parse a {what} from {text!r}")
    return _xyz(match, "t")


def parse_point(text: str) -> Point3D:
    """Read ``x, y, z`` (optionally bracketed) as a point."""
    return Point3D(*_parse_triple(text, "point"))


def parse_vector(text: str) -> Vector3D:
    """Read ``x, y, z`` (optionally bracketed) as a free vector."""
    return Vector3D(*_parse_triple(text, "vector"))


def parse_plane(text: str) -> Plane:
    """Read a plane from any of the forms in the module docstring.

    Raises:
        PlaneFormatError: if the text matches no form or the normal is zero
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    try:
        match = _COEFFICIENTS_RE.match(text) or _BARE_RE.match(text)
        if match is not None:
            return Plane.from_coefficients(
                float(match.group("a")),
                float(match.group("b")),
                float(match.group("c")),
                float(match.group("d")),
            )

        match = _POINT_NORMAL_RE.match(text)
        if match is not None:
            root_point = Point3D(*_xyz(match, "p"))
            normal = UnitVector3D.create(*_xyz(match, "v"))
            return Plane.from_point_and_normal(root_point, normal)
    except DegenerateVectorError as exc:
        LOG.debug(f"zero normal in {text!r}")
        raise PlaneFormatError(f"Plane normal in {text!r} has zero length") from exc

    LOG.debug(f"no plane grammar matches {text!r}")
    raise PlaneFormatError(f"Could not parse a plane from {text!r}")


__all__ = ["parse_plane", "parse_point", "parse_vector"]
