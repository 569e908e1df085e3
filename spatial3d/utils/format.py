# spatial3d/utils/format.py
"""Formatting helpers for scalar and vector outputs."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from spatial3d.config import DISPLAY_DECIMALS


def format_scalar(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Round to ``decimals`` places and drop trailing zeros.

    Args:
        value: Number to render
        decimals: Number of decimal places kept after rounding

    Returns:
        Text such as ``"1"``, ``"0.5774"`` or ``"-2.5"``; negative zero renders as ``"0"``
    """
    rounded = round(float(value), decimals) + 0.0
    return np.format_float_positional(rounded, trim="-")


def format_xml_float(value: float) -> str:
    """Shortest text that reads back to the same float."""
    return repr(float(value))


def format_triple(arr: npt.ArrayLike, decimals: int = DISPLAY_DECIMALS) -> str:
    """Format a 3-component vector as ``(x, y, z)``."""
    return "(" + ", ".join(format_scalar(v, decimals) for v in np.asarray(arr, dtype=float)) + ")"


__all__ = ["format_scalar", "format_xml_float", "format_triple"]
