# spatial3d/utils/__init__.py
"""Utility package re-exporting shared helpers for spatial3d."""

from spatial3d.utils.format import format_scalar, format_triple, format_xml_float
from spatial3d.utils.logger import configure, get_logger, logging_context

__all__ = [
    "configure",
    "format_scalar",
    "format_triple",
    "format_xml_float",
    "get_logger",
    "logging_context",
]
