# spatial3d/core/__init__.py
"""Core geometry value types."""
