# tests/test_config.py
"""Tests for centralized configuration module."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from spatial3d.config import (
    BASE_DIR,
    DISPLAY_DECIMALS,
    HASH_MULTIPLIER,
    LOG_LEVEL_DEFAULT,
    PARALLEL_TOLERANCE,
    RAY_PARALLEL_TOLERANCE,
    SINGLE_EPSILON,
    LoggingConfig,
    LogLevel,
    Settings,
    ToleranceConfig,
    get_settings,
)


def test_constants_are_typed() -> None:
    """Verify that constants are defined and have expected types."""
    assert isinstance(SINGLE_EPSILON, float)
    assert isinstance(PARALLEL_TOLERANCE, float)
    assert isinstance(DISPLAY_DECIMALS, int)
    assert isinstance(HASH_MULTIPLIER, int)
    assert isinstance(BASE_DIR, Path)


def test_single_epsilon_is_smallest_float32() -> None:
    """SINGLE_EPSILON is the smallest positive single-precision value."""
    assert SINGLE_EPSILON == pytest.approx(1.401298464324817e-45, rel=1e-6)
    assert SINGLE_EPSILON > 0.0
    assert np.float32(SINGLE_EPSILON) / np.float32(2.0) == np.float32(0.0)


def test_tolerances_match_constants() -> None:
    """ToleranceConfig mirrors the hard-coded constants."""
    tol = ToleranceConfig()
    assert tol.parallel == PARALLEL_TOLERANCE == 1e-15
    assert tol.ray_parallel == RAY_PARALLEL_TOLERANCE == 1e-15
    assert tol.single_epsilon == SINGLE_EPSILON


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without environment overrides logging goes to the console only."""
    monkeypatch.delenv("SPATIAL3D_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SPATIAL3D_LOG_DIR", raising=False)

    settings = get_settings()

    assert isinstance(settings, Settings)
    assert settings.logging == LoggingConfig(level=LogLevel.WARNING, log_dir=None)
    assert settings.display_decimals == DISPLAY_DECIMALS


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables override logging level and directory."""
    monkeypatch.setenv("SPATIAL3D_LOG_LEVEL", "debug")
    monkeypatch.setenv("SPATIAL3D_LOG_DIR", str(tmp_path))

    settings = get_settings()

    assert settings.logging.level is LogLevel.DEBUG
    assert settings.logging.log_dir == tmp_path


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown level names fall back to the default with a warning."""
    from loguru import logger

    monkeypatch.setenv("SPATIAL3D_LOG_LEVEL", "LOUD")
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}", level="WARNING")
    try:
        settings = get_settings()
    finally:
        logger.remove(handler_id)

    assert settings.logging.level is LogLevel(LOG_LEVEL_DEFAULT)
    assert any("SPATIAL3D_LOG_LEVEL" in m and "LOUD" in m for m in messages)


def test_import_with_invalid_log_level() -> None:
    """A bad environment value does not break importing the package."""
    env = {**os.environ, "SPATIAL3D_LOG_LEVEL": "LOUD"}
    result = subprocess.run(
        [sys.executable, "-c", "import spatial3d; print(spatial3d.Plane.__name__)"],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert result.stdout.strip() == "Plane"


def test_settings_are_frozen() -> None:
    """Settings cannot be mutated."""
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.display_decimals = 2  # type: ignore[misc]
