"""Centralized configuration for the spatial3d geometry toolkit.

All constants, settings, and configuration dataclasses are defined here.
Modules should import from this single source of truth.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Optional

import numpy as np
from loguru import logger as _logger

# ============================================================================
# PROJECT PATHS
# ============================================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent


def _env_path(key: str, default: Optional[Path]) -> Optional[Path]:
    """Resolve path from environment variable with fallback."""
    value = os.getenv(key)
    return Path(value).expanduser() if value else default


def _env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(key)
    return value if value is not None else default


# ============================================================================
# GEOMETRIC TOLERANCES
# ============================================================================

# Smallest positive single-precision value (denormal), 1.4e-45.
SINGLE_EPSILON: Final[float] = float(np.nextafter(np.float32(0.0), np.float32(1.0)))

PARALLEL_TOLERANCE: Final[float] = 1e-15
RAY_PARALLEL_TOLERANCE: Final[float] = 1e-15
DIRECTION_TOLERANCE: Final[float] = 1e-10
UNIT_LENGTH_TOLERANCE: Final[float] = 1e-6

# ============================================================================
# FORMATTING & HASHING CONSTANTS
# ============================================================================

DISPLAY_DECIMALS: Final[int] = 4
HASH_MULTIPLIER: Final[int] = 397
HASH_BITS: Final[int] = 32

# ============================================================================
# SERIALIZATION CONSTANTS
# ============================================================================

XML_PLANE_ELEMENT: Final[str] = "Plane"
XML_ROOT_POINT_ELEMENT: Final[str] = "RootPoint"
XML_NORMAL_ELEMENT: Final[str] = "Normal"

# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

LOG_LEVEL_DEFAULT: Final[str] = "WARNING"
LOG_FILE_PREFIX: Final[str] = "spatial3d"

# ============================================================================
# ENUMS
# ============================================================================


class LogLevel(str, Enum):
    """Logging levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ============================================================================
# DATACLASSES - Configuration Sections
# ============================================================================


@dataclass(frozen=True)
class LoggingConfig:
    """Logger sinks configuration.

    Attributes:
        level: Minimum level passed to every sink
        log_dir: Directory for the timestamped file sink, ``None`` disables it
    """

    level: LogLevel = LogLevel(LOG_LEVEL_DEFAULT)
    log_dir: Optional[Path] = None


@dataclass(frozen=True)
class ToleranceConfig:
    """Read-only view of the hard-coded geometric tolerances."""

    single_epsilon: float = SINGLE_EPSILON
    parallel: float = PARALLEL_TOLERANCE
    ray_parallel: float = RAY_PARALLEL_TOLERANCE
    direction: float = DIRECTION_TOLERANCE
    unit_length: float = UNIT_LENGTH_TOLERANCE


# ============================================================================
# MAIN CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class Settings:
    """Main package configuration.

    Instances are immutable (frozen=True) to prevent accidental mutation.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tolerances: ToleranceConfig = field(default_factory=ToleranceConfig)
    display_decimals: int = DISPLAY_DECIMALS


def get_settings() -> Settings:
    """Factory function to create Settings with environment variable overrides.

    Environment variables:
        SPATIAL3D_LOG_LEVEL: Logging level
        SPATIAL3D_LOG_DIR: Directory for log files (unset disables file logging)
    """
    level_name = _env_str("SPATIAL3D_LOG_LEVEL", LOG_LEVEL_DEFAULT).upper()
    try:
        level = LogLevel(level_name)
    except ValueError:
        _logger.warning(
            f"Invalid SPATIAL3D_LOG_LEVEL: {level_name}, expected one of "
            f"{[lvl.value for lvl in LogLevel]}; using {LOG_LEVEL_DEFAULT}"
        )
        level = LogLevel(LOG_LEVEL_DEFAULT)

    logging = LoggingConfig(
        level=level,
        log_dir=_env_path("SPATIAL3D_LOG_DIR", None),
    )

    return Settings(logging=logging, tolerances=ToleranceConfig())


# ============================================================================
# MODULE EXPORTS
# ============================================================================

__all__ = [
    # Factory
    "get_settings",
    # Main config
    "Settings",
    # Config sections
    "LoggingConfig",
    "ToleranceConfig",
    # Enums
    "LogLevel",
    # Paths
    "BASE_DIR",
    # Tolerances
    "SINGLE_EPSILON",
    "PARALLEL_TOLERANCE",
    "RAY_PARALLEL_TOLERANCE",
    "DIRECTION_TOLERANCE",
    "UNIT_LENGTH_TOLERANCE",
    # Formatting & hashing
    "DISPLAY_DECIMALS",
    "HASH_MULTIPLIER",
    "HASH_BITS",
    # Serialization
    "XML_PLANE_ELEMENT",
    "XML_ROOT_POINT_ELEMENT",
    "XML_NORMAL_ELEMENT",
    # Logging
    "LOG_LEVEL_DEFAULT",
    "LOG_FILE_PREFIX",
]
