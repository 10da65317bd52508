"""
Core modules for rubiks.

This package contains the fundamental components:
- Value types for colors, axes, moves, loci and cells
- Error types for contract violations
- Configuration management
"""

from rubiks.core.base import (
    Axis,
    Cell,
    Color,
    CubeError,
    DimensionError,
    FACE_ORDER,
    InvalidMoveError,
    Locus,
    Move,
    Pole,
    ProjectionError,
    Rotation,
    SOLVED_COLORS,
)

from rubiks.core.config import Config, CubeConfig, ViewConfig, RunnerConfig, load_config, create_default_config, validate_config

__all__ = [
    "Axis",
    "Cell",
    "Color",
    "CubeError",
    "DimensionError",
    "FACE_ORDER",
    "InvalidMoveError",
    "Locus",
    "Move",
    "Pole",
    "ProjectionError",
    "Rotation",
    "SOLVED_COLORS",
    "Config",
    "CubeConfig",
    "ViewConfig",
    "RunnerConfig",
    "load_config",
    "create_default_config",
    "validate_config",
]
