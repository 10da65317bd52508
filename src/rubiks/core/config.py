"""
Configuration management for rubiks.

This module handles loading and validation of YAML configuration files and
provides typed configuration objects for the cube, the viewer and the
session runner.
"""

import math
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class CubeConfig:
    """Configuration for the cube model."""
    size: int = 3

    def __post_init__(self):
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size < 1:
            raise ValueError("size must be a positive integer")
        if self.size > 9:
            warnings.warn(
                f"size={self.size} produces {6 * self.size ** 2} squares per frame; "
                f"rendering may be slow."
            )


@dataclass
class ViewConfig:
    """Configuration for the viewer transform and projection."""
    screen_distance: float = 600.0
    camera_offset: float = 5.0
    scaling: float = 1.0
    yaw: float = 30.0     # degrees about Y
    pitch: float = -25.0  # degrees about X

    def __post_init__(self):
        if not isinstance(self.screen_distance, (float, int)) or self.screen_distance <= 0:
            raise ValueError("screen_distance must be a positive number")
        if not isinstance(self.scaling, (float, int)) or self.scaling <= 0:
            raise ValueError("scaling must be a positive number")
        if not isinstance(self.camera_offset, (float, int)):
            raise ValueError("camera_offset must be a number")
        if self.camera_offset <= self.cube_radius:
            raise ValueError(
                f"camera_offset must exceed the cube radius ({self.cube_radius:.3f}) "
                f"so the whole cube stays in front of the viewer"
            )
        if not isinstance(self.yaw, (float, int)) or not isinstance(self.pitch, (float, int)):
            raise ValueError("yaw and pitch must be numbers (degrees)")
        if self.camera_offset < 1.5 * self.cube_radius:
            warnings.warn(
                f"camera_offset={self.camera_offset} is close to the cube; "
                f"perspective distortion will be strong."
            )

    @property
    def cube_radius(self) -> float:
        """Radius of the sphere around the scaled cube."""
        return math.sqrt(3.0) * self.scaling


@dataclass
class RunnerConfig:
    """Configuration for a scramble session."""
    session_name: str = "cube_session"
    log_dir: str = "logs"
    seed: Optional[int] = None
    scramble_moves: int = 20

    def __post_init__(self):
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError("seed must be an integer or null")
        if not isinstance(self.scramble_moves, int) or self.scramble_moves < 0:
            raise ValueError("scramble_moves must be a non-negative integer")
        # log_dir is created by SessionRunner.setup()


@dataclass
class Config:
    """Main configuration object."""
    cube: CubeConfig = field(default_factory=CubeConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    runner: RunnerConfig = field(default_factory=RunnerConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        cube = CubeConfig(**(data.get("cube") or {}))
        view = ViewConfig(**(data.get("view") or {}))
        runner = RunnerConfig(**(data.get("runner") or {}))
        return cls(cube=cube, view=view, runner=runner)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            "cube": dict(self.cube.__dict__),
            "view": dict(self.view.__dict__),
            "runner": dict(self.runner.__dict__),
        }


def load_config(config_path: str) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If the file is empty or holds invalid values
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a mapping")

    try:
        return Config.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "config.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default Config object
    """
    config = Config(runner=RunnerConfig(session_name="default_session", seed=0))

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, indent=2)

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    issues = []

    if not config.runner.session_name:
        issues.append("ERROR: Session name is required")

    if config.runner.seed is None:
        issues.append("WARNING: No seed set; scrambles will not be reproducible")

    if config.runner.scramble_moves == 0:
        issues.append("WARNING: scramble_moves is 0; sessions will start solved")

    if os.path.exists(config.runner.log_dir) and not os.path.isdir(config.runner.log_dir):
        issues.append(f"ERROR: log_dir exists and is not a directory: {config.runner.log_dir}")

    if config.view.camera_offset <= config.view.cube_radius:
        issues.append("ERROR: camera_offset does not clear the cube")

    if abs(config.view.pitch) > 90:
        issues.append("WARNING: pitch beyond ±90 degrees shows the cube upside down")

    return issues
