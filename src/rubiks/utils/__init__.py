"""Utility modules for rubiks."""

from rubiks.utils.logger import SessionLogger
from rubiks.utils.display import StatusDisplay, LiveLogger

__all__ = [
    "SessionLogger",
    "StatusDisplay",
    "LiveLogger",
]
