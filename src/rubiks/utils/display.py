"""
Console output for rubiks sessions: headers, key/value tables, face grids
and timestamped status lines for each move.
"""

import time
from datetime import datetime
from typing import Any, Dict, Sequence

from rubiks.core.base import Color

# One-letter codes for printing face grids.
COLOR_CODES = {
    Color.RED: "R",
    Color.WHITE: "W",
    Color.YELLOW: "Y",
    Color.GREEN: "G",
    Color.BLUE: "B",
    Color.ORANGE: "O",
    Color.HIDDEN: ".",
}

_ICONS = {
    "info": "ℹ️",
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
    "turn": "🔄",
}


class StatusDisplay:
    """Static helpers that print session state."""

    @staticmethod
    def print_header(title: str, width: int = 80):
        print("\n" + "=" * width)
        print(f"{title:^{width}}")
        print("=" * width)

    @staticmethod
    def print_section(title: str, width: int = 60):
        print(f"\n🧊 {title}")
        print("-" * width)

    @staticmethod
    def print_config(settings: Dict[str, Any], title: str = "Configuration"):
        StatusDisplay.print_section(title)
        for key, value in settings.items():
            print(f"  {key:<20} : {value}")

    @staticmethod
    def print_status(message: str, kind: str = "info"):
        """One timestamped line prefixed with the icon for `kind`."""
        stamp = datetime.now().strftime("%H:%M:%S")
        print(f"{_ICONS.get(kind, _ICONS['info'])} [{stamp}] {message}")

    @staticmethod
    def print_results(results: Dict[str, Any], title: str = "Results"):
        """Key/value table; booleans get a check or a cross."""
        StatusDisplay.print_section(title)
        for key, value in results.items():
            if isinstance(value, bool):
                value = f"{'✅' if value else '❌'} {value}"
            elif isinstance(value, float):
                value = f"{value:.3f}"
            print(f"  {key:<20} : {value}")

    @staticmethod
    def format_face(face: Sequence[Sequence[Color]]) -> str:
        """Face grid as rows of color letters, top row first."""
        return "\n".join(" ".join(COLOR_CODES[c] for c in row) for row in reversed(face))

    @staticmethod
    def print_face(name: str, face: Sequence[Sequence[Color]]):
        print(f"  {name}:")
        for line in StatusDisplay.format_face(face).splitlines():
            print(f"    {line}")


class LiveLogger:
    """Status lines while a session runs; quiet mode keeps only errors."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.move_started = {}

    def log_move_start(self, step: int, notation: str):
        if self.verbose:
            StatusDisplay.print_status(f"Move {step}: {notation}", "turn")
        self.move_started[step] = time.time()

    def log_move_end(self, step: int, cube_ok: bool = True):
        if self.verbose:
            elapsed = time.time() - self.move_started.get(step, time.time())
            verdict = "cube consistent" if cube_ok else "cube inconsistent"
            StatusDisplay.print_status(f"Move {step} done, {verdict} ({elapsed:.3f}s)",
                                       "success" if cube_ok else "error")

    def log_action(self, action: str):
        if self.verbose:
            StatusDisplay.print_status(action, "info")

    def log_result(self, message: str, success: bool = True):
        if self.verbose:
            StatusDisplay.print_status(message, "success" if success else "error")

    def log_info(self, message: str):
        if self.verbose:
            StatusDisplay.print_status(message, "info")

    def log_warning(self, message: str):
        if self.verbose:
            StatusDisplay.print_status(message, "warning")

    def log_error(self, message: str):
        StatusDisplay.print_status(message, "error")
