import os
import json
from datetime import datetime
from typing import Any, Dict, List

from rubiks.core.base import Move


class SessionLogger:
    def __init__(self, log_dir: str, session_name: str):
        """
        Initializes the logger for a cube session.

        Args:
            log_dir (str): The base directory for logs.
            session_name (str): A name for the session; a timestamp is appended.
        """
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_name = f"{session_name}_{self.timestamp}"
        self.run_dir = os.path.join(log_dir, self.session_name)
        self.logs: List[Dict[str, Any]] = []

        os.makedirs(self.run_dir, exist_ok=True)

    def log_step(self, step: int, data: Dict[str, Any]):
        """Record one step; a Move under "move" is stored as a dict."""
        log_entry = {"step": step, "timestamp": datetime.now().isoformat(), **data}
        if isinstance(log_entry.get("move"), Move):
            log_entry["move"] = log_entry["move"].to_dict()
        self.logs.append(log_entry)

    def save_logs(self) -> str:
        """Saves all collected logs to a JSON file and writes a summary."""
        log_file = os.path.join(self.run_dir, "session_log.json")
        with open(log_file, "w") as f:
            json.dump(self.logs, f, indent=2, default=str)

        summary_file = os.path.join(self.run_dir, "summary.txt")
        self._create_summary_file(summary_file)
        return log_file

    def _create_summary_file(self, summary_file: str):
        """Create a human-readable summary file."""
        moves = [log for log in self.logs if log.get("step_type") == "move"]
        errors = [log for log in self.logs if log.get("step_type") == "error"]

        with open(summary_file, "w") as f:
            f.write(f"Session Summary: {self.session_name}\n")
            f.write("=" * 60 + "\n")
            f.write(f"Moves Played: {len(moves)}\n")
            f.write(f"Errors Occurred: {len(errors)}\n")
            f.write("\nStep-by-step breakdown:\n")
            f.write("-" * 30 + "\n")

            for log in self.logs:
                step = log.get("step", "?")
                step_type = log.get("step_type", "unknown")
                if step_type == "initial":
                    f.write(f"Step {step}: Solved cube\n")
                elif step_type == "move":
                    f.write(f"Step {step}: {log.get('notation', '?')}\n")
                elif step_type == "error":
                    f.write(f"Step {step}: ERROR - {log.get('error', 'Unknown')}\n")
