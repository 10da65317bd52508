"""
Session runner for rubiks.

This module is the thin driver around the pure cube core: it builds a game
from the configuration, scrambles it with the seeded generator one move at a
time, records every step and reports the final state.
"""

import os
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from rubiks.core.base import CubeError, FACE_ORDER, Move
from rubiks.core.config import Config
from rubiks.game import Game, drawables, new_game, play
from rubiks.model.moves import format_move, simplify
from rubiks.model.sampling import random_move
from rubiks.utils.display import LiveLogger, StatusDisplay
from rubiks.utils.logger import SessionLogger


@dataclass
class SessionResult:
    """Outcome of a scramble session."""
    session_name: str
    moves: List[Move]
    execution_time: float
    solved: bool
    visible_squares: int
    log_file: Optional[str] = None
    error_message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_name": self.session_name,
            "moves": [format_move(m) for m in self.moves],
            "execution_time": self.execution_time,
            "solved": self.solved,
            "visible_squares": self.visible_squares,
            "log_file": self.log_file,
            "error_message": self.error_message,
            "metadata": self.metadata,
        }


class SessionRunner:
    """Runs a seeded scramble session and logs it."""

    def __init__(self, config: Config, verbose: bool = True):
        self.config = config
        self.logger: Optional[SessionLogger] = None
        self.game: Optional[Game] = None
        self.live_logger = LiveLogger(verbose=verbose)
        self.start_time = None

    def setup(self) -> None:
        """Create the log directory, the session logger and the solved game."""
        os.makedirs(self.config.runner.log_dir, exist_ok=True)
        self.logger = SessionLogger(
            log_dir=self.config.runner.log_dir,
            session_name=self.config.runner.session_name,
        )
        self.game = new_game(self.config)
        self.live_logger.log_info(f"Session ready: {self.config.cube.size}x"
                                  f"{self.config.cube.size}x{self.config.cube.size} cube")

    def _validate_components(self) -> None:
        if self.game is None or self.logger is None:
            raise RuntimeError("SessionRunner.setup() must be called before running")

    def run(self, num_moves: Optional[int] = None) -> SessionResult:
        """Scramble the cube with `num_moves` random moves (default from config)."""
        self._validate_components()
        count = self.config.runner.scramble_moves if num_moves is None else num_moves
        StatusDisplay.print_header(f"Scramble Session: {self.logger.session_name}")

        self.start_time = time.time()
        self.logger.log_step(0, {"step_type": "initial", "size": self.game.cube.size})

        try:
            for step in range(1, count + 1):
                move, rng = random_move(self.game.cube.size, self.game.rng)
                self.live_logger.log_move_start(step, format_move(move))
                self.game = replace(play(self.game, move), rng=rng)
                self.logger.log_step(step, {
                    "step_type": "move",
                    "move": move,
                    "notation": format_move(move),
                })
                self.game.cube.check_invariants()
                self.live_logger.log_move_end(step)
        except CubeError as e:
            return self._handle_failure(e)

        return self._create_result()

    def _create_result(self) -> SessionResult:
        execution_time = time.time() - self.start_time
        visible = [d for d in drawables(self.game) if d.facing]
        moves = list(self.game.moves)

        self.live_logger.log_action("Saving session logs")
        log_file = self.logger.save_logs()
        self.live_logger.log_result("Logs saved successfully")

        result = SessionResult(
            session_name=self.logger.session_name,
            moves=moves,
            execution_time=execution_time,
            solved=self.game.cube.is_solved(),
            visible_squares=len(visible),
            log_file=log_file,
            metadata={
                "size": self.game.cube.size,
                "seed": self.config.runner.seed,
                "simplified_length": len(simplify(moves)),
            },
        )
        StatusDisplay.print_results({
            "Moves": len(moves),
            "Simplified Length": result.metadata["simplified_length"],
            "Solved": result.solved,
            "Visible Squares": result.visible_squares,
            "Execution Time": f"{execution_time:.3f}s",
        }, "Session Summary")
        return result

    def _handle_failure(self, error: Exception) -> SessionResult:
        execution_time = time.time() - self.start_time if self.start_time else 0
        self.live_logger.log_error(f"Session failed: {error}")
        self.logger.log_step(len(self.game.moves) + 1, {
            "step_type": "error",
            "error": str(error),
        })
        log_file = self._save_error_logs()
        return SessionResult(
            session_name=self.logger.session_name,
            moves=list(self.game.moves),
            execution_time=execution_time,
            solved=False,
            visible_squares=0,
            log_file=log_file,
            error_message=str(error),
        )

    def _save_error_logs(self) -> Optional[str]:
        """Attempt to save error logs."""
        try:
            return self.logger.save_logs()
        except OSError as e:
            self.live_logger.log_error(f"Could not save error logs: {e}")
            return None

    def faces(self) -> Dict[str, Any]:
        """Current face grids keyed like 'X+'."""
        self._validate_components()
        return {
            f"{axis.name}{pole.value}": self.game.cube.face(axis, pole)
            for axis, pole in FACE_ORDER
        }
