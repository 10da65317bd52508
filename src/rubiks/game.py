"""
Game state bundle.

A `Game` is an immutable value holding everything a driving loop needs
between ticks: the cube, the viewer orientation, projection parameters, the
moves played so far, the random generator state and the interaction mode.
Every function here returns a new `Game`; nothing is mutated in place.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple, Union

from rubiks.core.base import Axis, Cell, Locus, Move, Pole
from rubiks.core.config import Config
from rubiks.model.cube import Cube, layer_position
from rubiks.model.rotation import rotate
from rubiks.model.sampling import RandomSource, random_moves
from rubiks.view.algebra import Matrix, compose, rotation_matrix
from rubiks.view.projection import Drawable, cube_to_squares, position_cube, render_order

# Radians of view rotation per unit of drag.
DRAG_SENSITIVITY = 0.01


@dataclass(frozen=True)
class RotationDrag:
    """The whole cube is being turned; `last` is the previous pointer position."""
    last: Tuple[float, float]


@dataclass(frozen=True)
class ScaleDrag:
    """The cube is being resized from `scale` since the pointer went down at `start`."""
    scale: float
    start: Tuple[float, float]


@dataclass(frozen=True)
class CellSelected:
    """A sticker is selected and its layers can be manipulated."""
    locus: Locus


@dataclass(frozen=True)
class Idle:
    pass


Mode = Union[RotationDrag, ScaleDrag, CellSelected, Idle]


@dataclass(frozen=True)
class Game:
    cube: Cube
    rotation: Matrix
    screen_distance: float
    camera_offset: float
    rng: RandomSource
    scaling: float = 1.0
    moves: Tuple[Move, ...] = ()
    mode: Mode = field(default_factory=Idle)


def view_matrix(yaw: float, pitch: float) -> Matrix:
    """Orientation for a yaw about Y followed by a pitch about X, in degrees."""
    return compose(rotation_matrix(Axis.X, math.radians(pitch)),
                   rotation_matrix(Axis.Y, math.radians(yaw)))


def new_game(config: Optional[Config] = None) -> Game:
    """A solved cube in the configured starting view."""
    config = config or Config()
    return Game(
        cube=Cube.solved(config.cube.size),
        rotation=view_matrix(config.view.yaw, config.view.pitch),
        screen_distance=float(config.view.screen_distance),
        camera_offset=float(config.view.camera_offset),
        rng=RandomSource.from_seed(config.runner.seed),
        scaling=float(config.view.scaling),
    )


def play(game: Game, move: Move) -> Game:
    """Turn one layer and record the move."""
    return replace(game, cube=rotate(game.cube, move), moves=game.moves + (move,))


def play_all(game: Game, moves: List[Move]) -> Game:
    for move in moves:
        game = play(game, move)
    return game


def scramble(game: Game, count: int) -> Tuple[Game, List[Move]]:
    """Play `count` random moves drawn from the game's generator."""
    moves, rng = random_moves(game.cube.size, count, game.rng)
    return replace(play_all(game, moves), rng=rng), moves


def turn_view(game: Game, dx: float, dy: float) -> Game:
    """Turn the whole cube by a pointer drag of (dx, dy)."""
    turn = compose(rotation_matrix(Axis.X, -dy * DRAG_SENSITIVITY),
                   rotation_matrix(Axis.Y, -dx * DRAG_SENSITIVITY))
    return replace(game, rotation=compose(turn, game.rotation))


def rescale(game: Game, factor: float) -> Game:
    """
    Multiply the cube size by `factor`.

    The result is capped so the cube never reaches the camera.
    """
    if factor <= 0:
        raise ValueError(f"factor must be positive, got {factor}")
    limit = 0.99 * game.camera_offset / math.sqrt(3.0)
    return replace(game, scaling=min(game.scaling * factor, limit))


def select(game: Game, locus: Locus) -> Game:
    return replace(game, mode=CellSelected(locus))


def release(game: Game) -> Game:
    return replace(game, mode=Idle())


def cell_at(cube: Cube, locus: Locus) -> Cell:
    """The cell carrying the sticker addressed by `locus`."""
    depth = cube.size - 1 if locus.pole is Pole.POS else 0
    row, col = locus.coord
    if not (0 <= row < cube.size and 0 <= col < cube.size):
        raise ValueError(f"Locus {locus.coord} is outside a cube of size {cube.size}")
    return cube.cell(*layer_position(locus.axis, depth, row, col))


def selected_cell(game: Game) -> Optional[Cell]:
    if isinstance(game.mode, CellSelected):
        return cell_at(game.cube, game.mode.locus)
    return None


def drawables(game: Game) -> List[Drawable]:
    """
    Everything a renderer needs for this tick, farthest first.

    While a sticker is selected its drawable is flagged for highlighting.
    """
    transform = position_cube(game.rotation, game.camera_offset, game.scaling)
    frame = render_order(game.screen_distance, cube_to_squares(transform, game.cube))
    if not isinstance(game.mode, CellSelected):
        return frame
    return [replace(d, selected=True) if d.locus == game.mode.locus else d for d in frame]
