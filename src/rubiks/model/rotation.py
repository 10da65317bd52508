"""
Layer rotation engine.

A quarter turn of one layer is split into two independent steps:

1. the N x N grid of cells in the layer is rotated as a 2D matrix
   (cell repositioning), and
2. every cell in the layer has its four faces orthogonal to the turning axis
   cyclically relabelled (cell re-orientation).

Positive turns carry axis a onto axis b, where (a, b) = axis.plane. With the
layer grid laid out as rows along b and columns along a this is the
clockwise grid rotation.
"""

from functools import reduce
from typing import Dict, Iterable, Tuple

from rubiks.core.base import Axis, Cell, FACE_INDEX, Move, Pole, Rotation
from rubiks.model.cube import Cube, Layer, Position, layer_position


def _face_cycle(axis: Axis) -> Tuple[Tuple[Axis, Pole], ...]:
    """Faces around an axis in the order a positive turn moves colors: +a, +b, -a, -b."""
    a, b = axis.plane
    return ((a, Pole.POS), (b, Pole.POS), (a, Pole.NEG), (b, Pole.NEG))


def _face_permutation(axis: Axis, rotation: Rotation) -> Tuple[int, ...]:
    """For each face slot of the turned cell, the slot of the old cell it comes from."""
    source = list(range(6))
    cycle = _face_cycle(axis)
    step = 1 if rotation is Rotation.POS90 else -1
    for i, face in enumerate(cycle):
        destination = cycle[(i + step) % 4]
        source[FACE_INDEX[destination]] = FACE_INDEX[face]
    return tuple(source)


# Precomputed face permutations for all six quarter turns
FACE_PERMUTATIONS: Dict[Tuple[Axis, Rotation], Tuple[int, ...]] = {
    (axis, rotation): _face_permutation(axis, rotation)
    for axis in Axis
    for rotation in Rotation
}


def reorient(cell: Cell, axis: Axis, rotation: Rotation) -> Cell:
    """Relabel a cell's faces for a quarter turn about `axis`."""
    colors = cell.colors
    return Cell.from_colors(colors[i] for i in FACE_PERMUTATIONS[(axis, rotation)])


def rotate_grid(grid: Layer, rotation: Rotation) -> Layer:
    """
    Rotate a square grid by 90 degrees.

    POS90 is clockwise (transpose, then reverse each row); NEG90 is
    counter-clockwise (transpose, then reverse the row order).
    """
    if rotation is Rotation.POS90:
        return tuple(tuple(reversed(column)) for column in zip(*grid))
    return tuple(tuple(row) for row in zip(*grid))[::-1]


def turn_layer(grid: Layer, axis: Axis, rotation: Rotation) -> Layer:
    """Reposition and re-orient all cells of one layer grid."""
    return tuple(
        tuple(reorient(cell, axis, rotation) for cell in row)
        for row in rotate_grid(grid, rotation)
    )


def rotate(cube: Cube, move: Move) -> Cube:
    """
    Return a new cube with the layer addressed by `move` turned a quarter.

    Raises InvalidMoveError if the depth is outside [0, N).
    """
    cube.check_depth(move.depth)
    turned = turn_layer(cube.layer(move.axis, move.depth), move.axis, move.rotation)

    if move.axis is Axis.Z:
        layers = list(cube.layers)
        layers[move.depth] = turned
        return Cube(tuple(layers))

    replaced: Dict[Position, Cell] = {}
    for r, row in enumerate(turned):
        for c, cell in enumerate(row):
            replaced[layer_position(move.axis, move.depth, r, c)] = cell

    n = cube.size
    return Cube(tuple(
        tuple(
            tuple(replaced.get((x, y, z), cube.layers[z][y][x]) for x in range(n))
            for y in range(n)
        )
        for z in range(n)
    ))


def rotate_all(cube: Cube, moves: Iterable[Move]) -> Cube:
    """Apply a sequence of moves in order."""
    return reduce(rotate, moves, cube)
