"""
Cube state model.

A cube is an immutable stack of N layers along the z-axis (layer 0 at the
negative pole), stored as ``layers[z][y][x]``. Layers orthogonal to any axis
can be read back as N x N grids with rows along ``axis.plane[1]`` and columns
along ``axis.plane[0]``. There is no mutation API: new cube values come from
the rotation engine.
"""

from __future__ import annotations
import numbers
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from rubiks.core.base import (
    Axis, Cell, Color, CubeError, DimensionError, FACE_ORDER, InvalidMoveError,
    Pole, SOLVED_COLORS,
)

Layer = Tuple[Tuple[Cell, ...], ...]
Face = Tuple[Tuple[Color, ...], ...]
Position = Tuple[int, int, int]


def layer_position(axis: Axis, depth: int, row: int, col: int) -> Position:
    """(x, y, z) of the cell at (row, col) of the layer at `depth` along `axis`."""
    a, b = axis.plane
    coords = [0, 0, 0]
    coords[axis.value] = depth
    coords[a.value] = col
    coords[b.value] = row
    return (coords[0], coords[1], coords[2])


def is_exposed(size: int, position: Position, axis: Axis, pole: Pole) -> bool:
    """Whether the face of the cell at `position` toward `pole` is on the surface."""
    edge = size - 1 if pole is Pole.POS else 0
    return position[axis.value] == edge


@dataclass(frozen=True)
class Cube:
    """A perfect N x N x N arrangement of cells."""
    layers: Tuple[Layer, ...]

    def __post_init__(self):
        layers = tuple(tuple(tuple(row) for row in layer) for layer in self.layers)
        n = len(layers)
        if n < 1:
            raise DimensionError("A cube needs at least one layer")
        for z, layer in enumerate(layers):
            if len(layer) != n:
                raise DimensionError(f"Layer {z} has {len(layer)} rows, expected {n}")
            for y, row in enumerate(layer):
                if len(row) != n:
                    raise DimensionError(
                        f"Layer {z}, row {y} has {len(row)} cells, expected {n}"
                    )
                for cell in row:
                    if not isinstance(cell, Cell):
                        raise DimensionError(f"Expected Cell, got {type(cell).__name__}")
        object.__setattr__(self, "layers", layers)

    @staticmethod
    def solved(size: int = 3) -> "Cube":
        """The solved cube: canonical colors outside, HIDDEN inside."""
        if not isinstance(size, int) or size < 1:
            raise DimensionError(f"Cube size must be a positive integer, got {size}")
        layers = []
        for z in range(size):
            rows = []
            for y in range(size):
                rows.append(tuple(
                    Cell.from_colors(
                        SOLVED_COLORS[face] if is_exposed(size, (x, y, z), *face)
                        else Color.HIDDEN
                        for face in FACE_ORDER
                    )
                    for x in range(size)
                ))
            layers.append(tuple(rows))
        return Cube(tuple(layers))

    @property
    def size(self) -> int:
        return len(self.layers)

    def cell(self, x: int, y: int, z: int) -> Cell:
        return self.layers[z][y][x]

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        for z, layer in enumerate(self.layers):
            for y, row in enumerate(layer):
                for x, cell in enumerate(row):
                    yield (x, y, z), cell

    def check_depth(self, depth: int) -> None:
        if (not isinstance(depth, numbers.Integral) or isinstance(depth, bool)
                or not 0 <= depth < self.size):
            raise InvalidMoveError(
                f"Layer depth must be in [0, {self.size}), got {depth}"
            )

    def layer(self, axis: Axis, depth: int) -> Layer:
        """Read-only grid of the layer orthogonal to `axis` at `depth`."""
        self.check_depth(depth)
        if axis is Axis.Z:
            return self.layers[depth]
        n = self.size
        return tuple(
            tuple(self.cell(*layer_position(axis, depth, r, c)) for c in range(n))
            for r in range(n)
        )

    def face(self, axis: Axis, pole: Pole) -> Face:
        """Colors visible from one pole, in the layer's row/column layout."""
        depth = self.size - 1 if pole is Pole.POS else 0
        return tuple(
            tuple(cell.color(axis, pole) for cell in row)
            for row in self.layer(axis, depth)
        )

    def color_counts(self) -> Counter:
        counts: Counter = Counter()
        for _, cell in self.cells():
            counts.update(cell.colors)
        return counts

    def is_solved(self) -> bool:
        for axis, pole in FACE_ORDER:
            colors = {c for row in self.face(axis, pole) for c in row}
            if len(colors) != 1:
                return False
        return True

    def check_invariants(self) -> None:
        """
        Raise CubeError unless every exposed face shows a physical color and
        every unexposed face is HIDDEN.
        """
        problems: List[str] = []
        for position, cell in self.cells():
            for (axis, pole), color in zip(FACE_ORDER, cell.colors):
                exposed = is_exposed(self.size, position, axis, pole)
                if exposed and not color.is_physical:
                    problems.append(f"{position} {axis.name}{pole.value} is hidden")
                elif not exposed and color.is_physical:
                    problems.append(f"{position} {axis.name}{pole.value} shows {color.value}")
        if problems:
            raise CubeError("Cube invariants violated: " + "; ".join(problems[:5]))

