"""
Spatial projection pipeline.

Cube faces are turned into squares (one per exposed sticker) positioned in
model space, where the cube occupies [-1, 1]^3. A transform (usually: scale,
rotate by the viewer orientation, push back from the camera) maps them into
view space, where the viewer sits at the origin looking along +z and the
screen is the plane z = screen_distance. Squares are then perspective
projected and painted farthest first.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Sequence, Tuple

from rubiks.core.base import Axis, Color, Locus, Pole, ProjectionError
from rubiks.model.cube import Cube
from rubiks.view.algebra import Matrix, Path, Vec3, apply_path, scale, translate

Transform = Callable[[Path], Path]
Point2D = Tuple[float, float]


@dataclass(frozen=True)
class Square:
    """Renderable sticker: front/back colors and its polygon in 3D."""
    locus: Locus
    front: Color
    back: Color
    points: Path


@dataclass(frozen=True)
class Drawable:
    """A projected square ready for painting."""
    depth: float
    polygon: Tuple[Point2D, ...]
    front: Color
    back: Color
    locus: Locus
    facing: bool
    selected: bool = False

    @property
    def color(self) -> Color:
        """Color the viewer sees."""
        return self.front if self.facing else self.back

    def to_dict(self) -> dict:
        return {
            "depth": self.depth,
            "polygon": [list(p) for p in self.polygon],
            "front": self.front.value,
            "back": self.back.value,
            "locus": self.locus.to_dict(),
            "facing": self.facing,
            "selected": self.selected,
        }


def _bounds(index: int, size: int) -> Tuple[float, float]:
    step = 2.0 / size
    return (-1.0 + index * step, -1.0 + (index + 1) * step)


def _point(axis: Axis, level: float, a: float, b: float) -> Vec3:
    a_axis, b_axis = axis.plane
    coords = [0.0, 0.0, 0.0]
    coords[axis.value] = level
    coords[a_axis.value] = a
    coords[b_axis.value] = b
    return (coords[0], coords[1], coords[2])


def square_corners(size: int, axis: Axis, pole: Pole, row: int, col: int) -> Path:
    """
    Corners of one sticker in model space.

    The corners wind counter-clockwise about the outward normal (right-hand
    rule), so after any proper rotation a square facing the viewer projects
    clockwise on the screen of the left-handed frame.
    """
    level = 1.0 if pole is Pole.POS else -1.0
    a0, a1 = _bounds(col, size)
    b0, b1 = _bounds(row, size)
    corners = [(a0, b0), (a1, b0), (a1, b1), (a0, b1)]
    if pole is Pole.NEG:
        corners = [corners[0]] + corners[:0:-1]
    return tuple(_point(axis, level, a, b) for a, b in corners)


def cube_to_squares(transform: Transform, cube: Cube) -> List[Square]:
    """One transformed square per exposed sticker of the cube."""
    n = cube.size
    squares = []
    for axis in Axis:
        for pole in (Pole.POS, Pole.NEG):
            depth = n - 1 if pole is Pole.POS else 0
            for r, row in enumerate(cube.layer(axis, depth)):
                for c, cell in enumerate(row):
                    squares.append(Square(
                        locus=Locus(axis, pole, (r, c)),
                        front=cell.color(axis, pole),
                        back=cell.color(axis, pole.opposite),
                        points=transform(square_corners(n, axis, pole, r, c)),
                    ))
    return squares


def position_cube(rotation: Matrix, offset: float, scaling: float = 1.0) -> Transform:
    """
    Scale, rotate by the viewer orientation, then push the cube `offset`
    units away from the camera along +z.

    The offset must clear the cube's circumscribed sphere so every point
    stays in front of the viewer.
    """
    if scaling <= 0:
        raise ProjectionError(f"scaling must be positive, got {scaling}")
    radius = math.sqrt(3.0) * scaling
    if offset <= radius:
        raise ProjectionError(
            f"Camera offset {offset} does not clear the cube (radius {radius:.3f})"
        )
    shift = (0.0, 0.0, float(offset))

    def transform(path: Path) -> Path:
        scaled = [scale(scaling, p) for p in path]
        return translate(shift, apply_path(rotation, scaled))

    return transform


def project(screen_distance: float, square: Square) -> Square:
    """Perspective divide of every point: (x, y, z) -> (xd/z, yd/z, z)."""
    if screen_distance <= 0:
        raise ProjectionError(f"screen_distance must be positive, got {screen_distance}")
    points = []
    for x, y, z in square.points:
        if z <= 0:
            raise ProjectionError(f"Point ({x}, {y}, {z}) is not in front of the viewer")
        points.append((x * screen_distance / z, y * screen_distance / z, z))
    return replace(square, points=tuple(points))


def signed_area(polygon: Sequence[Sequence[float]]) -> float:
    """Shoelace area; positive when counter-clockwise with x right and y up."""
    total = 0.0
    for i, p in enumerate(polygon):
        q = polygon[(i + 1) % len(polygon)]
        total += p[0] * q[1] - q[0] * p[1]
    return total / 2.0


def is_facing_viewer(screen_distance: float, square: Square) -> bool:
    """Whether the front of the square is turned toward the viewer."""
    return signed_area(project(screen_distance, square).points) < 0


def depth(square: Square) -> float:
    """Depth cue: the nearest z of the square."""
    return min(p[2] for p in square.points)


def to_drawable(screen_distance: float, square: Square) -> Drawable:
    projected = project(screen_distance, square)
    return Drawable(
        depth=depth(square),
        polygon=tuple((p[0], p[1]) for p in projected.points),
        front=square.front,
        back=square.back,
        locus=square.locus,
        facing=signed_area(projected.points) < 0,
    )


def render_order(screen_distance: float, squares: Iterable[Square]) -> List[Drawable]:
    """Drawables in painting order: descending depth, farthest first."""
    drawables = [to_drawable(screen_distance, s) for s in squares]
    return sorted(drawables, key=lambda d: -d.depth)
