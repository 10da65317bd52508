"""
Base value types for the rubiks cube model.

This module defines the small immutable vocabulary shared by the cube model,
the rotation engine and the projection pipeline: colors, axes, rotation
senses, poles, moves, sticker loci and cells, together with the error types
raised when a caller breaks a contract.

Coordinate frame
----------------
Left-handed: +x points to the right, +y points up and +z points into the
screen. Positive rotations follow the right-hand rule about the positive
axis (the standard rotation matrix), so a positive quarter turn about Z
carries +x onto +y.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable, Tuple


class CubeError(ValueError):
    """Base class for cube contract violations."""


class InvalidMoveError(CubeError):
    """A move addresses a layer outside the cube."""


class DimensionError(CubeError):
    """A cube, layer or cell does not have the required shape."""


class ProjectionError(CubeError):
    """A point cannot be perspective-projected (at or behind the viewer)."""


class Color(Enum):
    """Sticker colors. HIDDEN marks faces that are never exposed."""
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    ORANGE = "orange"
    HIDDEN = "hidden"

    @property
    def is_physical(self) -> bool:
        return self is not Color.HIDDEN


@total_ordering
class Axis(Enum):
    """Coordinate axes, ordered X < Y < Z."""
    X = 0  # positive axis points to the right
    Y = 1  # positive axis points up
    Z = 2  # positive axis points into the screen

    def __lt__(self, other: "Axis") -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return self.value < other.value

    @property
    def plane(self) -> Tuple["Axis", "Axis"]:
        """
        The two axes spanning a layer orthogonal to this axis, as (a, b).

        (a, b, self) is cyclic, so a positive quarter turn carries a onto b.
        Layer grids are laid out with rows along b and columns along a.
        """
        return _PLANES[self]


_PLANES = {
    Axis.X: (Axis.Y, Axis.Z),
    Axis.Y: (Axis.Z, Axis.X),
    Axis.Z: (Axis.X, Axis.Y),
}


@total_ordering
class Rotation(Enum):
    """Quarter-turn senses: right-handed (POS90) and left-handed (NEG90)."""
    POS90 = 0
    NEG90 = 1

    def __lt__(self, other: "Rotation") -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self.value < other.value

    @property
    def inverse(self) -> "Rotation":
        return Rotation.NEG90 if self is Rotation.POS90 else Rotation.POS90


class Pole(Enum):
    """The two ends of an axis."""
    POS = "+"
    NEG = "-"

    @property
    def opposite(self) -> "Pole":
        return Pole.NEG if self is Pole.POS else Pole.POS


@dataclass(frozen=True, order=True)
class Move:
    """
    A complete layer-turn instruction.

    Ordering is structural: axis, then rotation sense, then depth.
    """
    axis: Axis
    rotation: Rotation
    depth: int

    def to_dict(self) -> dict:
        return {
            "axis": self.axis.name,
            "rotation": self.rotation.name,
            "depth": self.depth,
        }


@dataclass(frozen=True)
class Locus:
    """
    Address of one exposed sticker.

    `coord` is (row, col) within the face grid, using the layer layout of
    `Axis.plane`. A locus is only a lookup key; it never owns cube data.
    """
    axis: Axis
    pole: Pole
    coord: Tuple[int, int]

    def to_dict(self) -> dict:
        return {
            "axis": self.axis.name,
            "pole": self.pole.value,
            "coord": list(self.coord),
        }


# Face slots of a cell, in storage order.
FACE_ORDER: Tuple[Tuple[Axis, Pole], ...] = (
    (Axis.X, Pole.POS), (Axis.X, Pole.NEG),
    (Axis.Y, Pole.POS), (Axis.Y, Pole.NEG),
    (Axis.Z, Pole.POS), (Axis.Z, Pole.NEG),
)

FACE_INDEX = {face: i for i, face in enumerate(FACE_ORDER)}

# Canonical colors of the solved cube.
SOLVED_COLORS = {
    (Axis.X, Pole.POS): Color.RED,
    (Axis.X, Pole.NEG): Color.ORANGE,
    (Axis.Y, Pole.POS): Color.WHITE,
    (Axis.Y, Pole.NEG): Color.YELLOW,
    (Axis.Z, Pole.POS): Color.BLUE,
    (Axis.Z, Pole.NEG): Color.GREEN,
}


@dataclass(frozen=True)
class Cell:
    """Six face colors laid out as +x -x +y -y +z -z."""
    px: Color = Color.HIDDEN
    nx: Color = Color.HIDDEN
    py: Color = Color.HIDDEN
    ny: Color = Color.HIDDEN
    pz: Color = Color.HIDDEN
    nz: Color = Color.HIDDEN

    @staticmethod
    def from_colors(colors: Iterable[Color]) -> "Cell":
        colors = tuple(colors)
        if len(colors) != 6:
            raise DimensionError(f"A cell has exactly 6 faces, got {len(colors)}")
        return Cell(*colors)

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.px, self.nx, self.py, self.ny, self.pz, self.nz)

    def color(self, axis: Axis, pole: Pole) -> Color:
        """Color on the face pointing toward the given pole of an axis."""
        return self.colors[FACE_INDEX[(axis, pole)]]
