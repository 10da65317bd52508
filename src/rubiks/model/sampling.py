"""
Move sampling with an explicit random generator state.

`RandomSource` is an immutable snapshot of a numpy PCG64 bit generator.
Every draw returns the value together with the successor source, so callers
thread the generator state through their own state values instead of relying
on a global random module.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from rubiks.core.base import Axis, Move, Rotation

_AXES = list(Axis)
_ROTATIONS = list(Rotation)


def _frozen(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((key, _frozen(item)) for key, item in value.items()))
    return value


@dataclass(frozen=True)
class RandomSource:
    """Immutable pseudo-random generator state."""
    state: Dict[str, Any]

    def __hash__(self) -> int:
        return hash(_frozen(self.state))

    @staticmethod
    def from_seed(seed: Optional[int] = None) -> "RandomSource":
        return RandomSource(np.random.PCG64(seed).state)

    def next_int(self, low: int, high: int) -> Tuple[int, "RandomSource"]:
        """Uniform integer between low and high inclusive, and the successor source."""
        if high < low:
            low, high = high, low
        bit_generator = np.random.PCG64()
        bit_generator.state = copy.deepcopy(self.state)
        value = np.random.Generator(bit_generator).integers(low, high, endpoint=True)
        return int(value), RandomSource(bit_generator.state)


def _check_side(side_length: int) -> None:
    if not isinstance(side_length, int) or side_length < 1:
        raise ValueError(f"side_length must be a positive integer, got {side_length}")


def random_axis(gen: RandomSource) -> Tuple[Axis, RandomSource]:
    return random_axis_in(Axis.X, Axis.Z, gen)


def random_rotation(gen: RandomSource) -> Tuple[Rotation, RandomSource]:
    return random_rotation_in(Rotation.POS90, Rotation.NEG90, gen)


def random_move(side_length: int, gen: RandomSource) -> Tuple[Move, RandomSource]:
    """Uniform move over every axis, sense and depth in [0, side_length)."""
    _check_side(side_length)
    axis, gen = random_axis(gen)
    rotation, gen = random_rotation(gen)
    depth, gen = gen.next_int(0, side_length - 1)
    return Move(axis, rotation, depth), gen


def random_axis_in(lo: Axis, hi: Axis, gen: RandomSource) -> Tuple[Axis, RandomSource]:
    """Axis drawn from the inclusive range [lo, hi] of X < Y < Z."""
    i, gen = gen.next_int(_AXES.index(lo), _AXES.index(hi))
    return _AXES[i], gen


def random_rotation_in(lo: Rotation, hi: Rotation,
                       gen: RandomSource) -> Tuple[Rotation, RandomSource]:
    i, gen = gen.next_int(_ROTATIONS.index(lo), _ROTATIONS.index(hi))
    return _ROTATIONS[i], gen


def random_move_in(lo: Move, hi: Move, side_length: int,
                   gen: RandomSource) -> Tuple[Move, RandomSource]:
    """
    Move with each field drawn from the inclusive range between `lo` and `hi`.

    If either depth bound lies outside [0, side_length) the depth is drawn
    from the whole range instead.
    """
    _check_side(side_length)
    axis, gen = random_axis_in(lo.axis, hi.axis, gen)
    rotation, gen = random_rotation_in(lo.rotation, hi.rotation, gen)
    if 0 <= lo.depth < side_length and 0 <= hi.depth < side_length:
        depth, gen = gen.next_int(lo.depth, hi.depth)
    else:
        depth, gen = gen.next_int(0, side_length - 1)
    return Move(axis, rotation, depth), gen


def random_moves(side_length: int, count: int,
                 gen: RandomSource) -> Tuple[List[Move], RandomSource]:
    """`count` independent uniform moves."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    moves = []
    for _ in range(count):
        move, gen = random_move(side_length, gen)
        moves.append(move)
    return moves, gen
