"""
Move-history utilities: inversion, canonical simplification and a compact
text notation (``Z+0``, ``X-2``) used by the command line and session logs.
"""

import re
from typing import Iterable, List, Sequence

from rubiks.core.base import Axis, Move, Rotation

_MOVE_PATTERN = re.compile(r"^\s*([XYZ])\s*([+-])\s*(\d+)\s*$", re.IGNORECASE)


def inverse(move: Move) -> Move:
    return Move(move.axis, move.rotation.inverse, move.depth)


def inverse_sequence(moves: Sequence[Move]) -> List[Move]:
    """The sequence that undoes `moves`."""
    return [inverse(m) for m in reversed(moves)]


def _push(stack: List[Move], move: Move) -> None:
    if stack and stack[-1] == inverse(move):
        stack.pop()
    elif len(stack) >= 2 and stack[-1] == move and stack[-2] == move:
        # three identical quarter turns are one turn the other way
        del stack[-2:]
        _push(stack, inverse(move))
    else:
        stack.append(move)


def simplify(moves: Iterable[Move]) -> List[Move]:
    """
    Canonical form of a move sequence.

    Adjacent inverse pairs cancel and runs of three identical moves become a
    single inverse move (so four identical moves vanish). The result turns
    any cube into the same cube as the original sequence.
    """
    stack: List[Move] = []
    for move in moves:
        _push(stack, move)
    return stack


def format_move(move: Move) -> str:
    sign = "+" if move.rotation is Rotation.POS90 else "-"
    return f"{move.axis.name}{sign}{move.depth}"


def parse_move(text: str) -> Move:
    match = _MOVE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Invalid move notation: {text!r} (expected e.g. 'Z+0')")
    axis, sign, depth = match.groups()
    rotation = Rotation.POS90 if sign == "+" else Rotation.NEG90
    return Move(Axis[axis.upper()], rotation, int(depth))


def parse_moves(text: str) -> List[Move]:
    """Parse a whitespace or comma separated list of moves."""
    return [parse_move(token) for token in re.split(r"[\s,]+", text.strip()) if token]
