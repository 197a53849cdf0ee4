"""Conversion of GoCube rotation events into canonical moves."""

from __future__ import annotations

from typing import Iterable, List

from .const import COLOR_FACE_MAPPING
from .decoder import RotationEvent
from .moves import Face, Move, Turn, merge_moves


def rotation_to_move(rotation: RotationEvent) -> Move:
    """Convert a rotation event to a move in the fixed reference orientation."""
    face = Face(COLOR_FACE_MAPPING[rotation.color])
    turn = Turn.CLOCKWISE if rotation.clockwise else Turn.COUNTER_CLOCKWISE
    return Move(face, turn)


def rotations_to_moves(rotations: Iterable[RotationEvent]) -> List[Move]:
    """Convert the rotations of one notification, merging same-face turns.

    Two clockwise turns of the same face become a half turn and a turn
    followed by its inverse disappears.
    """
    return merge_moves(rotation_to_move(rotation) for rotation in rotations)
