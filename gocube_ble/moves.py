"""Canonical cube moves and notation helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional

from .exceptions import NotationError


class Face(str, Enum):
    """Cube face in standard notation."""

    R = "R"
    L = "L"
    U = "U"
    D = "D"
    F = "F"
    B = "B"

    def __str__(self) -> str:
        return self.value


class Turn(IntEnum):
    """Signed quarter-turn count of a face turn."""

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
    HALF = 2


TURN_SUFFIXES = {
    Turn.CLOCKWISE: "",
    Turn.COUNTER_CLOCKWISE: "'",
    Turn.HALF: "2",
}

SUFFIX_TURNS = {
    "": Turn.CLOCKWISE,
    "'": Turn.COUNTER_CLOCKWISE,
    "`": Turn.COUNTER_CLOCKWISE,
    "2": Turn.HALF,
    "2'": Turn.HALF,
    "2`": Turn.HALF,
}


@dataclass(frozen=True)
class Move:
    """A single face turn."""

    face: Face
    turn: Turn

    def notation(self) -> str:
        """Return the move in standard notation, e.g. R, R' or R2."""
        return str(self.face) + TURN_SUFFIXES.get(self.turn, "")

    def inverse(self) -> "Move":
        """Return the move that undoes this one."""
        if self.turn == Turn.CLOCKWISE:
            return Move(self.face, Turn.COUNTER_CLOCKWISE)
        if self.turn == Turn.COUNTER_CLOCKWISE:
            return Move(self.face, Turn.CLOCKWISE)
        return self

    def merge(self, other: "Move") -> Optional["Move"]:
        """Combine two turns of the same face.

        Returns None when the turns cancel out. The result keeps this move's
        face; merging moves of different faces is a ValueError.
        """
        if self.face != other.face:
            raise ValueError(f"cannot merge {self} with {other}: different faces")
        combined = (int(self.turn) + int(other.turn)) % 4
        if combined == 0:
            return None
        if combined == 3:
            return Move(self.face, Turn.COUNTER_CLOCKWISE)
        return Move(self.face, Turn(combined))

    def is_cancellation(self, other: "Move") -> bool:
        """Return whether other exactly undoes this move."""
        return self.face == other.face and self.merge(other) is None

    def __str__(self) -> str:
        return self.notation()


def parse_move(text: str) -> Move:
    """Parse a single move such as R, U' or F2."""
    token = text.strip()
    if not token:
        raise NotationError("empty move")
    try:
        face = Face(token[0].upper())
    except ValueError as err:
        raise NotationError(f"invalid face in move {text!r}") from err
    turn = SUFFIX_TURNS.get(token[1:])
    if turn is None:
        raise NotationError(f"invalid suffix in move {text!r}")
    return Move(face, turn)


def parse_moves(text: str) -> List[Move]:
    """Parse a whitespace separated sequence, skipping invalid tokens."""
    moves = []
    for token in text.split():
        try:
            moves.append(parse_move(token))
        except NotationError:
            continue
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    """Join moves into a space separated notation string."""
    return " ".join(move.notation() for move in moves)


def merge_moves(moves: Iterable[Move]) -> List[Move]:
    """Merge adjacent same-face moves, dropping turns that cancel."""
    result: List[Move] = []
    for move in moves:
        if result and result[-1].face == move.face:
            merged = result[-1].merge(move)
            if merged is None:
                result.pop()
            else:
                result[-1] = merged
        else:
            result.append(move)
    return result


R = Move(Face.R, Turn.CLOCKWISE)
R_PRIME = Move(Face.R, Turn.COUNTER_CLOCKWISE)
R2 = Move(Face.R, Turn.HALF)
L = Move(Face.L, Turn.CLOCKWISE)
L_PRIME = Move(Face.L, Turn.COUNTER_CLOCKWISE)
L2 = Move(Face.L, Turn.HALF)
U = Move(Face.U, Turn.CLOCKWISE)
U_PRIME = Move(Face.U, Turn.COUNTER_CLOCKWISE)
U2 = Move(Face.U, Turn.HALF)
D = Move(Face.D, Turn.CLOCKWISE)
D_PRIME = Move(Face.D, Turn.COUNTER_CLOCKWISE)
D2 = Move(Face.D, Turn.HALF)
F = Move(Face.F, Turn.CLOCKWISE)
F_PRIME = Move(Face.F, Turn.COUNTER_CLOCKWISE)
F2 = Move(Face.F, Turn.HALF)
B = Move(Face.B, Turn.CLOCKWISE)
B_PRIME = Move(Face.B, Turn.COUNTER_CLOCKWISE)
B2 = Move(Face.B, Turn.HALF)

SEXY_MOVE = (R, U, R_PRIME, U_PRIME)
INVERSE_SEXY_MOVE = (U, R, U_PRIME, R_PRIME)
T_PERM = (R, U, R_PRIME, U_PRIME, R_PRIME, F, R2, U_PRIME, R_PRIME, U_PRIME, R, U, R_PRIME, F_PRIME)
