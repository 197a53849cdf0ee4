"""Facelet model of a 3x3 cube with move application."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Tuple

from .moves import Face, Move, Turn, parse_moves


class Color(IntEnum):
    """Sticker colors, numbered by the face they belong to when solved."""

    WHITE = 0
    YELLOW = 1
    GREEN = 2
    BLUE = 3
    RED = 4
    ORANGE = 5

    @property
    def letter(self) -> str:
        """Return the single-letter color code used in the ASCII net."""
        return self.name[0]


SOLVED_COLORS: Dict[Face, Color] = {
    Face.U: Color.WHITE,
    Face.D: Color.YELLOW,
    Face.F: Color.GREEN,
    Face.B: Color.BLUE,
    Face.R: Color.RED,
    Face.L: Color.ORANGE,
}
COLOR_FACES: Dict[Color, Face] = {color: face for face, color in SOLVED_COLORS.items()}

FACELET_ORDER = (Face.U, Face.R, Face.F, Face.D, Face.L, Face.B)

# Each chain reads "first receives second, second receives third, ..." and wraps.
FACE_CYCLES = (
    (0, 6, 8, 2),  # corners
    (1, 3, 7, 5),  # edges
)

_Triple = Tuple[Face, Tuple[int, int, int]]

ADJACENT_CYCLES: Dict[Face, Tuple[_Triple, _Triple, _Triple, _Triple]] = {
    Face.U: ((Face.F, (0, 1, 2)), (Face.R, (0, 1, 2)), (Face.B, (0, 1, 2)), (Face.L, (0, 1, 2))),
    Face.D: ((Face.F, (6, 7, 8)), (Face.L, (6, 7, 8)), (Face.B, (6, 7, 8)), (Face.R, (6, 7, 8))),
    Face.F: ((Face.U, (6, 7, 8)), (Face.L, (8, 5, 2)), (Face.D, (2, 1, 0)), (Face.R, (0, 3, 6))),
    Face.B: ((Face.U, (2, 1, 0)), (Face.R, (8, 5, 2)), (Face.D, (6, 7, 8)), (Face.L, (0, 3, 6))),
    Face.R: ((Face.U, (2, 5, 8)), (Face.F, (2, 5, 8)), (Face.D, (2, 5, 8)), (Face.B, (6, 3, 0))),
    Face.L: ((Face.U, (0, 3, 6)), (Face.B, (8, 5, 2)), (Face.D, (0, 3, 6)), (Face.F, (0, 3, 6))),
}


class PuzzleState:
    """Six faces of nine stickers each.

    Stickers are indexed row by row as seen when looking at the face::

        0 1 2
        3 4 5
        6 7 8

    Index 4 is the center, which no move changes.
    """

    def __init__(self) -> None:
        self.faces: Dict[Face, List[Color]] = {}
        self.reset()

    def reset(self) -> None:
        """Return the cube to the solved state."""
        self.faces = {face: [color] * 9 for face, color in SOLVED_COLORS.items()}

    def clone(self) -> "PuzzleState":
        """Return an independent copy."""
        other = PuzzleState.__new__(PuzzleState)
        other.faces = {face: cells[:] for face, cells in self.faces.items()}
        return other

    def center(self, face: Face) -> Color:
        """Return the center color of a face."""
        return self.faces[face][4]

    def is_solved(self) -> bool:
        """Return whether every sticker matches its face center."""
        return all(
            all(cell == cells[4] for cell in cells) for cells in self.faces.values()
        )

    def apply(self, *moves: Move) -> None:
        """Apply moves in order."""
        for move in moves:
            self.apply_move(move)

    def apply_notation(self, notation: str) -> None:
        """Apply a space separated move sequence such as "R U R' U'"."""
        self.apply(*parse_moves(notation))

    def apply_move(self, move: Move) -> None:
        """Apply one move; unknown faces or turns leave the state unchanged."""
        if move.face not in ADJACENT_CYCLES:
            return
        if move.turn == Turn.CLOCKWISE:
            self._turn(move.face, 1)
        elif move.turn == Turn.COUNTER_CLOCKWISE:
            self._turn(move.face, -1)
        elif move.turn == Turn.HALF:
            self._turn(move.face, 1)
            self._turn(move.face, 1)

    def _turn(self, face: Face, direction: int) -> None:
        cells = self.faces[face]
        for cycle in FACE_CYCLES:
            values = [cells[i] for i in cycle]
            for i, value in zip(cycle, _rotate(values, direction)):
                cells[i] = value

        ring = ADJACENT_CYCLES[face]
        values = [[self.faces[side][i] for i in indices] for side, indices in ring]
        for (side, indices), triple in zip(ring, _rotate(values, direction)):
            for i, value in zip(indices, triple):
                self.faces[side][i] = value

    def to_facelet_string(self) -> str:
        """Return the 54 character URFDLB facelet string."""
        return "".join(
            COLOR_FACES[cell].value
            for face in FACELET_ORDER
            for cell in self.faces[face]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.faces == other.faces

    def __str__(self) -> str:
        def row(face: Face, r: int) -> str:
            return " ".join(cell.letter for cell in self.faces[face][r * 3:r * 3 + 3])

        lines = []
        for r in range(3):
            lines.append(" " * 6 + row(Face.U, r))
        for r in range(3):
            lines.append(" ".join(row(face, r) for face in (Face.L, Face.F, Face.R, Face.B)))
        for r in range(3):
            lines.append(" " * 6 + row(Face.D, r))
        return "\n".join(lines)


def _rotate(values: list, direction: int) -> list:
    """Shift a chain so that each slot receives the next slot's value."""
    if direction > 0:
        return values[1:] + values[:1]
    return values[-1:] + values[:-1]
