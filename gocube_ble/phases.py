"""Layer-by-layer solving phase detection.

Phases assume the reference orientation: white (U) on top, yellow (D) on the
bottom. Every predicate requires the one below it, so the detected phase is
the highest predicate that holds.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from .cube import PuzzleState
from .moves import Face

SIDE_FACES = (Face.F, Face.R, Face.B, Face.L)
EDGE_CELLS = (1, 3, 5, 7)

# Bottom corners as (face, cell) stickers.
BOTTOM_CORNERS = (
    ((Face.F, 8), (Face.R, 6), (Face.D, 2)),
    ((Face.R, 8), (Face.B, 6), (Face.D, 8)),
    ((Face.B, 8), (Face.L, 6), (Face.D, 6)),
    ((Face.L, 8), (Face.F, 6), (Face.D, 0)),
)


class Phase(IntEnum):
    """Solving milestone, ordered from scrambled to solved."""

    SCRAMBLED = 0
    WHITE_CROSS_DONE = 1
    FIRST_LAYER_DONE = 2
    SECOND_LAYER_DONE = 3
    BOTTOM_CROSS_DONE = 4
    BOTTOM_CORNERS_POSITIONED = 5
    BOTTOM_CORNERS_ORIENTED = 6
    SOLVED = 7

    @property
    def key(self) -> str:
        """Return a short identifier, e.g. for storage."""
        return _PHASE_KEYS[self]

    @property
    def display_name(self) -> str:
        """Return a human readable name."""
        return _PHASE_NAMES[self]


_PHASE_KEYS = {
    Phase.SCRAMBLED: "scrambled",
    Phase.WHITE_CROSS_DONE: "white_cross",
    Phase.FIRST_LAYER_DONE: "first_layer",
    Phase.SECOND_LAYER_DONE: "second_layer",
    Phase.BOTTOM_CROSS_DONE: "bottom_cross",
    Phase.BOTTOM_CORNERS_POSITIONED: "bottom_corners_positioned",
    Phase.BOTTOM_CORNERS_ORIENTED: "bottom_corners_oriented",
    Phase.SOLVED: "solved",
}

_PHASE_NAMES = {
    Phase.SCRAMBLED: "Scrambled",
    Phase.WHITE_CROSS_DONE: "White Cross",
    Phase.FIRST_LAYER_DONE: "First Layer",
    Phase.SECOND_LAYER_DONE: "Second Layer",
    Phase.BOTTOM_CROSS_DONE: "Bottom Cross",
    Phase.BOTTOM_CORNERS_POSITIONED: "Bottom Corners Positioned",
    Phase.BOTTOM_CORNERS_ORIENTED: "Bottom Corners Oriented",
    Phase.SOLVED: "Solved",
}


def _side_cells_match(state: PuzzleState, cells: tuple) -> bool:
    return all(
        state.faces[face][i] == state.center(face) for face in SIDE_FACES for i in cells
    )


def is_white_cross_done(state: PuzzleState) -> bool:
    """Top edges are top-colored and each side's top edge matches its center."""
    top = state.faces[Face.U]
    if any(top[i] != top[4] for i in EDGE_CELLS):
        return False
    return _side_cells_match(state, (1,))


def is_first_layer_done(state: PuzzleState) -> bool:
    """Whole top face plus the top row of every side face."""
    if not is_white_cross_done(state):
        return False
    top = state.faces[Face.U]
    if any(cell != top[4] for cell in top):
        return False
    return _side_cells_match(state, (0, 2))


def is_second_layer_done(state: PuzzleState) -> bool:
    """Middle row edges of every side face match their centers."""
    return is_first_layer_done(state) and _side_cells_match(state, (3, 5))


def is_bottom_cross_done(state: PuzzleState) -> bool:
    """The four bottom face edges show the bottom color."""
    if not is_second_layer_done(state):
        return False
    bottom = state.faces[Face.D]
    return all(bottom[i] == bottom[4] for i in EDGE_CELLS)


def are_bottom_corners_positioned(state: PuzzleState) -> bool:
    """Each bottom corner holds its three colors, in any orientation."""
    if not is_bottom_cross_done(state):
        return False
    for corner in BOTTOM_CORNERS:
        actual = Counter(state.faces[face][i] for face, i in corner)
        expected = Counter(state.center(face) for face, _ in corner)
        if actual != expected:
            return False
    return True


def are_bottom_corners_oriented(state: PuzzleState) -> bool:
    """Whole bottom face plus the bottom corners of every side face."""
    if not are_bottom_corners_positioned(state):
        return False
    bottom = state.faces[Face.D]
    if any(cell != bottom[4] for cell in bottom):
        return False
    return _side_cells_match(state, (6, 8))


_PREDICATES = (
    (Phase.SOLVED, PuzzleState.is_solved),
    (Phase.BOTTOM_CORNERS_ORIENTED, are_bottom_corners_oriented),
    (Phase.BOTTOM_CORNERS_POSITIONED, are_bottom_corners_positioned),
    (Phase.BOTTOM_CROSS_DONE, is_bottom_cross_done),
    (Phase.SECOND_LAYER_DONE, is_second_layer_done),
    (Phase.FIRST_LAYER_DONE, is_first_layer_done),
    (Phase.WHITE_CROSS_DONE, is_white_cross_done),
)


def detect_phase(state: PuzzleState) -> Phase:
    """Return the highest phase whose predicate holds."""
    for phase, predicate in _PREDICATES:
        if predicate(state):
            return phase
    return Phase.SCRAMBLED


@dataclass(frozen=True)
class PhaseProgress:
    """Which phase predicates currently hold."""

    white_cross: bool
    first_layer: bool
    second_layer: bool
    bottom_cross: bool
    bottom_corners_positioned: bool
    bottom_corners_oriented: bool
    solved: bool


def get_progress(state: PuzzleState) -> PhaseProgress:
    """Evaluate every phase predicate."""
    return PhaseProgress(
        white_cross=is_white_cross_done(state),
        first_layer=is_first_layer_done(state),
        second_layer=is_second_layer_done(state),
        bottom_cross=is_bottom_cross_done(state),
        bottom_corners_positioned=are_bottom_corners_positioned(state),
        bottom_corners_oriented=are_bottom_corners_oriented(state),
        solved=state.is_solved(),
    )
